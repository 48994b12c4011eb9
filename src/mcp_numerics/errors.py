"""Error types raised by mcp_numerics solvers."""


class NumericsError(Exception):
    """Base class for all recoverable solver errors."""


class ObjectiveRequiredError(NumericsError, ValueError):
    def __init__(self) -> None:
        super().__init__("Objective function is required.")


class InvalidRangeError(NumericsError, ValueError):
    def __init__(self, left: float, right: float) -> None:
        super().__init__(f"Invalid bracket: left {left} > right {right}.")
        self.left = left
        self.right = right


class SolutionNotFoundError(NumericsError):
    """The bracket does not contain a sign change."""


class UnboundedError(NumericsError):
    """Problem is unbound along the entering column."""

    def __init__(self, column: int) -> None:
        super().__init__(f"Problem is unbound along column {column}.")
        self.column = column


class ConvergenceError(NumericsError):
    """Iterative method stopped before reaching the requested tolerance."""


class UnsupportedProblemError(NumericsError, ValueError):
    """Linear problem needs a phase-one procedure the tableau engine lacks."""
