"""MCP Numerics: root finders and a simplex tableau LP solver."""

import logging

from .equation import bisection, newton
from .errors import (
    ConvergenceError,
    InvalidRangeError,
    NumericsError,
    ObjectiveRequiredError,
    SolutionNotFoundError,
    UnboundedError,
    UnsupportedProblemError,
)
from .lp import LinearProblem, LinearProblemBuilder, Simplex, simplex_solve, solve_with_highs
from .schemas import LPSolution, SolveOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "bisection",
    "newton",
    "LinearProblem",
    "LinearProblemBuilder",
    "Simplex",
    "simplex_solve",
    "solve_with_highs",
    "LPSolution",
    "SolveOptions",
    "NumericsError",
    "ObjectiveRequiredError",
    "InvalidRangeError",
    "SolutionNotFoundError",
    "UnboundedError",
    "ConvergenceError",
    "UnsupportedProblemError",
]
