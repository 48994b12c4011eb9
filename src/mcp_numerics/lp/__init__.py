"""Linear programming: problem model, simplex tableau and HiGHS baseline."""

from .problem import LinearProblem, LinearProblemBuilder
from .tableau import Simplex, simplex_solve
from .baseline import solve_with_highs

__all__ = [
    "LinearProblem",
    "LinearProblemBuilder",
    "Simplex",
    "simplex_solve",
    "solve_with_highs",
]
