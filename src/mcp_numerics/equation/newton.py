import logging
import math

from ..errors import ConvergenceError
from ..schemas import RealFunction

logger = logging.getLogger(__name__)


def newton(
    function: RealFunction,
    derivative: RealFunction,
    initial_value: float,
    tol: float,
    *,
    max_iters: int = 100,
) -> float:
    """Newton-Raphson iteration x <- x - f(x)/f'(x) until |f(x)| <= tol."""
    x = initial_value
    value = function(x)
    iteration = 0
    while abs(value) > tol:
        if iteration >= max_iters:
            raise ConvergenceError(
                f"Newton's method did not converge within {max_iters} iterations (x={x}, f(x)={value})."
            )
        slope = derivative(x)
        if slope == 0 or not math.isfinite(slope):
            raise ConvergenceError(f"Derivative is {slope} at x={x}.")
        x = x - value / slope
        value = function(x)
        if not math.isfinite(value):
            raise ConvergenceError(f"Iteration diverged at x={x}.")
        iteration += 1

    logger.debug("Newton converged to %g after %d iterations", x, iteration)
    return x
