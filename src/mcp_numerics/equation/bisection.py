import logging

from ..errors import ConvergenceError, InvalidRangeError, SolutionNotFoundError
from ..schemas import RealFunction

logger = logging.getLogger(__name__)


def bisection(
    function: RealFunction,
    left: float,
    right: float,
    tol: float,
    *,
    max_iters: int = 1_000,
) -> float:
    """
    Find a root of `function` inside the bracket [left, right].

    Halves the bracket, keeping the half whose endpoints differ in sign, until the
    midpoint satisfies |f(mid)| < tol.

    Raises:
        InvalidRangeError: left > right.
        SolutionNotFoundError: f(left) and f(right) share a sign.
        ConvergenceError: tolerance unreachable at floating-point resolution
            or within `max_iters` halvings.
    """

    if left > right:
        raise InvalidRangeError(left, right)

    f_left = function(left)
    f_right = function(right)
    if f_left * f_right > 0:
        raise SolutionNotFoundError(
            f"No sign change on [{left}, {right}]: f(left)={f_left}, f(right)={f_right}."
        )
    # A root sitting on an endpoint would otherwise be lost by the halving rule.
    if abs(f_left) < tol:
        return left
    if abs(f_right) < tol:
        return right

    for iteration in range(1, max_iters + 1):
        mid = (left + right) / 2.0
        f_mid = function(mid)
        if abs(f_mid) < tol:
            logger.debug("Bisection converged to %g after %d iterations", mid, iteration)
            return mid
        if mid == left or mid == right:
            raise ConvergenceError(
                f"Bracket collapsed at {mid} with |f|={abs(f_mid)} above tolerance {tol}."
            )
        if f_left * f_mid < 0:
            right, f_right = mid, f_mid
        else:
            left, f_left = mid, f_mid

    raise ConvergenceError(f"Bisection did not converge within {max_iters} iterations.")
