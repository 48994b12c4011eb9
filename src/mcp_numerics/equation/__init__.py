"""Scalar root finders."""

from .bisection import bisection
from .newton import newton

__all__ = ["bisection", "newton"]
