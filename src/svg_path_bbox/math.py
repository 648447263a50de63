# %%
"""Mathematical functions for the Bezier bounding box."""

# allow mathematical names, which would be invalid otherwise
# ruff: noqa: N803
from __future__ import annotations

import math
import os
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import numba
from numba import njit
from numpy import nan

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

# for easier access
f64 = numba.types.float64
Tuple = numba.types.Tuple

if os.environ.get("COVERAGE_DEBUG", "0") == "1":

    def njit(  # pylint: disable=function-redefined
        *args: Any, **kwargs: Any
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """Dummy decorator if numba is deactivated."""
        del args, kwargs  # as it is just a debug tool, args and kwargs are not used

        def decorator(func: Callable[P, R]) -> Callable[P, R]:
            return func

        return decorator


@njit(f64(f64, f64, f64, f64, f64))
def cubic_bezier(t: float, P0: float, P1: float, P2: float, P3: float) -> float:
    """Evaluate the cubic Bezier curve at t."""
    return (
        (1 - t) ** 3 * P0
        + 3 * (1 - t) ** 2 * t * P1
        + 3 * (1 - t) * t**2 * P2
        + t**3 * P3
    )


@njit(Tuple([f64, f64, f64])(f64, f64, f64, f64))
def derivative_coefficients(
    P0: float, P1: float, P2: float, P3: float
) -> tuple[float, float, float]:
    """Get the coefficients of the derivative of the cubic Bezier curve.

    1. derivative: -3(1-t)^2P0 + 3(1-t)^2P1 - 6t(1-t)P1 + 6t(1-t)P2 - 3t^2P2 + 3t^2P3
    to the form: at^2 + bt + c
    gives the coefficients: a, b, c
    """
    return (
        -3 * P0 + 9 * P1 - 9 * P2 + 3 * P3,
        6 * P0 - 12 * P1 + 6 * P2,
        3 * P1 - 3 * P0,
    )


@njit(Tuple([f64, f64])(f64, f64, f64))
def solve_quadratic_from_coeffs(a: float, b: float, c: float) -> tuple[float, float]:
    """Solve a quadratic equation from the coefficients.

    Returns:
        A tuple with the two solutions of the quadratic equation.
        NaN if a solution is non-real or does not exist.
    """
    # Solve the quadratic equation ax^2 + bx + c = 0
    # -b +- sqrt(b^2 - 4ac) / 2a
    if a == 0:
        if b == 0:
            return (nan, nan)  # No solution if both `a` and `b` are zero
        # single solution
        return (-c / b, nan)

    discriminant = b**2 - 4 * a * c
    if discriminant < 0:
        # No solutions
        return (nan, nan)

    sqrt_discriminant = math.sqrt(discriminant)
    t1 = (-b + sqrt_discriminant) / (2 * a)
    t2 = (-b - sqrt_discriminant) / (2 * a)
    # two solutions, equal for a zero discriminant
    return (t1, t2)


@njit(Tuple([f64, f64])(f64, f64, f64, f64))
def cubic_bezier_extrema(
    P0: float, P1: float, P2: float, P3: float
) -> tuple[float, float]:
    """Get the interior extreme values of a cubic Bezier curve along one axis.

    Only roots of the derivative strictly inside (0, 1) count, the endpoints
    are handled by the caller.

    Returns:
        A tuple with up to two curve values, NaN where no extremum exists.
    """
    a, b, c = derivative_coefficients(P0, P1, P2, P3)
    t1, t2 = solve_quadratic_from_coeffs(a, b, c)

    # NaN fails both comparisons
    e1 = cubic_bezier(t1, P0, P1, P2, P3) if 0 < t1 < 1 else nan
    e2 = cubic_bezier(t2, P0, P1, P2, P3) if 0 < t2 < 1 else nan

    return (e1, e2)


@njit(Tuple([f64, f64])(f64, f64, f64))
def elevate_quadratic(P0: float, P1: float, P2: float) -> tuple[float, float]:
    """Get the two cubic control values of a quadratic Bezier curve.

    Exact degree elevation: C1 = P0 + 2/3 (P1 - P0), C2 = C1 + 1/3 (P2 - P0)
    """
    C1 = P0 + 2 / 3 * (P1 - P0)
    C2 = C1 + 1 / 3 * (P2 - P0)
    return (C1, C2)
