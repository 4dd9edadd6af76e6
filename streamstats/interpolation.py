# SPDX-License-Identifier: MIT
"""Overflow-safe midpoint and linear interpolation between sorted values."""

from __future__ import annotations

import math

__all__ = ["interpolate", "mean", "mean_int"]


def mean(x: float, y: float) -> float:
    """Arithmetic mean of ``x`` and ``y`` avoiding intermediate overflow.

    The fallback path halves each operand first; it can lose a bit on
    sub-normal inputs but is only taken when ``x + y`` is not finite.
    """

    v = x + y
    if math.isfinite(v):
        return v * 0.5
    return x * 0.5 + y * 0.5


def mean_int(x: int, y: int) -> float:
    """Arithmetic mean of two integers.

    The sum is formed exactly with Python integers before halving so the
    addition of two 32-bit values can never wrap.
    """

    return (int(x) + int(y)) * 0.5


def interpolate(a: float, b: float, t: float) -> float:
    """Linear interpolation ``a + t * (b - a)`` between sorted ``a <= b``.

    Parameters
    ----------
    a, b:
        Lower and upper value.  The ordering is assumed, not checked.
    t:
        Interpolant in the open interval ``(0, 1)``.  The end points are not
        special cased.

    Notes
    -----
    Follows the well-behaved ``lerp`` formulation of P0811R2 restricted to
    sorted arguments.  ``a + t * (b - a)`` can overflow when ``a`` and ``b``
    carry the largest exponent with opposite signs, and ``t * b + (1 - t) * a``
    is not monotonic unless ``a * b <= 0``.  Picking the form by the sign of
    the arguments gives a result that is bounded, monotonic and determinate
    for all finite input.  Equal infinities return ``a`` rather than the NaN
    produced by ``inf - inf``.
    """

    if a <= 0 <= b:
        # a=-0.0, b=0.0, t=0.0 returns 0.0; t is never 0 here.
        return t * b + (1.0 - t) * a

    # Same sign and at least one non-zero
    if a == b:
        return a

    return a + t * (b - a)
