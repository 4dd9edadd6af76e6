# SPDX-License-Identifier: MIT
"""Low-level numeric helpers shared by the statistic accumulators.

The helpers fall into three groups:

* **Compensated summation.**  :func:`neumaier_step` folds a value into a
  ``(total, compensation)`` pair.  The compensation captures the rounding
  error lost by the plain floating-point addition so that the best estimate
  of the sum is ``total + compensation``.
* **Exact integer conversion.**  Statistic results are stored as floats but
  may be read back as bounded integers.  :func:`round_to_integer` rounds
  half-way cases towards positive infinity and the ``to_*_exact`` functions
  raise :class:`OverflowError` when the rounded value does not fit.
* **Ordering.**  :func:`total_order_key` implements the IEEE-754 total order
  used by the floating extremum trackers and the order statistics: ``-0.0``
  sorts before ``0.0`` and NaN sorts above every other value.
"""

from __future__ import annotations

import math
from typing import Sequence

__all__ = [
    "INT_MAX",
    "INT_MIN",
    "LONG_MAX",
    "LONG_MIN",
    "check_from_to_index",
    "neumaier_step",
    "range_values",
    "round_to_integer",
    "to_big_integer_exact",
    "to_int_exact",
    "to_long_exact",
    "total_order_key",
    "zero_variance",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_TWO_POW_31 = float(2**31)
_TWO_POW_63 = float(2**63)


def neumaier_step(total: float, compensation: float, value: float) -> tuple[float, float]:
    """Return the updated total and compensation using Neumaier summation."""

    t = total + value
    if abs(total) >= abs(value):
        compensation += (total - t) + value
    else:
        compensation += (value - t) + total
    return t, compensation


def round_to_integer(x: float) -> float:
    """Round ``x`` to an integral float, ties towards positive infinity.

    The sign of zero is not preserved for ``-0.5 < x <= -0.0`` as the result
    is only ever consumed as an integer.
    """

    y = math.floor(x)
    if x - y >= 0.5:
        return y + 1.0
    return float(y)


def to_int_exact(x: float) -> int:
    """Convert ``x`` to a signed 32-bit integer or raise :class:`OverflowError`."""

    if not math.isfinite(x):
        raise OverflowError(f"integer overflow: {x}")
    r = round_to_integer(x)
    if -_TWO_POW_31 <= r < _TWO_POW_31:
        return int(r)
    raise OverflowError(f"integer overflow: {x}")


def to_long_exact(x: float) -> int:
    """Convert ``x`` to a signed 64-bit integer or raise :class:`OverflowError`."""

    if not math.isfinite(x):
        raise OverflowError(f"long integer overflow: {x}")
    r = round_to_integer(x)
    if -_TWO_POW_63 <= r < _TWO_POW_63:
        return int(r)
    raise OverflowError(f"long integer overflow: {x}")


def to_big_integer_exact(x: float) -> int:
    """Convert ``x`` to an arbitrary precision integer.

    Only non-finite values fail; every finite double has an exact integer
    value once rounded.
    """

    if not math.isfinite(x):
        raise OverflowError(f"BigInteger overflow: {x}")
    return int(round_to_integer(x))


def total_order_key(value: float) -> tuple[int, float]:
    """Sort key realising the IEEE-754 total order for floats.

    Negative zero sorts before positive zero and every NaN sorts above
    ``+inf``; NaNs compare equal to each other.
    """

    if math.isnan(value):
        return (2, 0.0)
    if value == 0.0:
        return (1, 0.0) if math.copysign(1.0, value) > 0 else (0, 0.0)
    return (0, value) if value < 0 else (1, value)


def check_from_to_index(start: int, stop: int, length: int) -> None:
    """Validate the half-open range ``[start, stop)`` against ``length``.

    Raises :class:`IndexError` instead of clamping so callers learn about
    invalid ranges immediately.
    """

    if start < 0 or start > stop or stop > length:
        raise IndexError(f"Range [{start}, {stop}) out of bounds for length {length}")


def range_values(values: Sequence[float], start: int, stop: int) -> Sequence[float]:
    """Return ``values[start:stop]`` after validating the range."""

    check_from_to_index(start, stop, len(values))
    return values[start:stop]


def zero_variance(m1: float, m2: float) -> bool:
    """True when the mean squared deviation ``m2`` is negligible against ``m1``.

    The spread is compared with the squared precision of the mean (15 decimal
    digits) rather than an absolute threshold, so the test scales with the
    magnitude of the sample.
    """

    scaled = 1e-15 * m1
    return m2 <= scaled * scaled
