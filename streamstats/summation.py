# SPDX-License-Identifier: MIT
"""Compensated summation of floating-point streams.

:class:`Sum` keeps two floats: the plain running total and a Neumaier
compensation term holding the rounding residue that the plain addition
dropped.  The best estimate of the sum is ``total + compensation``; the
error bound no longer grows with the number of terms the way naive
summation does.

Special values follow ordinary floating-point arithmetic on the running
total:

* any NaN makes every later result NaN;
* infinities of opposite sign give NaN;
* infinities of the same sign give that infinity.

When finite terms overflow to an infinity the outcome depends on the input
order (``[MAX, MAX, -MAX]`` overflows while ``[MAX, -MAX, MAX]`` does not).
This is intended; the summation is not reordered to hide it.

Two sums built from disjoint streams can be merged with :meth:`Sum.combine`.
The other total is folded through the same Neumaier step, so the merged
state carries a valid compensation instead of adding the two estimates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from .numerics import neumaier_step, range_values
from .statistic import DoubleResultReads, accept_all, check_same_type

__all__ = ["Sum", "SumOfSquares"]


@dataclass(slots=True)
class Sum(DoubleResultReads):
    """Running sum with Neumaier compensation.

    Notes
    -----
    Instances are mutable and owned by a single thread.  Partial sums from
    parallel partitions are merged with :meth:`combine` once each partition
    has finished.
    """

    _total: float = field(default=0.0, init=False, repr=False)
    _compensation: float = field(default=0.0, init=False, repr=False)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def create(cls) -> "Sum":
        """Return an empty sum (result ``0.0``)."""

        return cls()

    @classmethod
    def of(cls, *values: float) -> "Sum":
        return accept_all(cls(), values)

    @classmethod
    def of_range(cls, values: Sequence[float], start: int, stop: int) -> "Sum":
        """Sum ``values[start:stop]``; raises :class:`IndexError` on a bad range."""

        return accept_all(cls(), range_values(values, start, stop))

    # ------------------------------------------------------------------
    # Mutation helpers
    # ------------------------------------------------------------------
    def accept(self, value: float) -> None:
        """Add a single value into the sum."""

        self._total, self._compensation = neumaier_step(
            self._total, self._compensation, float(value)
        )

    def combine(self, other: "Sum") -> "Sum":
        """Merge the sum of another stream into this one."""

        check_same_type(self, other)
        self._total, self._compensation = neumaier_step(
            self._total, self._compensation, other._total
        )
        self._compensation += other._compensation
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def as_double(self) -> float:
        """Compensated total, or the plain total if the estimate is non-finite."""

        result = self._total + self._compensation
        if math.isfinite(result):
            return result
        # Once the total is non-finite the compensation is meaningless (inf - inf).
        return self._total

    @property
    def compensation(self) -> float:
        """Expose the current compensation term (mostly for diagnostics)."""

        return self._compensation


@dataclass(slots=True)
class SumOfSquares(DoubleResultReads):
    """Compensated sum of the squares of the accepted values."""

    _sum: Sum = field(default_factory=Sum, init=False, repr=False)

    @classmethod
    def create(cls) -> "SumOfSquares":
        return cls()

    @classmethod
    def of(cls, *values: float) -> "SumOfSquares":
        return accept_all(cls(), values)

    @classmethod
    def of_range(cls, values: Sequence[float], start: int, stop: int) -> "SumOfSquares":
        return accept_all(cls(), range_values(values, start, stop))

    def accept(self, value: float) -> None:
        value = float(value)
        self._sum.accept(value * value)

    def combine(self, other: "SumOfSquares") -> "SumOfSquares":
        check_same_type(self, other)
        self._sum.combine(other._sum)
        return self

    def as_double(self) -> float:
        return self._sum.as_double()
