# SPDX-License-Identifier: MIT
"""Online, combinable moment accumulators.

:class:`FirstMoment` tracks the count and running mean of a stream;
:class:`MomentAccumulator` adds the sum of squared deviations from the mean
(``m2``) on top of it, :class:`ThirdMomentAccumulator` the sum of cubed
deviations (``m3``) and :class:`FourthMomentAccumulator` the sum of fourth
power deviations (``m4``).  None of them store the values.

Single-value update (Welford / West), for a new value ``x``::

    n'    = n + 1
    dev   = x - mean
    mean' = mean + dev / n'
    m2'   = m2 + (n' - 1) * dev * dev / n'

Pairwise combine of ``A`` and ``B`` (Chan, Golub & LeVeque)::

    n     = nA + nB
    delta = meanB - meanA
    mean  = meanA + delta * nB / n
    m2    = m2A + m2B + delta**2 * nA * nB / n

The higher moments use the matching updates of Terriberry and Pébay.

Only half of the deviation is ever stored: ``(x * 0.5 - mean * 0.5)``
cannot overflow for finite operands, while ``x - mean`` can once the two
values have opposite signs near ``±sys.float_info.max``.  The powers of two
that restore the full deviation are folded into the update constants, which
are exact scalings.  The running mean of finite input is therefore always
finite.

Non-finite input is not an error.  It drives the running mean to ``±inf`` or
NaN; the mean is then reported from a plain running sum of the values, so
``[inf, 1]`` has mean ``inf`` and ``[inf, -inf]`` has mean NaN, and the sums
of deviation powers are reported as NaN.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from .numerics import range_values
from .statistic import accept_all, check_same_type

__all__ = [
    "FirstMoment",
    "FourthMomentAccumulator",
    "MomentAccumulator",
    "ThirdMomentAccumulator",
]


@dataclass(slots=True)
class FirstMoment:
    """Count and running mean of a stream of doubles."""

    n: int = 0
    m1: float = 0.0
    # Plain sum of the values; only read once m1 is non-finite.
    non_finite_value: float = 0.0
    # Half deviation of the latest value from the previous mean, and that
    # half deviation divided by the new count.
    half_dev: float = field(default=0.0, repr=False)
    half_n_dev: float = field(default=0.0, repr=False)

    def accept(self, value: float) -> None:
        value = float(value)
        self.n += 1
        self.non_finite_value += value
        self.half_dev = value * 0.5 - self.m1 * 0.5
        self.half_n_dev = self.half_dev / self.n
        self.m1 += self.half_n_dev * 2

    def half_difference(self, other: "FirstMoment") -> float:
        """Half of ``self.m1 - other.m1``, free of intermediate overflow."""

        return self.m1 * 0.5 - other.m1 * 0.5

    def combine(self, other: "FirstMoment") -> "FirstMoment":
        if self.n == 0:
            self.n = other.n
            self.m1 = other.m1
            self.non_finite_value = other.non_finite_value
        elif other.n != 0:
            half_diff = self.half_difference(other)
            self.n += other.n
            # Half of the merged mean is bounded by half the largest value.
            self.m1 = (self.m1 * 0.5 - (other.n / self.n) * half_diff) * 2
            self.non_finite_value += other.non_finite_value
        return self

    def mean(self) -> float:
        """Mean of the accepted values; NaN when empty."""

        if math.isfinite(self.m1):
            return math.nan if self.n == 0 else self.m1
        # Only reachable after a non-finite value was accepted.
        return self.non_finite_value


@dataclass(slots=True)
class MomentAccumulator:
    """Count, mean and sum of squared deviations of a stream of doubles.

    Parameters
    ----------
    m2:
        Running sum of squared deviations from the mean.  Never negative for
        finite input.

    Notes
    -----
    The :class:`FirstMoment` in ``first`` is created with the accumulator and
    owned exclusively by it.

    Instances are not synchronised.  For a parallel reduction build one
    accumulator per partition and merge them with :meth:`combine` after the
    partitions are complete.  The merged result matches sequential
    accumulation up to rounding; the last bits may depend on the merge order.
    """

    first: FirstMoment = field(default_factory=FirstMoment, init=False)
    m2: float = 0.0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def create(cls):
        return cls()

    @classmethod
    def of(cls, *values: float):
        return accept_all(cls(), values)

    @classmethod
    def of_range(cls, values: Sequence[float], start: int, stop: int):
        return accept_all(cls(), range_values(values, start, stop))

    # ------------------------------------------------------------------
    # Mutation helpers
    # ------------------------------------------------------------------
    def accept(self, value: float) -> None:
        first = self.first
        first.accept(value)
        # (n - 1) * dev * dev / n with dev = 2 * half_dev
        self.m2 += (first.half_dev * first.half_n_dev) * (4 * (first.n - 1))

    def combine(self, other):
        """Merge an accumulator built from a disjoint set of values."""

        check_same_type(self, other)
        n_a = self.first.n
        n_b = other.first.n
        if n_a == 0:
            self.m2 = other.m2
        elif n_b != 0:
            half_diff = self.first.half_difference(other.first)
            self.m2 += other.m2 + (half_diff * half_diff) * ((n_a * n_b) / (n_a + n_b)) * 4
        self.first.combine(other.first)
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def n(self) -> int:
        return self.first.n

    def mean(self) -> float:
        return self.first.mean()

    def sum_of_squared_deviations(self) -> float:
        """``m2``, or NaN once the running mean is non-finite."""

        return self.m2 if math.isfinite(self.first.m1) else math.nan

    def variance(self, biased: bool = False) -> float:
        """Variance with denominator ``n`` (biased) or ``n - 1``.

        An empty accumulator has NaN variance.  A single finite value has a
        variance of exactly zero.
        """

        m2 = self.sum_of_squared_deviations()
        n = self.first.n
        if n == 0:
            return math.nan
        if n == 1:
            # Non-finite m2 propagates; avoids the n - 1 == 0 division.
            return 0.0 if math.isfinite(m2) else m2
        return m2 / n if biased else m2 / (n - 1)


@dataclass(slots=True)
class ThirdMomentAccumulator(MomentAccumulator):
    """Adds the running sum of cubed deviations from the mean."""

    m3: float = 0.0

    def accept(self, value: float) -> None:
        m2 = self.m2
        n0 = self.first.n
        MomentAccumulator.accept(self, value)
        first = self.first
        self.m3 = (
            self.m3
            - m2 * first.half_n_dev * 6
            + (n0 - 1.0) * n0 * first.half_n_dev * first.half_n_dev * first.half_dev * 8
        )

    def combine(self, other):
        check_same_type(self, other)
        if self.first.n == 0:
            self.m3 = other.m3
        elif other.first.n != 0:
            half_diff = self.first.half_difference(other.first)
            self.m3 += other.m3
            if half_diff != 0:
                n1 = float(self.first.n)
                n2 = float(other.first.n)
                if n1 == n2:
                    self.m3 += (self.m2 - other.m2) * half_diff * 3
                else:
                    n = n1 + n2
                    dm = 2 * (half_diff / n)
                    self.m3 += (self.m2 * n2 - other.m2 * n1) * dm * 3 + (n2 - n1) * (
                        n1 * n2
                    ) * dm * dm * dm * n
        MomentAccumulator.combine(self, other)
        return self

    def sum_of_cubed_deviations(self) -> float:
        """``m3``, or NaN once the running mean is non-finite."""

        return self.m3 if math.isfinite(self.first.m1) else math.nan


@dataclass(slots=True)
class FourthMomentAccumulator(ThirdMomentAccumulator):
    """Adds the running sum of fourth power deviations from the mean."""

    m4: float = 0.0

    def accept(self, value: float) -> None:
        m2 = self.m2
        m3 = self.m3
        n0 = self.first.n
        ThirdMomentAccumulator.accept(self, value)
        first = self.first
        n = first.n
        nd = first.half_n_dev
        self.m4 = (
            self.m4
            - m3 * nd * 8
            + m2 * nd * nd * 24
            + n0 * (n * n - 3 * n0) * nd * nd * nd * first.half_dev * 16
        )

    def combine(self, other):
        check_same_type(self, other)
        if self.first.n == 0:
            self.m4 = other.m4
        elif other.first.n != 0:
            h = self.first.half_difference(other.first)
            self.m4 += other.m4
            if h != 0:
                n1 = float(self.first.n)
                n2 = float(other.first.n)
                if n1 == n2:
                    self.m4 += (
                        (self.m3 - other.m3) * h * 4
                        + (self.m2 + other.m2) * (h * h) * 6
                        + (h * h) * (h * h) * n1 * 2
                    )
                else:
                    n = n1 + n2
                    dm = 2 * (h / n)
                    self.m4 += (
                        (self.m3 * n2 - other.m3 * n1) * dm * 4
                        + (n2 * n2 * self.m2 + n1 * n1 * other.m2) * (dm * dm) * 6
                        + (n1 * n2) * (n * n - 3 * (n1 * n2)) * (dm * dm) * (dm * dm) * n
                    )
        ThirdMomentAccumulator.combine(self, other)
        return self

    def sum_of_fourth_deviations(self) -> float:
        """``m4``, or NaN once the running mean is non-finite."""

        return self.m4 if math.isfinite(self.first.m1) else math.nan
