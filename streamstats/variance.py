# SPDX-License-Identifier: MIT
"""Mean, variance, standard deviation, skewness and kurtosis of doubles.

These are thin statistic wrappers over :mod:`streamstats.moments`.  All the
state lives in the wrapped accumulator; the wrappers only apply the
denominator policy of their :class:`~streamstats.config.StatisticsConfiguration`
when a result is read.

Special values
--------------

==========================  ==========  ==============================
Input                        Mean        Variance / std. deviation
==========================  ==========  ==============================
no values                    NaN         NaN
one finite value             the value   0.0 exactly
any NaN                      NaN         NaN
``inf`` (one sign only)      ``±inf``    NaN
``+inf`` and ``-inf``        NaN         NaN
==========================  ==========  ==============================

Finite values whose spread exceeds the float range keep a finite mean and
report an infinite variance.

:class:`Skewness` needs at least three values (two when biased) and
:class:`Kurtosis` at least four (two when biased); fewer give NaN.  Both are
NaN for any non-finite input and for a sample with no spread, that is when
the mean squared deviation is below the squared precision of the mean.
"""

from __future__ import annotations

import math
from typing import ClassVar, Optional, Sequence

from .config import StatisticsConfiguration
from .moments import (
    FirstMoment,
    FourthMomentAccumulator,
    MomentAccumulator,
    ThirdMomentAccumulator,
)
from .numerics import range_values, zero_variance
from .statistic import DoubleResultReads, accept_all, check_same_type

__all__ = ["Kurtosis", "Mean", "Skewness", "StandardDeviation", "Variance"]


class Mean(DoubleResultReads):
    """Arithmetic mean computed with the online first-moment update."""

    __slots__ = ("_moment",)

    def __init__(self) -> None:
        self._moment = FirstMoment()

    @classmethod
    def create(cls) -> "Mean":
        return cls()

    @classmethod
    def of(cls, *values: float) -> "Mean":
        return accept_all(cls(), values)

    @classmethod
    def of_range(cls, values: Sequence[float], start: int, stop: int) -> "Mean":
        return accept_all(cls(), range_values(values, start, stop))

    def accept(self, value: float) -> None:
        self._moment.accept(value)

    def combine(self, other: "Mean") -> "Mean":
        check_same_type(self, other)
        self._moment.combine(other._moment)
        return self

    def as_double(self) -> float:
        return self._moment.mean()

    @property
    def n(self) -> int:
        return self._moment.n


class _MomentStatistic(DoubleResultReads):
    """State handling shared by the statistics derived from central moments.

    Parameters
    ----------
    config:
        Denominator policy.  ``None`` selects
        :meth:`StatisticsConfiguration.with_defaults`, the unbiased estimator.
        The configuration is shared, never copied or mutated.
    """

    __slots__ = ("_moments", "_config")

    _accumulator: ClassVar[type] = MomentAccumulator

    def __init__(self, config: Optional[StatisticsConfiguration] = None) -> None:
        self._moments = self._accumulator()
        self._config = config or StatisticsConfiguration.with_defaults()

    @classmethod
    def create(cls, config: Optional[StatisticsConfiguration] = None):
        return cls(config)

    @classmethod
    def of(cls, *values: float):
        return accept_all(cls(), values)

    @classmethod
    def of_range(cls, values: Sequence[float], start: int, stop: int):
        return accept_all(cls(), range_values(values, start, stop))

    @property
    def config(self) -> StatisticsConfiguration:
        return self._config

    @property
    def n(self) -> int:
        return self._moments.n

    def with_config(self, config: StatisticsConfiguration):
        """Return a statistic over the same values using ``config``.

        The moment state is copied so the two statistics evolve independently.
        """

        clone = type(self)(config)
        clone._moments.combine(self._moments)
        return clone

    def accept(self, value: float) -> None:
        self._moments.accept(value)

    def combine(self, other):
        """Merge ``other`` into this statistic, keeping this configuration."""

        check_same_type(self, other)
        self._moments.combine(other._moments)
        return self


class Variance(_MomentStatistic):
    """Sample (default) or population variance."""

    __slots__ = ()

    def as_double(self) -> float:
        return self._moments.variance(self._config.biased)


class StandardDeviation(_MomentStatistic):
    """Square root of the variance under the same denominator policy."""

    __slots__ = ()

    def as_double(self) -> float:
        # sqrt propagates NaN and inf
        return math.sqrt(self._moments.variance(self._config.biased))


class Skewness(_MomentStatistic):
    """Sample skewness.

    The biased estimate is ``g1 = m3 / m2**1.5`` over the central moments
    ``mk = sum((x - mean)**k) / n``.  The default adjusts it by
    ``sqrt(n * (n - 1)) / (n - 2)``.
    """

    __slots__ = ()

    _accumulator = ThirdMomentAccumulator

    def as_double(self) -> float:
        moments = self._moments
        n = moments.n
        biased = self._config.biased
        if n < (2 if biased else 3):
            return math.nan
        x2 = moments.sum_of_squared_deviations()
        x3 = moments.sum_of_cubed_deviations()
        if not (math.isfinite(x2) and math.isfinite(x3)):
            return math.nan
        m2 = x2 / n
        if zero_variance(moments.mean(), m2):
            return math.nan
        g1 = (x3 / n) / (math.sqrt(m2) * m2)
        if not biased:
            g1 *= math.sqrt(n * (n - 1.0)) / (n - 2)
        return g1


class Kurtosis(_MomentStatistic):
    """Sample excess kurtosis.

    The biased estimate is ``g2 = m4 / m2**2 - 3``.  The default is the
    unbiased estimator of the population excess kurtosis for normal samples.
    """

    __slots__ = ()

    _accumulator = FourthMomentAccumulator

    def as_double(self) -> float:
        moments = self._moments
        n = moments.n
        biased = self._config.biased
        if n < (2 if biased else 4):
            return math.nan
        x2 = moments.sum_of_squared_deviations()
        x4 = moments.sum_of_fourth_deviations()
        if not (math.isfinite(x2) and math.isfinite(x4)):
            return math.nan
        m2 = x2 / n
        if zero_variance(moments.mean(), m2):
            return math.nan
        m4 = x4 / n
        if biased:
            return m4 / (m2 * m2) - 3
        n = float(n)
        return ((n * n - 1) * m4 / (m2 * m2) - 3 * (n - 1) * (n - 1)) / ((n - 2) * (n - 3))
