# SPDX-License-Identifier: MIT
"""Median and quantiles of stored samples.

Unlike the online accumulators these statistics need all the values.  Input
is copied by the configured NaN transformer, sorted with the IEEE total order
and read at a real-valued position.  Positions between two order statistics
are blended with :func:`~streamstats.interpolation.interpolate`.

The estimation methods are the nine sample quantile definitions of
Hyndman & Fan (1996), ``HF1`` to ``HF9``.  Positions computed outside the
sample clamp to the minimum or maximum value.
"""

from __future__ import annotations

import enum
import math
import numbers
from dataclasses import dataclass, replace
from typing import List, Sequence, Union, overload

from .interpolation import interpolate, mean
from .nan_policy import NaNPolicy, create_nan_transformer
from .numerics import total_order_key

__all__ = ["EstimationMethod", "Median", "Quantile"]


class EstimationMethod(enum.Enum):
    """Hyndman & Fan sample quantile definitions."""

    HF1 = 1
    HF2 = 2
    HF3 = 3
    HF4 = 4
    HF5 = 5
    HF6 = 6
    HF7 = 7
    HF8 = 8
    HF9 = 9

    def position0(self, p: float, n: int) -> float:
        """Zero-based real-valued position of the ``p``-th quantile."""

        method = self.value
        if method == 1:
            return math.ceil(n * p) - 1
        if method == 2:
            pos = n * p
            j = int(pos)
            # Average at discontinuities
            if pos - j == 0:
                return j - 0.5
            return j
        if method == 3:
            # Round half to even, as Math.rint
            return round(n * p) - 1
        if method == 4:
            return n * p - 1
        if method == 5:
            return n * p - 0.5
        if method == 6:
            return (n + 1) * p - 1
        if method == 7:
            return (n - 1) * p
        if method == 8:
            return n * p + (p + 1) / 3 - 1
        return (n + 0.25) * p - 0.625

    def index(self, p: float, n: int) -> float:
        """Position clamped to ``[0, n - 1]``."""

        pos = self.position0(p, n)
        if pos < 0:
            return 0.0
        if pos > n - 1:
            return float(n - 1)
        return float(pos)


def _check_probability(p: float) -> None:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Invalid probability: {p}")


def _at(x: List[float], pos: float) -> float:
    ip = int(pos)
    if pos > ip:
        return interpolate(x[ip], x[ip + 1], pos - ip)
    return x[ip]


@dataclass(frozen=True)
class Quantile:
    """Quantile estimator.

    Use :meth:`with_defaults` (``NaNPolicy.INCLUDE``, ``EstimationMethod.HF8``)
    and the ``with_*`` methods to derive other configurations.
    """

    nan_policy: NaNPolicy = NaNPolicy.INCLUDE
    method: EstimationMethod = EstimationMethod.HF8

    @classmethod
    def with_defaults(cls) -> "Quantile":
        return _DEFAULT_QUANTILE

    def with_nan_policy(self, policy: NaNPolicy) -> "Quantile":
        return replace(self, nan_policy=NaNPolicy(policy))

    def with_method(self, method: EstimationMethod) -> "Quantile":
        return replace(self, method=EstimationMethod(method))

    @staticmethod
    def probabilities(n: int, p1: float = 0.0, p2: float = 1.0) -> List[float]:
        """``n`` probabilities evenly spaced strictly inside ``(p1, p2)``.

        With the default bounds this is ``[1/(n+1), ..., n/(n+1)]``.
        """

        if n < 1:
            raise ValueError(f"Invalid number of probabilities: {n}")
        _check_probability(p1)
        _check_probability(p2)
        if p2 <= p1:
            raise ValueError(f"Invalid range: [{p1}, {p2}]")
        c1 = n + 1.0
        return [(1 - (i + 1.0) / c1) * p1 + (i + 1.0) / c1 * p2 for i in range(n)]

    @overload
    def evaluate(self, values: Sequence[float], p: float) -> float: ...

    @overload
    def evaluate(self, values: Sequence[float], p: Sequence[float]) -> List[float]: ...

    def evaluate(self, values, p):
        """Quantile(s) of ``values`` at probability ``p`` (scalar or sequence)."""

        return self.evaluate_range(values, 0, len(values), p)

    def evaluate_range(
        self,
        values: Sequence[float],
        start: int,
        stop: int,
        p: Union[float, Sequence[float]],
    ) -> Union[float, List[float]]:
        """As :meth:`evaluate` over ``values[start:stop]``.

        Raises :class:`IndexError` when the range is invalid.
        """

        scalar = isinstance(p, numbers.Real)
        probs = [float(p)] if scalar else [float(q) for q in p]
        if not probs:
            raise ValueError("No probabilities specified")
        for prob in probs:
            _check_probability(prob)

        x = create_nan_transformer(self.nan_policy)(values, start, stop)
        n = len(x)
        if n <= 1:
            fill = x[0] if n else math.nan
            result = [fill] * len(probs)
        else:
            x.sort(key=total_order_key)
            result = [_at(x, self.method.index(prob, n)) for prob in probs]
        return result[0] if scalar else result


_DEFAULT_QUANTILE = Quantile()


@dataclass(frozen=True)
class Median:
    """Median of stored samples.

    An even-sized sample returns the overflow-safe mean of the two middle
    values.
    """

    nan_policy: NaNPolicy = NaNPolicy.INCLUDE

    @classmethod
    def with_defaults(cls) -> "Median":
        return _DEFAULT_MEDIAN

    def with_nan_policy(self, policy: NaNPolicy) -> "Median":
        return replace(self, nan_policy=NaNPolicy(policy))

    def evaluate(self, values: Sequence[float]) -> float:
        return self.evaluate_range(values, 0, len(values))

    def evaluate_range(self, values: Sequence[float], start: int, stop: int) -> float:
        x = create_nan_transformer(self.nan_policy)(values, start, stop)
        n = len(x)
        if n == 0:
            return math.nan
        if n == 1:
            return x[0]
        x.sort(key=total_order_key)
        m = n >> 1
        if n & 1:
            return x[m]
        return mean(x[m - 1], x[m])


_DEFAULT_MEDIAN = Median()
