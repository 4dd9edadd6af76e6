# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ryō
"""Streaming descriptive statistics with single-pass updates and merges.

Every accumulator supports ``accept`` (one value at a time), typed result
reads that never reset the state, and ``combine`` to merge a partial result
computed over a disjoint part of the input.  Accumulators are not
thread-safe: build one per partition, then merge the finished partials on a
single thread.

The tensor helpers live in :mod:`streamstats.tensors` and need the optional
``torch`` dependency; they are not imported here.
"""

__version__ = "0.2.0"
from . import interpolation, numerics
from .config import StatisticsConfiguration
from .extrema import IntMax, IntMin, LongMax, LongMin, Max, Min
from .moments import (
    FirstMoment,
    FourthMomentAccumulator,
    MomentAccumulator,
    ThirdMomentAccumulator,
)
from .nan_policy import NaNPolicy
from .quantile import EstimationMethod, Median, Quantile
from .statistic import StatisticAccumulator, StatisticResult
from .summation import Sum, SumOfSquares
from .variance import Kurtosis, Mean, Skewness, StandardDeviation, Variance

__all__ = [
    "EstimationMethod",
    "FirstMoment",
    "FourthMomentAccumulator",
    "IntMax",
    "IntMin",
    "Kurtosis",
    "LongMax",
    "LongMin",
    "Max",
    "Mean",
    "Median",
    "Min",
    "MomentAccumulator",
    "NaNPolicy",
    "Quantile",
    "Skewness",
    "StandardDeviation",
    "StatisticAccumulator",
    "StatisticResult",
    "StatisticsConfiguration",
    "Sum",
    "SumOfSquares",
    "ThirdMomentAccumulator",
    "Variance",
    "interpolation",
    "numerics",
    "__version__",
]
