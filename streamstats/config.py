# SPDX-License-Identifier: MIT
"""Configuration values attached to statistics at construction."""

from __future__ import annotations

from dataclasses import dataclass, replace

__all__ = ["StatisticsConfiguration"]


@dataclass(frozen=True)
class StatisticsConfiguration:
    """Immutable options for statistics with a denominator policy.

    ``biased=False`` (the default) divides the sum of squared deviations by
    ``n - 1`` (sample statistic); ``biased=True`` divides by ``n``
    (population statistic).
    """

    biased: bool = False

    @classmethod
    def with_defaults(cls) -> "StatisticsConfiguration":
        """Return the shared default configuration."""

        return _DEFAULT

    def with_biased(self, value: bool) -> "StatisticsConfiguration":
        return replace(self, biased=bool(value))


_DEFAULT = StatisticsConfiguration()
