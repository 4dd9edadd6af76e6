"""Pytest fixtures housing reference data for the streamstats test-suite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class MomentCase:
    """Sample with its exactly known mean and sum of squared deviations."""

    values: Tuple[float, ...]
    mean: float
    sum_sq_dev: float

    @property
    def sample_variance(self) -> float:
        return self.sum_sq_dev / (len(self.values) - 1)

    @property
    def population_variance(self) -> float:
        return self.sum_sq_dev / len(self.values)


def moment_cases() -> List[MomentCase]:
    """Return the curated moment scenarios."""

    # The shifted copies of (4, 7, 13, 16) reproduce the classic failure of the
    # textbook sum / sum-of-squares formula: the deviations are unchanged but
    # the squares of the raw values exhaust the float mantissa.
    base = (4.0, 7.0, 13.0, 16.0)
    cases = [MomentCase(values=base, mean=10.0, sum_sq_dev=90.0)]
    for shift in (1e8, 1e9):
        cases.append(
            MomentCase(values=tuple(v + shift for v in base), mean=10.0 + shift, sum_sq_dev=90.0)
        )
    cases.append(
        MomentCase(values=(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0), mean=4.0, sum_sq_dev=28.0)
    )
    cases.append(MomentCase(values=(-2.5, 2.5), mean=0.0, sum_sq_dev=12.5))
    return cases


__all__ = [
    "MomentCase",
    "moment_cases",
]
