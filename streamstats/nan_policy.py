# SPDX-License-Identifier: MIT
"""NaN handling strategies for statistics that sort their input.

The order statistics never look at NaN themselves.  A transformer chosen
from the :class:`NaNPolicy` at construction prepares the data first:

``INCLUDE``
    Keep NaN; it sorts above every other value.
``EXCLUDE``
    Drop NaN before computing.
``ERROR``
    Raise :class:`ValueError` naming the position of the first NaN.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Callable, List, Sequence

from .numerics import range_values

__all__ = ["NaNPolicy", "NaNTransformer", "create_nan_transformer"]

logger = logging.getLogger(__name__)

NaNTransformer = Callable[[Sequence[float], int, int], List[float]]


class NaNPolicy(enum.Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"
    ERROR = "error"


def _include(values: Sequence[float], start: int, stop: int) -> List[float]:
    return [float(v) for v in range_values(values, start, stop)]


def _exclude(values: Sequence[float], start: int, stop: int) -> List[float]:
    data = [float(v) for v in range_values(values, start, stop)]
    kept = [v for v in data if not math.isnan(v)]
    if len(kept) != len(data):
        logger.debug("Excluded %d NaN values of %d", len(data) - len(kept), len(data))
    return kept


def _error(values: Sequence[float], start: int, stop: int) -> List[float]:
    data = [float(v) for v in range_values(values, start, stop)]
    for offset, v in enumerate(data):
        if math.isnan(v):
            raise ValueError(f"NaN at {start + offset}")
    return data


_TRANSFORMERS = {
    NaNPolicy.INCLUDE: _include,
    NaNPolicy.EXCLUDE: _exclude,
    NaNPolicy.ERROR: _error,
}


def create_nan_transformer(policy: NaNPolicy) -> NaNTransformer:
    """Return the transformer for ``policy``.

    Transformers always return a fresh list so callers may reorder it without
    touching the input.
    """

    try:
        return _TRANSFORMERS[NaNPolicy(policy)]
    except ValueError:
        raise ValueError(f"Unknown NaN policy: {policy!r}") from None
