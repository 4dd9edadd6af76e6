# SPDX-License-Identifier: MIT
"""Feed tensors into the streaming statistics.

Requires the optional ``torch`` dependency (``pip install streamstats[torch]``).
Tensors of any shape, dtype and device are flattened and moved to the CPU as
float64 before their elements are accepted one at a time, so the result is
identical to accepting the same Python floats in row-major order.
"""

from __future__ import annotations

import logging
from typing import Callable, List, TypeVar

import torch

from .statistic import StatisticAccumulator

__all__ = ["accept_tensor", "reduce_chunks", "to_float_list"]

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=StatisticAccumulator)


def to_float_list(tensor: torch.Tensor) -> List[float]:
    """Return the elements of ``tensor`` as Python floats in row-major order."""

    if not torch.is_tensor(tensor):
        raise TypeError(f"Expected a tensor, got {type(tensor).__name__}")
    flat = tensor.detach().to(device="cpu", dtype=torch.float64).reshape(-1)
    return flat.tolist()


def accept_tensor(statistic: A, tensor: torch.Tensor) -> A:
    """Accept every element of ``tensor`` into ``statistic`` and return it."""

    for value in to_float_list(tensor):
        statistic.accept(value)
    return statistic


def reduce_chunks(factory: Callable[[], A], tensor: torch.Tensor, chunks: int) -> A:
    """Reduce ``tensor`` partition by partition and merge the partials.

    The flattened tensor is split into at most ``chunks`` contiguous pieces
    (``torch.chunk`` semantics).  One accumulator is built per piece and the
    partials are merged left to right with ``combine``.  An empty tensor
    returns an empty accumulator.
    """

    chunks = int(chunks)
    if chunks <= 0:
        raise ValueError("chunks must be a positive integer.")
    flat = tensor.detach().reshape(-1)
    result = factory()
    if flat.numel() == 0:
        return result
    pieces = torch.chunk(flat, chunks)
    logger.debug(
        "Reducing %d elements in %d partitions with %s",
        flat.numel(),
        len(pieces),
        type(result).__name__,
    )
    for piece in pieces:
        result.combine(accept_tensor(factory(), piece))
    return result
