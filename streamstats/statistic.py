# SPDX-License-Identifier: MIT
"""Capability protocols shared by every statistic in the package.

Statistics do not share a base class.  Each concrete accumulator provides the
same small set of operations and is checked structurally:

``accept(value)``
    Fold one value into the running state.  Never raises for numeric input.
``as_double()`` / ``as_int()`` / ``as_long()`` / ``as_big_integer()``
    Read the current result without resetting.  Narrowing reads raise
    :class:`OverflowError` when the value does not fit the target type.
``combine(other)``
    Merge another accumulator of the same class into the receiver and return
    the receiver.

None of the accumulators are thread-safe.  Build one accumulator per
partition, touch each from a single thread, then merge the partials with
:meth:`combine` after the partitions are complete.
"""

from __future__ import annotations

from typing import Iterable, Protocol, TypeVar, runtime_checkable

from .numerics import to_big_integer_exact, to_int_exact, to_long_exact

__all__ = [
    "DoubleResultReads",
    "StatisticAccumulator",
    "StatisticResult",
    "accept_all",
    "check_same_type",
]

A = TypeVar("A", bound="StatisticAccumulator")


@runtime_checkable
class StatisticResult(Protocol):
    def as_double(self) -> float: ...

    def as_int(self) -> int: ...

    def as_long(self) -> int: ...

    def as_big_integer(self) -> int: ...


@runtime_checkable
class StatisticAccumulator(StatisticResult, Protocol):
    def accept(self, value) -> None: ...

    def combine(self: A, other: A) -> A: ...


def accept_all(statistic: A, values: Iterable) -> A:
    """Feed every element of ``values`` to ``statistic`` and return it."""

    for value in values:
        statistic.accept(value)
    return statistic


def check_same_type(receiver: object, other: object) -> None:
    """Reject merging accumulators of different concrete classes."""

    if type(receiver) is not type(other):
        raise TypeError(
            f"Cannot combine {type(receiver).__name__} with {type(other).__name__}"
        )


class DoubleResultReads:
    """Integer reads derived from ``as_double``.

    Mixed into statistics whose natural result is a float.  Integer results
    round half towards positive infinity.
    """

    __slots__ = ()

    def as_double(self) -> float:
        raise NotImplementedError

    def as_int(self) -> int:
        return to_int_exact(self.as_double())

    def as_long(self) -> int:
        return to_long_exact(self.as_double())

    def as_big_integer(self) -> int:
        return to_big_integer_exact(self.as_double())
