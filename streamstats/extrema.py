# SPDX-License-Identifier: MIT
"""Maximum and minimum trackers for floating and bounded integer streams.

An empty tracker reports its identity element rather than raising:

=============  ==================  ==================
Class          Domain              Empty result
=============  ==================  ==================
``Max``        float               ``-inf``
``Min``        float               ``+inf``
``IntMax``     signed 32-bit       ``-2**31``
``IntMin``     signed 32-bit       ``2**31 - 1``
``LongMax``    signed 64-bit       ``-2**63``
``LongMin``    signed 64-bit       ``2**63 - 1``
=============  ==================  ==================

The floating trackers order values with the IEEE-754 total order
(:func:`~streamstats.numerics.total_order_key`): ``-0.0`` is below ``0.0``
and NaN is above every other value.  A NaN therefore wins a maximum and
never wins a minimum against a non-NaN value.

Integer trackers reject values outside their domain on :meth:`accept`.
Reads into a narrower type raise :class:`OverflowError` when the tracked
value does not fit; reads into ``float`` or arbitrary precision ``int``
always succeed.
"""

from __future__ import annotations

import math
import operator
from typing import Callable, ClassVar, Sequence

from .numerics import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    range_values,
    total_order_key,
)
from .statistic import DoubleResultReads, accept_all, check_same_type

__all__ = ["IntMax", "IntMin", "LongMax", "LongMin", "Max", "Min"]


class Max(DoubleResultReads):
    """Maximum of a stream of doubles."""

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value = -math.inf

    @classmethod
    def create(cls) -> "Max":
        return cls()

    @classmethod
    def of(cls, *values: float) -> "Max":
        return accept_all(cls(), values)

    @classmethod
    def of_range(cls, values: Sequence[float], start: int, stop: int) -> "Max":
        return accept_all(cls(), range_values(values, start, stop))

    def accept(self, value: float) -> None:
        value = float(value)
        if total_order_key(value) > total_order_key(self._value):
            self._value = value

    def combine(self, other: "Max") -> "Max":
        check_same_type(self, other)
        self.accept(other._value)
        return self

    def as_double(self) -> float:
        return self._value


class Min(DoubleResultReads):
    """Minimum of a stream of doubles.

    Values are ordered by the IEEE-754 total order, where NaN sits above
    ``+inf``.  A NaN is therefore never the minimum: it is ignored next to
    any other value, and ``Min.of(nan)`` reports the empty result ``+inf``.
    Use :class:`Max` or :class:`~streamstats.summation.Sum` to detect NaN.
    """

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value = math.inf

    @classmethod
    def create(cls) -> "Min":
        return cls()

    @classmethod
    def of(cls, *values: float) -> "Min":
        return accept_all(cls(), values)

    @classmethod
    def of_range(cls, values: Sequence[float], start: int, stop: int) -> "Min":
        return accept_all(cls(), range_values(values, start, stop))

    def accept(self, value: float) -> None:
        value = float(value)
        if total_order_key(value) < total_order_key(self._value):
            self._value = value

    def combine(self, other: "Min") -> "Min":
        check_same_type(self, other)
        self.accept(other._value)
        return self

    def as_double(self) -> float:
        return self._value


class _IntegerExtremum:
    """Extremum over a bounded integer domain.

    Subclasses choose the domain bounds, the identity element and the
    selection function.
    """

    __slots__ = ("_value",)

    _lower: ClassVar[int]
    _upper: ClassVar[int]
    _identity: ClassVar[int]
    _select: ClassVar[Callable[[int, int], int]]

    def __init__(self) -> None:
        self._value = self._identity

    @classmethod
    def create(cls):
        return cls()

    @classmethod
    def of(cls, *values: int):
        return accept_all(cls(), values)

    @classmethod
    def of_range(cls, values: Sequence[int], start: int, stop: int):
        return accept_all(cls(), range_values(values, start, stop))

    def accept(self, value: int) -> None:
        value = operator.index(value)
        if not self._lower <= value <= self._upper:
            raise OverflowError(
                f"{value} is outside the {type(self).__name__} domain "
                f"[{self._lower}, {self._upper}]"
            )
        self._value = type(self)._select(self._value, value)

    def combine(self, other):
        check_same_type(self, other)
        self._value = type(self)._select(self._value, other._value)
        return self

    def as_int(self) -> int:
        value = self._value
        if INT_MIN <= value <= INT_MAX:
            return value
        raise OverflowError(f"integer overflow: {value}")

    def as_long(self) -> int:
        return self._value

    def as_double(self) -> float:
        return float(self._value)

    def as_big_integer(self) -> int:
        return self._value


class IntMax(_IntegerExtremum):
    """Maximum of a stream of signed 32-bit integers."""

    __slots__ = ()
    _lower = INT_MIN
    _upper = INT_MAX
    _identity = INT_MIN
    _select = max


class IntMin(_IntegerExtremum):
    """Minimum of a stream of signed 32-bit integers."""

    __slots__ = ()
    _lower = INT_MIN
    _upper = INT_MAX
    _identity = INT_MAX
    _select = min


class LongMax(_IntegerExtremum):
    """Maximum of a stream of signed 64-bit integers."""

    __slots__ = ()
    _lower = LONG_MIN
    _upper = LONG_MAX
    _identity = LONG_MIN
    _select = max


class LongMin(_IntegerExtremum):
    """Minimum of a stream of signed 64-bit integers."""

    __slots__ = ()
    _lower = LONG_MIN
    _upper = LONG_MAX
    _identity = LONG_MAX
    _select = min
