import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from streamstats.extrema import IntMax, IntMin, LongMax, LongMin, Max, Min


def test_empty_trackers_report_identity() -> None:
    assert Max.of().as_double() == -math.inf
    assert Min.of().as_double() == math.inf
    assert IntMax.of().as_int() == -(2**31)
    assert IntMin.of().as_int() == 2**31 - 1
    assert LongMax.of().as_long() == -(2**63)
    assert LongMin.create().as_long() == 2**63 - 1


@pytest.mark.parametrize("cls", [Max, IntMax, LongMax])
def test_max_of_values_and_of_partitions(cls) -> None:
    assert cls.of(5, 3, 9, 1).as_double() == 9.0
    left = cls.of(5, 3)
    right = cls.of(9, 1)
    assert left.combine(right) is left
    assert left.as_double() == cls.of(5, 3, 9, 1).as_double()


@pytest.mark.parametrize("cls", [Min, IntMin, LongMin])
def test_min_of_values_and_of_partitions(cls) -> None:
    assert cls.of(5, 3, 9, 1).as_double() == 1.0
    left = cls.of(9, 1)
    left.combine(cls.of(5, 3))
    assert left.as_double() == 1.0
    assert cls.of(5, 3).combine(cls.create()).as_double() == 3.0


def test_long_max_narrowing_read_overflows() -> None:
    acc = LongMax.of(1, 2**31)
    with pytest.raises(OverflowError):
        acc.as_int()
    assert acc.as_long() == 2**31
    assert acc.as_double() == 2147483648.0
    assert acc.as_big_integer() == 2**31


def test_long_min_narrowing_read_overflows() -> None:
    acc = LongMin.of(-(2**31) - 1)
    with pytest.raises(OverflowError):
        acc.as_int()
    assert acc.as_long() == -(2**31) - 1
    assert LongMin.of(-5).as_int() == -5


def test_integer_trackers_reject_values_outside_their_domain() -> None:
    with pytest.raises(OverflowError):
        IntMax.create().accept(2**31)
    with pytest.raises(OverflowError):
        IntMin.create().accept(-(2**31) - 1)
    with pytest.raises(OverflowError):
        LongMax.create().accept(2**63)
    with pytest.raises(TypeError):
        LongMax.create().accept(1.5)


def test_int_trackers_widen_without_loss() -> None:
    acc = IntMax.of(2**31 - 1, -7)
    assert acc.as_int() == 2**31 - 1
    assert acc.as_long() == 2**31 - 1
    assert acc.as_big_integer() == 2**31 - 1
    assert acc.as_double() == 2147483647.0


def test_float_max_orders_nan_above_everything() -> None:
    assert math.isnan(Max.of(1.0, math.nan, 2.0).as_double())
    assert math.isnan(Max.of(math.nan, math.inf).as_double())
    assert Min.of(1.0, math.nan, 2.0).as_double() == 1.0
    # NaN never beats the +inf identity of an empty minimum.
    assert Min.of(math.nan).as_double() == math.inf


def test_float_trackers_order_signed_zero() -> None:
    high = Max.of(-0.0, 0.0).as_double()
    assert high == 0.0 and math.copysign(1.0, high) > 0
    high = Max.of(0.0, -0.0).as_double()
    assert math.copysign(1.0, high) > 0
    low = Min.of(0.0, -0.0).as_double()
    assert low == 0.0 and math.copysign(1.0, low) < 0


def test_float_trackers_integer_reads() -> None:
    assert Max.of(1.0, 2.5).as_int() == 3
    assert Min.of(-1.0, -2.5).as_long() == -2
    with pytest.raises(OverflowError):
        Max.of().as_int()
    with pytest.raises(OverflowError):
        Max.of(3e9).as_int()
    assert Max.of(3e9).as_long() == 3_000_000_000


def test_combine_requires_the_same_tracker() -> None:
    with pytest.raises(TypeError):
        Max.create().combine(Min.create())
    with pytest.raises(TypeError):
        IntMax.create().combine(LongMax.create())


def test_of_range_validates_bounds() -> None:
    values = [4, 8, 15, 16, 23, 42]
    assert LongMax.of_range(values, 0, 3).as_long() == 15
    assert IntMin.of_range(values, 3, 6).as_int() == 16
    assert Max.of_range(values, 2, 2).as_double() == -math.inf
    with pytest.raises(IndexError):
        LongMax.of_range(values, 0, 7)


def test_reads_are_repeatable() -> None:
    acc = LongMax.of(3, 17, -2)
    assert acc.as_long() == acc.as_long() == 17
