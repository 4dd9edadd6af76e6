import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from streamstats.numerics import (
    check_from_to_index,
    neumaier_step,
    round_to_integer,
    to_big_integer_exact,
    to_int_exact,
    to_long_exact,
    total_order_key,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.4, 2.0),
        (2.5, 3.0),
        (-2.5, -2.0),
        (-2.6, -3.0),
        (-0.4, 0.0),
        (7.0, 7.0),
    ],
)
def test_round_to_integer_rounds_ties_up(value: float, expected: float) -> None:
    assert round_to_integer(value) == expected


def test_to_int_exact_accepts_the_full_32_bit_range() -> None:
    assert to_int_exact(2147483647.4) == 2**31 - 1
    assert to_int_exact(-2147483648.5) == -(2**31)
    with pytest.raises(OverflowError):
        to_int_exact(2147483647.5)
    with pytest.raises(OverflowError):
        to_int_exact(-2147483649.0)


def test_to_long_exact_bounds() -> None:
    assert to_long_exact(-(2.0**63)) == -(2**63)
    assert to_long_exact(1e18) == 10**18
    with pytest.raises(OverflowError):
        to_long_exact(2.0**63)


@pytest.mark.parametrize("convert", [to_int_exact, to_long_exact, to_big_integer_exact])
@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_values_cannot_be_read_as_integers(convert, value: float) -> None:
    with pytest.raises(OverflowError):
        convert(value)


def test_to_big_integer_exact_handles_large_values() -> None:
    assert to_big_integer_exact(1e20) == 10**20
    assert to_big_integer_exact(-3.5) == -3


def test_total_order_key_sorts_signed_zero_and_nan() -> None:
    ordered = sorted([math.nan, 1.0, 0.0, -0.0, -math.inf, math.inf, -1.0], key=total_order_key)
    assert ordered[0] == -math.inf
    assert ordered[1] == -1.0
    assert ordered[2] == 0.0 and math.copysign(1.0, ordered[2]) < 0
    assert ordered[3] == 0.0 and math.copysign(1.0, ordered[3]) > 0
    assert ordered[4] == 1.0
    assert ordered[5] == math.inf
    assert math.isnan(ordered[6])
    assert total_order_key(math.nan) == total_order_key(-math.nan)


def test_neumaier_step_keeps_lost_low_order_bits() -> None:
    total, compensation = neumaier_step(1e16, 0.0, 1.0)
    assert total == 1e16
    assert compensation == 1.0


@pytest.mark.parametrize("start, stop, length", [(0, 0, 0), (0, 3, 3), (1, 2, 3), (3, 3, 3)])
def test_check_from_to_index_accepts_valid_ranges(start: int, stop: int, length: int) -> None:
    check_from_to_index(start, stop, length)


@pytest.mark.parametrize("start, stop, length", [(-1, 2, 3), (2, 1, 3), (0, 4, 3), (4, 4, 3)])
def test_check_from_to_index_rejects_invalid_ranges(start: int, stop: int, length: int) -> None:
    with pytest.raises(IndexError):
        check_from_to_index(start, stop, length)
