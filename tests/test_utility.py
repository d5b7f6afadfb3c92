import sys

import pytest

from evomin.utility import (
    are_equal,
    center_align,
    left_align,
    magnitude,
    right_align,
    sgn,
    to_string_scientific,
)


def test_are_equal_identical():
    assert are_equal(1.5, 1.5)


def test_are_equal_tiny_difference():
    x = 1.0
    y = x + sys.float_info.epsilon
    assert are_equal(x, y)


def test_are_equal_distinct():
    assert not are_equal(1.0, 1.001)


def test_are_equal_near_zero():
    assert are_equal(0.0, sys.float_info.min / 4)


def test_are_equal_ulp_widens_tolerance():
    x = 1.0
    y = 1.0 + 8 * sys.float_info.epsilon
    assert not are_equal(x, y, 2)
    assert are_equal(x, y, 8)


@pytest.mark.parametrize("val,expected", [(3.2, 1), (-0.1, -1), (0.0, 0), (7, 1), (-4, -1)])
def test_sgn(val, expected):
    assert sgn(val) == expected


def test_center_align_even_padding():
    assert center_align("ab", 6) == "  ab  "


def test_center_align_odd_padding():
    result = center_align("abc", 6)
    assert len(result) == 6
    assert result.strip() == "abc"
    assert result.startswith(" abc")


def test_center_align_no_room():
    assert center_align("abcdef", 3) == "abcdef"


def test_right_align():
    assert right_align("x", 4) == "   x"
    assert right_align("long", 2) == "long"


def test_left_align():
    assert left_align("x", 4) == "x   "
    assert left_align("long", 2) == "long"


def test_to_string_scientific():
    assert to_string_scientific(1.0) == "1.000000e+00"
    assert to_string_scientific(-0.00025) == "-2.500000e-04"


def test_magnitude():
    assert magnitude([3.0, 4.0]) == pytest.approx(5.0)
    assert magnitude([]) == 0.0
    assert magnitude([-2.0]) == pytest.approx(2.0)