import operator
from fractions import Fraction

import numpy as np
import pytest

from hexcolor import (
    HexColor,
    HexColorDomainError,
    parse_hex,
    add,
    subtract,
    multiply,
    divide,
    alpha_op,
    saturate,
)
from ..samples import ZERO, ONE, TWO, MAX


def test_alpha_op_table():
    assert alpha_op(2, 3, operator.add) == 5
    assert alpha_op(100, None, operator.add) == 100
    assert alpha_op(None, None, operator.add) is None
    assert alpha_op(None, 100, operator.add) is None


def test_saturate():
    assert saturate(-1) == 0
    assert saturate(256) == 255
    assert saturate(127.9) == 127
    assert saturate(float("nan")) == 0
    assert saturate(float("inf")) == 255
    assert saturate(float("-inf")) == 0


def test_add_colors():
    assert ONE + ONE == TWO
    assert parse_hex("#F00") + parse_hex("#00f") == parse_hex("f0f")


def test_add_colors_overflow():
    assert MAX + MAX == MAX
    assert HexColor.rgb(200, 100, 0) + HexColor.rgb(100, 100, 100) == HexColor.rgb(255, 200, 100)


def test_sub_colors():
    assert ONE - ONE == ZERO
    assert TWO - ONE == ONE


def test_sub_colors_underflow():
    assert ZERO - ONE == ZERO
    assert ZERO - MAX == ZERO


def test_color_alpha_propagation():
    left = HexColor.rgba(10, 10, 10, 100)
    right = HexColor.rgba(1, 1, 1, 200)
    plain = HexColor.rgb(1, 1, 1)

    # both present: same saturating op
    assert (left + right).a == 255
    assert (left - right).a == 0
    assert (right - left).a == 100
    # left present, right absent: left unchanged
    assert (left + plain).a == 100
    assert (left - plain).a == 100
    # left absent: absent regardless of right
    assert (plain + right).a is None
    assert (plain - right).a is None
    assert (plain + plain).a is None


def test_add_scalar():
    assert ONE + 1 == TWO
    assert 1 + ONE == TWO
    assert HexColor.rgba(0, 2, 7, 6) + 3 == HexColor.rgba(3, 5, 10, 9)


def test_add_scalar_overflow():
    assert MAX + 1 == MAX
    assert ONE + 10**12 == MAX
    assert ONE + -10**12 == ZERO


def test_sub_scalar():
    assert ONE - 1 == ZERO
    assert parse_hex("f0f") - 255 == parse_hex("000")


def test_sub_scalar_underflow():
    assert ZERO - 1 == ZERO
    assert ONE - 2.5 == ZERO


def test_scalar_minus_color_mirrors():
    assert 1 - ONE == ZERO
    assert 255 - HexColor.rgb(0, 55, 255) == HexColor.rgb(255, 200, 0)
    assert 255 - HexColor.rgba(0, 0, 0, 5) == HexColor.rgba(255, 255, 255, 250)
    assert 0 - MAX == ZERO


def test_mul_scalar():
    assert ONE * 2 == TWO
    assert 2 * ONE == TWO
    assert HexColor.rgb(10, 20, 30) * 0.5 == HexColor.rgb(5, 10, 15)


def test_mul_scalar_overflow():
    assert MAX * 2 == MAX


def test_mul_scalar_underflow():
    assert MAX * -1 == ZERO
    assert HexColor.rgb(255, 255, 255) * -1 == HexColor.rgb(0, 0, 0)


def test_div_scalar():
    assert TWO / 2 == ONE
    assert (parse_hex("#f00") + parse_hex("#00f")) / 2 == parse_hex("#7F007F")
    assert HexColor.rgb(10, 20, 30) / 4.0 == HexColor.rgb(2, 5, 7)


def test_div_scalar_overflow():
    assert MAX / 0.01 == MAX


def test_div_scalar_underflow():
    assert MAX / -1 == ZERO
    assert MAX / -0.5 == ZERO


def test_div_by_zero():
    with pytest.raises(HexColorDomainError, match="by zero"):
        ONE / 0
    with pytest.raises(HexColorDomainError):
        ONE / 0.0
    with pytest.raises(ZeroDivisionError):
        divide(ONE, np.int32(0))


def test_scalar_alpha_only_when_present():
    assert (HexColor.rgb(1, 1, 1) + 10).a is None
    assert (HexColor.rgb(1, 1, 1) * 10).a is None
    assert (HexColor.rgba(1, 1, 1, 1) * 10).a == 10
    assert (HexColor.rgba(100, 100, 100, 100) / 3).a == 33


def test_scalar_commutativity():
    colors = [ZERO, ONE, MAX, HexColor.rgba(12, 34, 56, 78), parse_hex("#abc")]
    scalars = [0, 1, -1, 7, 300, 0.5, -2.25, np.uint8(200), np.int16(-3), np.float32(1.5)]
    for color in colors:
        for n in scalars:
            assert color + n == n + color
            assert color * n == n * color


def test_numpy_integer_scalars_do_not_wrap():
    # uint8 arithmetic would wrap 200 + 100 to 44
    assert HexColor.rgb(200, 0, 0) + np.uint8(100) == HexColor.rgb(255, 100, 100)
    assert HexColor.rgb(200, 0, 0) * np.int8(2) == HexColor.rgb(255, 0, 0)
    assert np.uint8(100) + HexColor.rgb(200, 0, 0) == HexColor.rgb(255, 100, 100)


def test_float_scalars_truncate():
    assert HexColor.rgb(3, 3, 3) * 0.9 == HexColor.rgb(2, 2, 2)
    assert HexColor.rgb(3, 3, 3) + 0.99 == HexColor.rgb(3, 3, 3)
    assert HexColor.rgb(3, 3, 3) * float("nan") == ZERO


def test_fraction_scalars():
    assert HexColor.rgb(10, 20, 30) * Fraction(1, 2) == HexColor.rgb(5, 10, 15)


def test_compound_assignment():
    value = ONE
    value += ONE
    assert value == TWO

    value = ONE
    value += 1
    assert value == TWO

    value = ONE
    value -= ONE
    assert value == ZERO

    value = ONE
    value -= 1
    assert value == ZERO

    value = ONE
    value *= 2
    assert value == TWO

    value = TWO
    value /= 2
    assert value == ONE


def test_compound_assignment_does_not_mutate():
    original = ONE
    value = original
    value += 1
    assert original == ONE
    assert value is not original


def test_named_operations_match_operators():
    left = HexColor.rgba(10, 20, 30, 40)
    right = HexColor.rgb(5, 5, 5)
    assert add(left, right) == left + right
    assert add(left, 3) == left + 3
    assert subtract(left, right) == left - right
    assert subtract(left, 3) == left - 3
    assert multiply(left, 3) == left * 3
    assert divide(left, 3) == left / 3


def test_unsupported_operands():
    with pytest.raises(TypeError):
        ONE * ONE
    with pytest.raises(TypeError):
        ONE / ONE
    with pytest.raises(TypeError):
        2 / ONE
    with pytest.raises(TypeError):
        ONE + "1"
    with pytest.raises(TypeError):
        ONE + True
    with pytest.raises(TypeError, match="unsupported operand"):
        add(ONE, None)
    with pytest.raises(TypeError, match="unsupported operand"):
        multiply(ONE, ONE)


def test_operations_return_new_colors():
    assert isinstance(ONE + ONE, HexColor)
    assert isinstance(ONE * 1.5, HexColor)
    assert (ONE + 0) is not ONE
