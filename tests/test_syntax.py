import dataclasses

import pytest

from skibidipp.syntax import (
    I32_MAX,
    I32_MIN,
    BinaryOp,
    BinOp,
    Exit,
    Number,
    Print,
    StringLiteral,
)


def test_add():
    assert BinOp.ADD.apply(2, 3) == 5


def test_mul():
    assert BinOp.MUL.apply(4, 6) == 24


def test_sub_is_antisymmetric():
    assert BinOp.SUB.apply(10, 4) == -BinOp.SUB.apply(4, 10)


def test_sub_of_equal_values_is_add_identity():
    diff = BinOp.SUB.apply(7, 7)
    assert BinOp.ADD.apply(diff, 9) == 9


def test_div_truncates_toward_zero():
    assert BinOp.DIV.apply(-7, 2) == -3


def test_div_sign_symmetry():
    assert BinOp.DIV.apply(7, -2) == BinOp.DIV.apply(-7, 2)
    assert BinOp.DIV.apply(-7, -2) == BinOp.DIV.apply(7, 2)


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        BinOp.DIV.apply(1, 0)


def test_add_overflow_raises():
    with pytest.raises(OverflowError):
        BinOp.ADD.apply(I32_MAX, 1)


def test_sub_underflow_raises():
    with pytest.raises(OverflowError):
        BinOp.SUB.apply(I32_MIN, 1)


def test_nodes_compare_by_value():
    tree = BinaryOp(BinOp.ADD, Number(1), Number(2))
    assert tree == BinaryOp(BinOp.ADD, Number(1), Number(2))
    assert Print(StringLiteral("a")) == Print(StringLiteral("a"))
    assert Exit(Number(1)) != Exit(Number(2))


def test_nodes_are_immutable():
    node = Number(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.value = 4
    assert node == Number(3)