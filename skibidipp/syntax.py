"""Syntax tree nodes and binary operators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class BinOp(enum.Enum):
    """Arithmetic operators on 32-bit signed integers."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def apply(self, left: int, right: int) -> int:
        """Apply the operator; division truncates toward zero."""
        if self is BinOp.ADD:
            result = left + right
        elif self is BinOp.SUB:
            result = left - right
        elif self is BinOp.MUL:
            result = left * right
        else:
            result = _truncating_div(left, right)
        if not I32_MIN <= result <= I32_MAX:
            raise OverflowError(f"attempt to {self.name.lower()} with overflow")
        return result


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class BinaryOp:
    op: BinOp
    left: "Expr"
    right: "Expr"


@dataclass(frozen=True)
class Print:
    expr: "Expr"


@dataclass(frozen=True)
class Exit:
    expr: "Expr"


Expr = Union[Number, StringLiteral, BinaryOp, Print, Exit]