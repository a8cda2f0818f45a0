"""Recursive-descent parser for statements and arithmetic expressions."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from skibidipp.lexer import Token, TokenKind
from skibidipp.syntax import BinaryOp, BinOp, Exit, Expr, Number, Print, StringLiteral

_ADDITIVE = {TokenKind.PLUS: BinOp.ADD, TokenKind.MINUS: BinOp.SUB}
_MULTIPLICATIVE = {TokenKind.STAR: BinOp.MUL, TokenKind.SLASH: BinOp.DIV}


class Parser:
    """Parses statements from a token list; failed parses return ``None``."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    @property
    def position(self) -> int:
        """Index of the next token to be read."""
        return self._pos

    def is_finished(self) -> bool:
        """True once every token has been consumed."""
        return self._pos >= len(self._tokens)

    def _peek(self) -> Optional[Token]:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _eat(self) -> Optional[Token]:
        token = self._peek()
        self._pos += 1
        return token

    def _accept(self, kind: TokenKind) -> bool:
        token = self._peek()
        if token is not None and token.kind is kind:
            self._eat()
            return True
        return False

    def _at_ident(self, name: str) -> bool:
        token = self._peek()
        return token is not None and token.kind is TokenKind.IDENT and token.value == name

    def _parse_call_tail(self) -> Optional[Expr]:
        if not self._accept(TokenKind.LPAREN):
            return None
        expr = self._parse_expr()
        if expr is None or not self._accept(TokenKind.RPAREN):
            return None
        if not self._accept(TokenKind.SEMICOLON):
            return None
        return expr

    def parse_console_print_expr(self) -> Optional[Print]:
        """Parse ``console.print(<expr>);``."""
        if not self._at_ident("console"):
            return None
        self._eat()
        if not self._accept(TokenKind.DOT) or not self._accept(TokenKind.PRINT):
            return None
        expr = self._parse_call_tail()
        return Print(expr) if expr is not None else None

    def parse_exit_expr(self) -> Optional[Exit]:
        """Parse ``exit(<expr>);``."""
        if not self._at_ident("exit"):
            return None
        self._eat()
        expr = self._parse_call_tail()
        return Exit(expr) if expr is not None else None

    def _parse_expr(self) -> Optional[Expr]:
        return self._parse_binary(_ADDITIVE, self._parse_factor)

    def _parse_factor(self) -> Optional[Expr]:
        return self._parse_binary(_MULTIPLICATIVE, self._parse_primary)

    def _parse_binary(
        self,
        operators: dict[TokenKind, BinOp],
        operand: Callable[[], Optional[Expr]],
    ) -> Optional[Expr]:
        node = operand()
        if node is None:
            return None
        while (token := self._peek()) is not None and token.kind in operators:
            self._eat()
            right = operand()
            if right is None:
                return None
            node = BinaryOp(operators[token.kind], node, right)
        return node

    def _parse_primary(self) -> Optional[Expr]:
        token = self._eat()
        if token is None:
            return None
        if token.kind is TokenKind.NUMBER:
            return Number(token.value)
        if token.kind is TokenKind.STRING:
            return StringLiteral(token.value)
        if token.kind is TokenKind.LPAREN:
            expr = self._parse_expr()
            if expr is not None and self._accept(TokenKind.RPAREN):
                return expr
        return None