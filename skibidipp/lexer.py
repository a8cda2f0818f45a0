"""Turn source text into tokens."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional, Union

from skibidipp.syntax import I32_MAX

_DIGITS = re.compile(r"[0-9]+")


class LexError(ValueError):
    """Raised when the source text cannot be split into tokens."""


class TokenKind(enum.Enum):
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    IDENT = "ident"
    SEMICOLON = ";"
    PRINTLN = "println"
    PRINT = "print"
    DOT = "."
    STRING = "string"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[Union[int, str]] = None


_PUNCTUATION = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ";": TokenKind.SEMICOLON,
    ".": TokenKind.DOT,
}

_KEYWORDS = {
    "println": TokenKind.PRINTLN,
    "print": TokenKind.PRINT,
}


def lex(source: str) -> list[Token]:
    """Split ``source`` into a list of tokens."""
    tokens: list[Token] = []
    pos = 0
    length = len(source)
    while pos < length:
        char = source[pos]
        digits = _DIGITS.match(source, pos)
        if digits:
            value = int(digits.group())
            if value > I32_MAX:
                raise LexError(f"Number literal out of range: {digits.group()}")
            tokens.append(Token(TokenKind.NUMBER, value))
            pos = digits.end()
        elif char in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[char]))
            pos += 1
        elif char == '"':
            end = source.find('"', pos + 1)
            if end == -1:
                raise LexError("Unterminated string literal")
            tokens.append(Token(TokenKind.STRING, source[pos + 1 : end]))
            pos = end + 1
        elif char.isalpha():
            end = pos + 1
            while end < length and source[end].isalnum():
                end += 1
            word = source[pos:end]
            kind = _KEYWORDS.get(word)
            tokens.append(Token(kind) if kind else Token(TokenKind.IDENT, word))
            pos = end
        elif char.isspace():
            pos += 1
        else:
            raise LexError(f"Unrecognized character: {char}")
    return tokens