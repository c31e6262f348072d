"""Token kinds and the tokens produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Kinds of lexical tokens understood by the translator."""

    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    SEMICOLON = enum.auto()
    NUM = enum.auto()
    ID = enum.auto()
    DIV = enum.auto()
    MOD = enum.auto()
    EOF = enum.auto()


@dataclass(frozen=True)
class Token:
    """A lexeme together with its kind and the line it was found on."""

    type: TokenType
    lexeme: str = ""
    content: str = ""
    line: int = 1

    def __str__(self) -> str:
        if self.type is TokenType.EOF:
            return ""
        return f"{self.lexeme} {self.content} line {self.line}"