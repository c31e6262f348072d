"""Lexical analysis of infix expressions."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .tokens import Token, TokenType

KEYWORDS = {"div": TokenType.DIV, "mod": TokenType.MOD}

_SINGLE_CHARACTER = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    ";": TokenType.SEMICOLON,
}

_SCANNER = re.compile(
    r"(?P<newline>\n)"
    r"|(?P<space>[ \r\t]+)"
    r"|(?P<number>[0-9]+)"
    r"|(?P<word>[A-Za-z][A-Za-z0-9]*)"
    r"|(?P<single>[-+*/();])"
    r"|(?P<other>.)",
    re.DOTALL,
)


class Lexer:
    """Turns source text into a list of tokens ending with an EOF token.

    Unknown characters are reported on ``out`` and skipped. The line counter
    carries on across successive calls on the same lexer.
    """

    def __init__(self, text: str = "", out: TextIO | None = None) -> None:
        self._text = text
        self._out = out if out is not None else sys.stdout
        self._line = 1

    def lex_tokens(self, text: str | None = None) -> list[Token]:
        """Lex ``text`` (or the text given at construction)."""
        if text is not None:
            self._text = text
        tokens = list(self._scan(self._text))
        tokens.append(Token(TokenType.EOF, line=self._line))
        return tokens

    def lex_lines(self, lines: Iterable[str]) -> list[Token]:
        """Lex several lines into one token list with a single trailing EOF."""
        tokens: list[Token] = []
        for line in lines:
            tokens.extend(self.lex_tokens(line)[:-1])
        tokens.append(Token(TokenType.EOF, line=self._line))
        return tokens

    def _scan(self, text: str) -> Iterator[Token]:
        for match in _SCANNER.finditer(text):
            kind = match.lastgroup
            lexeme = match.group()
            if kind == "newline":
                self._line += 1
            elif kind == "space":
                continue
            elif kind == "number":
                yield Token(TokenType.NUM, lexeme, line=self._line)
            elif kind == "word":
                yield Token(KEYWORDS.get(lexeme, TokenType.ID), lexeme, line=self._line)
            elif kind == "single":
                yield Token(_SINGLE_CHARACTER[lexeme], lexeme, line=self._line)
            else:
                self._out.write(f"unknown token: {lexeme} \n")