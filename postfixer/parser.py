"""Predictive recursive-descent translation of infix expressions to postfix.

Grammar with translation actions::

    list        -> expr ; list | empty
    expr        -> term { (+|-) term print(op) }
    term        -> factor { (*|/|div|mod) factor print(op) }
    factor      -> ( expr ) | id print(id) | num print(num)
"""

from __future__ import annotations

import io
import sys
from collections.abc import Iterable
from typing import TextIO

from .lexer import Lexer
from .tokens import Token, TokenType

_ADDITIVE = frozenset({TokenType.PLUS, TokenType.MINUS})
_MULTIPLICATIVE = frozenset(
    {TokenType.STAR, TokenType.SLASH, TokenType.DIV, TokenType.MOD}
)


class ParseError(Exception):
    """Raised when the input cannot be translated any further."""


class Parser:
    """Writes the postfix form of each statement to ``out`` as it parses.

    Recoverable syntax errors are reported on ``out`` and parsing goes on;
    unrecoverable ones raise :class:`ParseError`.
    """

    def __init__(self, tokens: Iterable[Token] | None = None, out: TextIO | None = None) -> None:
        self._tokens = list(tokens) if tokens is not None else []
        self._out = out if out is not None else sys.stdout
        self._current = 0
        self._parentheses = 0
        self._lookahead = Token(TokenType.EOF)

    def parse(self, tokens: Iterable[Token] | None = None) -> None:
        """Translate every statement in ``tokens`` (or the stored tokens)."""
        if tokens is not None:
            self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].type is not TokenType.EOF:
            self._tokens.append(Token(TokenType.EOF))
        self._current = 0
        self._parentheses = 0
        self._lookahead = self._tokens[0]
        while self._lookahead.type is not TokenType.EOF:
            start = self._current
            self._expr()
            self._match(TokenType.SEMICOLON)
            if self._current == start:
                message = f"syntax error: cannot recover at {self._lookahead.lexeme!r}"
                self._report("\n" + message)
                raise ParseError(message)

    def _emit(self, lexeme: str) -> None:
        self._out.write(f"{lexeme} ")

    def _report(self, *parts: object) -> None:
        self._out.write("".join(f"{part} " for part in parts) + "\n")

    def _expr(self) -> None:
        self._term()
        while self._lookahead.type in _ADDITIVE:
            operator = self._lookahead
            self._match(operator.type)
            self._term()
            self._emit(operator.lexeme)

    def _term(self) -> None:
        self._factor()
        while self._lookahead.type in _MULTIPLICATIVE:
            operator = self._lookahead
            self._match(operator.type)
            self._factor()
            self._emit(operator.lexeme)

    def _factor(self) -> None:
        kind = self._lookahead.type
        if kind is TokenType.LEFT_PAREN:
            self._match(TokenType.LEFT_PAREN)
            self._expr()
            self._match(TokenType.RIGHT_PAREN)
        elif kind in (TokenType.RIGHT_PAREN, TokenType.ID, TokenType.NUM):
            if kind is TokenType.RIGHT_PAREN:
                if self._parentheses <= 0:
                    message = "syntax error: missing '(', unexpected ')'"
                    self._report("\n" + message)
                    raise ParseError(message)
                if self._parentheses == 1:
                    self._report('\nsyntax error: empty parentheses "()"')
            self._emit(self._lookahead.lexeme)
            self._match(TokenType.NUM if kind is TokenType.NUM else TokenType.ID)
        else:
            self._report("\nsyntax error: unexpected", '"', self._lookahead.lexeme, '"')

    def _match(self, kind: TokenType) -> None:
        if self._lookahead.type is kind:
            if kind is TokenType.SEMICOLON:
                self._out.write("\n")
            elif kind is TokenType.LEFT_PAREN:
                self._parentheses += 1
            elif kind is TokenType.RIGHT_PAREN:
                self._parentheses -= 1
            self._current += 1
            self._lookahead = self._tokens[self._current]
        elif kind is TokenType.SEMICOLON:
            self._report("\nsyntax error: missing ';' at end of statement")
        elif kind is TokenType.RIGHT_PAREN:
            self._report("\nsyntax error: missing ')'")
        else:
            self._report("\nsyntax error: unexpected", '"', self._lookahead.lexeme, '"')


def translate(text: str) -> str:
    """Return everything the translator writes for ``text``."""
    buffer = io.StringIO()
    tokens = Lexer(text, buffer).lex_tokens()
    Parser(tokens, buffer).parse()
    return buffer.getvalue()