"""Translate infix arithmetic expressions into postfix notation."""

__version__ = "0.1.0"
__all__ = ["cli", "lexer", "parser", "tokens"]