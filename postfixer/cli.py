"""Command line front end: translate a file or run an interactive prompt."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .lexer import Lexer
from .parser import ParseError, Parser

PROMPT = "> "
USAGE = "To convert a file : postfixer [file]\nTo enter REPL mode: postfixer \n"


def run(text: str, out: TextIO | None = None) -> None:
    """Translate one piece of text, writing the result to ``out``."""
    out = out if out is not None else sys.stdout
    tokens = Lexer(text, out).lex_tokens()
    Parser(tokens, out).parse()


def run_file(path: str, out: TextIO | None = None) -> None:
    """Translate every line of the file at ``path``."""
    out = out if out is not None else sys.stdout
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            content = handle.read()
    except OSError:
        sys.stderr.write(f"Failed to open file: {path} not found\n\n")
        return
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    tokens = Lexer(out=out).lex_lines(lines)
    Parser(tokens, out).parse()


def run_repl(stdin: TextIO | None = None, out: TextIO | None = None) -> None:
    """Translate lines read from ``stdin`` until it is exhausted."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    out.write(PROMPT)
    out.flush()
    for line in stdin:
        try:
            run(line.removesuffix("\n"), out)
        except ParseError:
            out.write(PROMPT)
        else:
            out.write("\n" + PROMPT)
        out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: no argument starts the prompt, one argument names a file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        sys.stdout.write(USAGE)
    elif args:
        try:
            run_file(args[0])
        except ParseError:
            pass
    else:
        run_repl()
    return 0


if __name__ == "__main__":
    sys.exit(main())