# postfixer

A small one-pass compiler that translates infix arithmetic expressions into
postfix (reverse Polish) notation. A simple lexical analyser feeds a top-down
recursive-descent predictive parser, and the translation (or any syntax error)
is written out while parsing goes on.

## Grammar

```
       list -> expr ; list | empty
       expr -> term { (+ | -) term print(op) }
       term -> factor { (* | / | div | mod) factor print(op) }
     factor -> ( expr )
             | id  print(id)
             | num print(num)
```

Every expression ends with a `;`. Identifiers are a letter followed by letters
or digits; `div` and `mod` are keywords. Numbers are runs of digits. Spaces,
tabs and carriage returns are skipped, and newlines advance the line count.
Any other character is reported as `unknown token: <char>` and skipped.

Each operand and operator is written followed by a space, and each `;` ends
the line of output.

## Installation

```
pip install .
```

## Command line

Translate a file. All its lines are read as one stream of tokens, so a
statement may run over several lines:

```
postfixer expressions.txt
```

If the file cannot be opened, a message is written to standard error.

Start an interactive prompt, translating one line at a time until end of
input:

```
postfixer
```

```
> 1 + 2 * 3;
1 2 3 * + 

> (a - b) div 4;
a b - 4 div 

> 
```

Passing more than one argument prints a short usage message.

## Library

```python
from postfixer.parser import translate

print(translate("9 - 5 + 2;"), end="")   # 9 5 - 2 +
```

`translate` returns everything the translator writes, error messages included.

For finer control, lex and parse separately and direct output to any text
stream:

```python
import io
from postfixer.lexer import Lexer
from postfixer.parser import Parser

out = io.StringIO()
tokens = Lexer(out=out).lex_tokens("a * (b + c);")
Parser(tokens, out).parse()
print(out.getvalue())   # a b c + *
```

- `postfixer.tokens` holds `TokenType` and the frozen `Token` dataclass
  (`type`, `lexeme`, `content`, `line`).
- `postfixer.lexer.Lexer` has `lex_tokens(text)`, returning a token list that
  ends with an `EOF` token, and `lex_lines(lines)`, which lexes several lines
  into one list with a single trailing `EOF`.
- `postfixer.parser.Parser.parse(tokens)` writes the postfix form of every
  statement to its output stream.
- `postfixer.cli` provides `run`, `run_file`, `run_repl` and `main` for driving
  the translator from a string, a file or an input stream.

## Errors

An unmatched `)`, or a statement where the parser can make no progress at all,
raises `postfixer.parser.ParseError` after a message is written to the output.
Other syntax errors (a missing `;` or `)`, an unexpected token, empty
parentheses) are reported in the output and parsing carries on. At the prompt
a `ParseError` ends the current line and a new prompt is shown.

## What it does not do

The translator only rewrites expressions; it does not evaluate them, and it
keeps no variables or results between lines.

## Tests

```
pip install .[test]
pytest
```