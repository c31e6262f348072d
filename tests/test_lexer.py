import io

from postfixer.lexer import KEYWORDS, Lexer
from postfixer.tokens import TokenType


def kinds(tokens):
    return [token.type for token in tokens]


def test_simple_expression_kinds():
    tokens = Lexer("(1+x);").lex_tokens()
    assert kinds(tokens) == [
        TokenType.LEFT_PAREN,
        TokenType.NUM,
        TokenType.PLUS,
        TokenType.ID,
        TokenType.RIGHT_PAREN,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


def test_numbers_and_words_are_read_whole():
    tokens = Lexer().lex_tokens("12 abc3")
    assert [t.lexeme for t in tokens] == ["12", "abc3", ""]
    assert kinds(tokens)[:2] == [TokenType.NUM, TokenType.ID]


def test_number_followed_by_letters_splits():
    tokens = Lexer().lex_tokens("9a")
    assert [t.lexeme for t in tokens[:2]] == ["9", "a"]
    assert kinds(tokens)[:2] == [TokenType.NUM, TokenType.ID]


def test_keywords():
    for word, kind in KEYWORDS.items():
        tokens = Lexer().lex_tokens(word)
        assert tokens[0].type is kind
        assert tokens[0].lexeme == word


def test_keyword_prefix_is_identifier():
    tokens = Lexer().lex_tokens("divx")
    assert tokens[0].type is TokenType.ID


def test_every_operator_lexeme_round_trips():
    text = "()+-*/;"
    tokens = Lexer().lex_tokens(text)
    assert "".join(t.lexeme for t in tokens) == text
    assert tokens[-1].type is TokenType.EOF


def test_newlines_count_lines():
    tokens = Lexer().lex_tokens("a\nb")
    assert [t.line for t in tokens] == [1, 2, 2]


def test_line_count_continues_across_calls():
    lexer = Lexer()
    lexer.lex_tokens("a\n")
    tokens = lexer.lex_tokens("b")
    assert tokens[0].line == 2


def test_whitespace_is_ignored():
    out = io.StringIO()
    tokens = Lexer(" \t\r a ", out).lex_tokens()
    assert [t.lexeme for t in tokens] == ["a", ""]
    assert out.getvalue() == ""


def test_unknown_character_is_reported_and_skipped():
    out = io.StringIO()
    tokens = Lexer("a # b", out).lex_tokens()
    assert [t.lexeme for t in tokens] == ["a", "b", ""]
    assert "#" in out.getvalue()
    assert out.getvalue().endswith("\n")


def test_lex_lines_has_single_trailing_eof():
    tokens = Lexer().lex_lines(["a+", "b;", "a+"])
    assert kinds(tokens).count(TokenType.EOF) == 1
    assert tokens[-1].type is TokenType.EOF


def test_lex_lines_matches_joined_text():
    joined = Lexer().lex_tokens("a+ b;")
    split = Lexer().lex_lines(["a+", "b;"])
    assert kinds(split) == kinds(joined)
    assert [t.lexeme for t in split] == [t.lexeme for t in joined]


def test_lex_lines_empty():
    tokens = Lexer().lex_lines([])
    assert kinds(tokens) == [TokenType.EOF]