import io

import pytest

from pholi.location import Location
from pholi.tokenizer import Symbol, TokenKind, Tokenizer, main


def kinds(text):
    return [symbol.kind for symbol in Tokenizer(text)]


def test_definition_tokens():
    assert kinds("def f := x;") == [
        TokenKind.DEF,
        TokenKind.VARIABLE,
        TokenKind.ASSIGN,
        TokenKind.VARIABLE,
        TokenKind.SEMICOLON,
        TokenKind.EOF,
    ]


@pytest.mark.parametrize(
    "word, kind",
    [
        ("struct", TokenKind.STRUCT),
        ("end", TokenKind.END),
        ("symbol", TokenKind.SYMBOL),
        ("thm", TokenKind.THM),
        ("axiom", TokenKind.AXIOM),
        ("let", TokenKind.LET),
        ("in", TokenKind.IN),
    ],
)
def test_keywords(word, kind):
    assert Tokenizer(word).read().kind is kind


def test_keyword_prefix_is_variable():
    symbol = Tokenizer("structure").read()
    assert symbol.kind is TokenKind.VARIABLE
    assert symbol.attribute == "structure"


def test_eof_keyword():
    assert Tokenizer("eof more").read().kind is TokenKind.EOF


@pytest.mark.parametrize(
    "text, kind",
    [
        ("<->", TokenKind.EQUIV),
        ("->", TokenKind.IMPLIES),
        ("<", TokenKind.LEXISTS),
        ("::", TokenKind.SEP),
        (":", TokenKind.COLON),
        ("==", TokenKind.EQ),
        ("!=", TokenKind.NE),
        ("!", TokenKind.NOT),
        ("??", TokenKind.LAMBDA),
        ("#", TokenKind.PROP),
    ],
)
def test_longest_match(text, kind):
    assert kinds(text) == [kind, TokenKind.EOF]


def test_comments_are_skipped():
    assert kinds("a // note\n/* block ** */ b") == [
        TokenKind.VARIABLE,
        TokenKind.VARIABLE,
        TokenKind.EOF,
    ]


def test_scan_error_stops_iteration():
    symbols = list(Tokenizer("a @ b"))
    assert [s.kind for s in symbols] == [TokenKind.VARIABLE, TokenKind.SCANERROR]
    assert symbols[-1].attribute == "@"


def test_unterminated_block_comment_is_error():
    symbol = Tokenizer("/* open").read()
    assert symbol.kind is TokenKind.SCANERROR
    assert symbol.attribute == "/"


def test_locations():
    tokenizer = Tokenizer("ab\n  cd")
    first = tokenizer.read()
    second = tokenizer.read()
    assert first.location == Location(0, 0)
    assert second.location == Location(1, 2)
    assert str(second.location) == "2/3"
    assert tokenizer.read().location == tokenizer.location()


def test_eof_repeats():
    tokenizer = Tokenizer("")
    assert tokenizer.read().kind is TokenKind.EOF
    assert tokenizer.read().kind is TokenKind.EOF


def test_stream_input():
    assert kinds(io.StringIO("x, y")) == [
        TokenKind.VARIABLE,
        TokenKind.COMMA,
        TokenKind.VARIABLE,
        TokenKind.EOF,
    ]


def test_symbol_str_contains_attribute():
    symbol = Symbol(TokenKind.VARIABLE, Location(0, 0), "abc")
    assert "abc" in str(symbol)
    assert str(symbol.location) in str(symbol)


def test_main_prints_tokens(tmp_path, capsys):
    path = tmp_path / "theory.phl"
    path.write_text("def x", encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert "x" in lines[1]


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.phl")]) == 1
    assert "missing.phl" in capsys.readouterr().err