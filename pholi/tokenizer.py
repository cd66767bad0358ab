"""Tokenizer for the input language of theory files."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import TextIO

from pholi.location import Location


class TokenKind(Enum):
    """Kinds of tokens produced by the tokenizer."""

    VARIABLE = auto()
    RBRACKET = auto()
    LBRACKET = auto()
    RPAR = auto()
    LPAR = auto()
    RBRACE = auto()
    LBRACE = auto()
    LEXISTS = auto()
    REXISTS = auto()
    ASSIGN = auto()
    EQ = auto()
    NE = auto()
    NOT = auto()
    PROP = auto()
    AND = auto()
    OR = auto()
    IMPLIES = auto()
    EQUIV = auto()
    DOT = auto()
    COMMA = auto()
    COLON = auto()
    SEMICOLON = auto()
    SEP = auto()
    STRUCT = auto()
    END = auto()
    DEF = auto()
    SYMBOL = auto()
    THM = auto()
    AXIOM = auto()
    LAMBDA = auto()
    LET = auto()
    IN = auto()
    EOF = auto()
    WHITESPACE = auto()
    COMMENT = auto()
    SCANERROR = auto()
    FILEBAD = auto()


_FIXED: dict[str, TokenKind] = {
    "]": TokenKind.RBRACKET,
    "[": TokenKind.LBRACKET,
    ")": TokenKind.RPAR,
    "(": TokenKind.LPAR,
    "}": TokenKind.RBRACE,
    "{": TokenKind.LBRACE,
    "<": TokenKind.LEXISTS,
    ">": TokenKind.REXISTS,
    ":=": TokenKind.ASSIGN,
    "==": TokenKind.EQ,
    "!=": TokenKind.NE,
    "!": TokenKind.NOT,
    "#": TokenKind.PROP,
    "&": TokenKind.AND,
    "|": TokenKind.OR,
    "->": TokenKind.IMPLIES,
    "<->": TokenKind.EQUIV,
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    "::": TokenKind.SEP,
    "??": TokenKind.LAMBDA,
}

_KEYWORDS: dict[str, TokenKind] = {
    "struct": TokenKind.STRUCT,
    "end": TokenKind.END,
    "def": TokenKind.DEF,
    "symbol": TokenKind.SYMBOL,
    "thm": TokenKind.THM,
    "axiom": TokenKind.AXIOM,
    "let": TokenKind.LET,
    "in": TokenKind.IN,
    "eof": TokenKind.EOF,
}

_PATTERNS: list[tuple[re.Pattern[str], TokenKind]] = [
    (re.compile(r"[_A-Za-z0-9]+"), TokenKind.VARIABLE),
    (re.compile(r"[ \f\n\r\t\v]+"), TokenKind.WHITESPACE),
    (re.compile(r"//[^\n]*\n"), TokenKind.COMMENT),
    (re.compile(r"/\*(?:[^*]|\*+[^/*])*\*+/"), TokenKind.COMMENT),
]


def _classify(text: str, pos: int) -> tuple[TokenKind, int]:
    """Return the kind and length of the longest token starting at ``pos``."""
    kind, length = TokenKind.SCANERROR, 0
    for word, word_kind in _FIXED.items():
        if len(word) > length and text.startswith(word, pos):
            kind, length = word_kind, len(word)
    for pattern, pattern_kind in _PATTERNS:
        match = pattern.match(text, pos)
        if match and match.end() - pos > length:
            kind, length = pattern_kind, match.end() - pos
    if kind is TokenKind.VARIABLE:
        kind = _KEYWORDS.get(text[pos : pos + length], kind)
    return kind, length


@dataclass(frozen=True)
class Symbol:
    """A token with its start location and, for some kinds, its text."""

    kind: TokenKind
    location: Location
    attribute: str | None = None

    def __str__(self) -> str:
        text = self.kind.name
        if self.attribute is not None:
            text += f"({self.attribute})"
        return f"{text} at {self.location}"


class Tokenizer:
    """Splits text into symbols, skipping whitespace and comments."""

    def __init__(self, source: str | TextIO) -> None:
        self._bad = False
        if isinstance(source, str):
            self._text = source
        else:
            try:
                self._text = source.read()
            except OSError:
                self._text = ""
                self._bad = True
        self._pos = 0
        self._line = 0
        self._column = 0

    def location(self) -> Location:
        """The location of the next unread character."""
        return Location(self._line, self._column)

    def _commit(self, length: int) -> str:
        chunk = self._text[self._pos : self._pos + length]
        self._pos += length
        newlines = chunk.count("\n")
        if newlines:
            self._line += newlines
            self._column = length - (chunk.rfind("\n") + 1)
        else:
            self._column += length
        return chunk

    def read(self) -> Symbol:
        """Read the next symbol."""
        while True:
            start = self.location()
            if self._bad:
                return Symbol(TokenKind.FILEBAD, start)
            if self._pos >= len(self._text):
                return Symbol(TokenKind.EOF, start)

            kind, length = _classify(self._text, self._pos)
            if kind is TokenKind.SCANERROR:
                return Symbol(kind, start, self._commit(max(length, 1)))
            if kind in (TokenKind.WHITESPACE, TokenKind.COMMENT):
                self._commit(length)
                continue
            text = self._commit(length)
            if kind is TokenKind.VARIABLE:
                return Symbol(kind, start, text)
            return Symbol(kind, start)

    def __iter__(self) -> Iterator[Symbol]:
        """Yield symbols up to and including EOF or the first scan error."""
        while True:
            symbol = self.read()
            yield symbol
            if symbol.kind in (TokenKind.EOF, TokenKind.SCANERROR, TokenKind.FILEBAD):
                return


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tokens of the given files, or of standard input."""
    paths = list(sys.argv[1:] if argv is None else argv)
    if not paths:
        for symbol in Tokenizer(sys.stdin):
            print(symbol)
        return 0
    status = 0
    for path in paths:
        try:
            with open(path, encoding="utf-8") as handle:
                tokenizer = Tokenizer(handle)
        except OSError as error:
            print(f"could not open file {path}: {error}", file=sys.stderr)
            status = 1
            continue
        for symbol in tokenizer:
            print(symbol)
    return status


if __name__ == "__main__":
    sys.exit(main())