"""Parse SEARCH/REPLACE blocks into diffs."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from fuzzypatch.apply import Diff

__all__ = ["TokenType", "Token", "ParseError", "tokenize", "parse"]

START_SEARCH_PREFIX = "<<<<<<< SEARCH"
TEXT_SEPARATOR = "======="
END_REPLACE = ">>>>>>> REPLACE"

_INTEGER = re.compile(r"[+-]?[0-9]+")


class TokenType(Enum):
    """Kinds of lines in a patch document."""

    START_SEARCH = f"StartSearchType: {START_SEARCH_PREFIX} line:n"
    TEXT_SEPARATOR = f"TextSeparatorType: {TEXT_SEPARATOR}"
    END_REPLACE = f"EndReplaceType: {END_REPLACE}"
    TEXT = "TextType"
    INVALID = "InvalidType"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """One line of input with its kind and 0-based line number."""

    type: TokenType
    line: int = 0
    text: str = ""


class ParseError(ValueError):
    """Raised when a patch document is malformed."""


def _lines(text: str) -> Iterator[str]:
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        stop = len(text) if end < 0 else end + 1
        yield text[start:stop]
        start = stop


def tokenize(text: str) -> Iterator[Token]:
    """Yield a token per line of ``text``, then a final EOF token."""
    for number, line in enumerate(_lines(text)):
        trimmed = line.rstrip("\r\n")
        if line.startswith(START_SEARCH_PREFIX):
            kind = TokenType.START_SEARCH
        elif trimmed == TEXT_SEPARATOR:
            kind = TokenType.TEXT_SEPARATOR
        elif trimmed == END_REPLACE:
            kind = TokenType.END_REPLACE
        else:
            kind = TokenType.TEXT
        yield Token(kind, number, line)
    yield Token(TokenType.EOF)


class _Parser:
    def __init__(self, text: str) -> None:
        self._tokens = tokenize(text)
        self.current = Token(TokenType.INVALID)
        self.read()

    def read(self) -> Token:
        previous = self.current
        self.current = next(self._tokens, Token(TokenType.INVALID))
        return previous

    def expect(self, kind: TokenType) -> Token:
        token = self.read()
        if token.type is not kind:
            raise ParseError(
                f"expected {kind}, got {token.type}: {token.text!r} (line {token.line})"
            )
        return token

    def read_text(self) -> str:
        parts = []
        while self.current.type is TokenType.TEXT:
            parts.append(self.read().text)
        return "".join(parts)

    def parse_start_search(self) -> int:
        while self.current.type is TokenType.TEXT and not self.current.text.strip():
            self.read()
        token = self.expect(TokenType.START_SEARCH)
        suffix = token.text[len(START_SEARCH_PREFIX) :].strip()
        if not suffix.startswith("line:"):
            raise ParseError(f"expected {TokenType.START_SEARCH}, got {token.text!r}")
        number = suffix[len("line:") :]
        if not _INTEGER.fullmatch(number):
            raise ParseError(
                f"expected {TokenType.START_SEARCH}, got {token.text!r}: "
                f"invalid line number {number!r}"
            )
        return int(number)

    def parse_diff(self) -> Diff:
        line = self.parse_start_search()
        search_text = self.read_text()
        self.expect(TokenType.TEXT_SEPARATOR)
        replace_text = self.read_text()
        self.expect(TokenType.END_REPLACE)
        return Diff(line, search_text, replace_text)

    def parse(self) -> list[Diff]:
        diffs = []
        while self.current.type is not TokenType.EOF:
            diffs.append(self.parse_diff())
        return diffs


def parse(text: str) -> list[Diff]:
    """Parse every SEARCH/REPLACE block in ``text``.

    Raises :class:`ParseError` when a block is malformed.
    """
    return _Parser(text).parse()