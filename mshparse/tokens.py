"""Breaking a command line into words, pipes and redirections."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

_BLANKS = frozenset(" \t\n")
_WORD_STOP = frozenset("| \t\n<>")
_QUOTES = frozenset("'\"")


class TokenType(enum.Enum):
    """Kinds of token a command line is made of."""

    WORD = "word"
    PIPE = "pipe"
    REDIR = "redir"
    QUOTE = "quote"
    DOLLAR = "dollar"


@dataclass
class Token:
    """One token of a command line; expansion may change both fields."""

    type: TokenType
    text: str | None


class LexError(ValueError):
    """Raised when a command line cannot be split into tokens."""


def _skip_quote(line: str, start: int) -> int | None:
    """Return the index after the quote closing the one at ``start``."""
    end = line.find(line[start], start + 1)
    return None if end < 0 else end + 1


def check_quotes(line: str) -> None:
    """Raise LexError if a single or double quote is left open."""
    i = 0
    while i < len(line):
        if line[i] in _QUOTES:
            after = _skip_quote(line, i)
            if after is None:
                raise LexError("quotes error")
            i = after
        else:
            i += 1


def _scan(line: str) -> Iterator[Token]:
    i = 0
    length = len(line)
    while i < length:
        while i < length and line[i] in _BLANKS:
            i += 1
        if i >= length:
            break
        char = line[i]
        if char == "|":
            yield Token(TokenType.PIPE, char)
            i += 1
        elif char in "<>":
            width = 2 if line[i + 1:i + 2] == char else 1
            yield Token(TokenType.REDIR, line[i:i + width])
            i += width
        else:
            start = i
            while i < length and line[i] not in _WORD_STOP:
                if line[i] in _QUOTES:
                    after = _skip_quote(line, i)
                    i = length if after is None else after
                else:
                    i += 1
            if i > start:
                yield Token(TokenType.WORD, line[start:i])


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into tokens, keeping quoted text inside its word."""
    check_quotes(line)
    return list(_scan(line))