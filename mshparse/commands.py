"""Grouping expanded tokens into the commands of a pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .tokens import Token, TokenType

_ARG_TYPES = frozenset({TokenType.WORD, TokenType.QUOTE, TokenType.DOLLAR})


@dataclass
class Command:
    """One command of a pipeline: its argument vector and its own tokens."""

    args: list[str] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)

    @property
    def name(self) -> str | None:
        """The program name, or None for a command with no arguments."""
        return self.args[0] if self.args else None


def is_arg(token: Token, previous: Token | None) -> bool:
    """True if ``token`` is an argument rather than a redirection target."""
    return token.type in _ARG_TYPES and (
        previous is None or previous.type is not TokenType.REDIR
    )


def count_commands(tokens: Sequence[Token]) -> int:
    """Number of commands in ``tokens``: one more than the number of pipes."""
    return 1 + sum(1 for token in tokens if token.type is TokenType.PIPE)


def split_commands(tokens: Sequence[Token]) -> list[list[Token]]:
    """Split ``tokens`` at every pipe, dropping the pipes themselves."""
    segments: list[list[Token]] = [[]]
    for token in tokens:
        if token.type is TokenType.PIPE:
            segments.append([])
        else:
            segments[-1].append(token)
    return segments


def _build(segment: list[Token]) -> Command:
    previous: list[Token | None] = [None, *segment[:-1]]
    args = [
        token.text if token.text is not None else ""
        for prev, token in zip(previous, segment)
        if is_arg(token, prev)
    ]
    return Command(args=args, tokens=segment)


def build_commands(tokens: Sequence[Token]) -> list[Command]:
    """Turn a pipeline's tokens into one Command per pipe-separated part."""
    return [_build(segment) for segment in split_commands(tokens)]