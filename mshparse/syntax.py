"""Checking the order of pipes and redirections in a token list."""

from __future__ import annotations

from typing import Sequence

from .tokens import Token, TokenType


class ShellSyntaxError(ValueError):
    """Raised when tokens are not a valid command line.

    An empty token list is rejected with an empty message: a blank
    line is not run, but nothing is reported for it.
    """

    def __init__(self, message: str = "syntax error") -> None:
        super().__init__(message)
        self.message = message


def _misplaced(prev: Token | None, token: Token, nxt: Token | None) -> bool:
    if token.type is TokenType.PIPE:
        return (
            prev is None
            or prev.type is not TokenType.WORD
            or nxt is None
            or nxt.type is TokenType.PIPE
        )
    if token.type is TokenType.REDIR:
        return nxt is None or nxt.type is not TokenType.WORD
    return False


def check_syntax(tokens: Sequence[Token]) -> Sequence[Token]:
    """Return ``tokens`` unchanged if their order is valid, else raise."""
    if not tokens:
        raise ShellSyntaxError("")
    previous = [None, *tokens[:-1]]
    following = [*tokens[1:], None]
    for prev, token, nxt in zip(previous, tokens, following):
        if _misplaced(prev, token, nxt):
            raise ShellSyntaxError()
    return tokens