"""Variable and quote expansion for command-line words and here-documents."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .textutil import is_name_char, is_name_start
from .tokens import Token, TokenType

_QUOTES = frozenset("'\"")
_BLANKS = frozenset(" \t\n")


class Expander:
    """Expands ``$NAME``, ``$?`` and quotes against an environment.

    ``env`` is either a mapping of names to values or an iterable of
    ``NAME=value`` entries, in which case the first entry for a name wins.
    """

    def __init__(
        self,
        env: Mapping[str, str] | Iterable[str] | None = None,
        last_exit_code: int = 0,
    ) -> None:
        if env is None:
            self.env: dict[str, str] = {}
        elif isinstance(env, Mapping):
            self.env = dict(env)
        else:
            table: dict[str, str] = {}
            for entry in env:
                name, sep, value = entry.partition("=")
                if sep and name not in table:
                    table[name] = value
            self.env = table
        self.last_exit_code = last_exit_code

    def get_value(self, name: str | None) -> str | None:
        """Return the value of variable ``name``, or None if it is unset."""
        if name is None:
            return None
        return self.env.get(name)

    def _dollar(self, text: str, pos: int) -> tuple[str, int]:
        """Expand the ``$`` at ``pos``; return the expansion and the next index."""
        nxt = text[pos + 1:pos + 2]
        if nxt in _QUOTES and nxt:
            return "", pos + 1
        if nxt == "?":
            return str(self.last_exit_code), pos + 2
        if not is_name_start(nxt):
            if not nxt:
                return "$", pos + 1
            return ("$" + nxt if nxt in _BLANKS else ""), pos + 2
        end = pos + 1
        while end < len(text) and is_name_char(text[end]):
            end += 1
        return self.get_value(text[pos + 1:end]) or "", end

    def _quoted(self, text: str, start: int) -> tuple[str, int]:
        """Expand the quoted run opening at ``start``.

        Returns the expansion and the index of the closing quote.
        """
        quote = text[start]
        length = len(text)
        parts: list[str] = []
        pos = start + 1
        while pos < length:
            char = text[pos]
            if quote == "'":
                if char == "'":
                    break
                parts.append(char)
                pos += 1
                continue
            if char == "$":
                if text[pos + 1:pos + 2] == '"':
                    parts.append("$")
                    pos += 1
                    break
                piece, pos = self._dollar(text, pos)
                parts.append(piece)
                if pos >= length:
                    break
                char = text[pos]
            if char == '"':
                break
            parts.append(char)
            pos += 1
        return "".join(parts), pos

    def _expand(self, text: str) -> tuple[str, TokenType | None]:
        """Expand a word; also report the last kind of expansion seen."""
        parts: list[str] = []
        kind: TokenType | None = None
        pos = 0
        while pos < len(text):
            char = text[pos]
            if char in _QUOTES:
                kind = TokenType.QUOTE
                piece, pos = self._quoted(text, pos)
                parts.append(piece)
                pos += 1
            elif char == "$":
                kind = TokenType.DOLLAR
                piece, pos = self._dollar(text, pos)
                parts.append(piece)
            else:
                parts.append(char)
                pos += 1
        return "".join(parts), kind

    def expand_word(self, text: str) -> str:
        """Return ``text`` with variables expanded and quotes removed."""
        return self._expand(text)[0]

    def expand_tokens(self, tokens: Sequence[Token]) -> list[Token]:
        """Expand every word token and return the resulting token list.

        A word holding a quote becomes a QUOTE token and one holding an
        unquoted ``$`` a DOLLAR token, whichever came last. DOLLAR tokens
        that expand to nothing are dropped; the input is left untouched.
        """
        result: list[Token] = []
        for token in tokens:
            if token.type is TokenType.WORD and token.text is not None:
                text, kind = self._expand(token.text)
                token = Token(kind or TokenType.WORD, text)
            if token.type is TokenType.DOLLAR and not token.text:
                continue
            if token.type is TokenType.QUOTE and token.text is None:
                token = Token(TokenType.QUOTE, "")
            result.append(token)
        return result

    def expand_heredoc_line(self, line: str) -> str:
        """Expand variables in a here-document line; quotes stay literal."""
        parts: list[str] = []
        pos = 0
        while pos < len(line):
            if line[pos] == "$":
                piece, pos = self._dollar(line, pos)
                parts.append(piece)
            else:
                parts.append(line[pos])
                pos += 1
        return "".join(parts)