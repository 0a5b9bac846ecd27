"""Small string helpers with C-library-like semantics used by the parser."""

from __future__ import annotations

_ATOI_SPACE = frozenset("\t\n\v\f\r ")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    Parsing stops at the first non-digit; text with no digits gives 0.
    """
    rest = text.lstrip("".join(_ATOI_SPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _ASCII_DIGITS:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering."""
    for position in range(n):
        a = ord(first[position]) if position < len(first) else 0
        b = ord(second[position]) if position < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def is_name_start(char: str) -> bool:
    """True for a character that may begin a variable name."""
    return len(char) == 1 and (char in _ASCII_LETTERS or char == "_")


def is_name_char(char: str) -> bool:
    """True for a character that may appear inside a variable name."""
    return len(char) == 1 and (
        char in _ASCII_LETTERS or char in _ASCII_DIGITS or char == "_"
    )