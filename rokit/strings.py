"""Case-insensitive string handling shared by tool identifiers."""

from __future__ import annotations

from functools import total_ordering

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(value: str) -> str:
    return value.translate(_ASCII_LOWER)


def char_is_word_separator(c: str) -> bool:
    """Return True if the character separates words: ASCII whitespace, '-' or '_'."""
    return c in _ASCII_WHITESPACE or c in ("-", "_")


@total_ordering
class CaseInsensitiveString:
    """A string that compares and hashes ignoring ASCII case but keeps its casing."""

    __slots__ = ("_uncased", "_original")

    def __init__(self, value: str) -> None:
        self._original = str(value)
        self._uncased = _ascii_lower(self._original)

    @property
    def uncased(self) -> str:
        """The ASCII-lowercased form used for comparisons."""
        return self._uncased

    @property
    def original(self) -> str:
        """The string with its original casing."""
        return self._original

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaseInsensitiveString):
            return NotImplemented
        return self._uncased == other._uncased

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CaseInsensitiveString):
            return NotImplemented
        return self._uncased < other._uncased

    def __hash__(self) -> int:
        return hash(self._uncased)

    def __str__(self) -> str:
        return self._original

    def __repr__(self) -> str:
        return f"CaseInsensitiveString({self._original!r})"