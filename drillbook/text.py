"""String exercises: length, palindromes, word counts and substitution."""

from __future__ import annotations

import re
from dataclasses import dataclass

_WORD = re.compile(r"[^ \t\n\v\f\r]+")


@dataclass(frozen=True)
class TextCounts:
    """Word, line and character totals for a piece of text."""

    words: int
    lines: int
    chars: int

    def __str__(self) -> str:
        return f"Words: {self.words} Lines: {self.lines} Chars: {self.chars}"


def string_length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def is_palindrome(text: str) -> bool:
    """Return True when ``text``, less one trailing newline, reads the same reversed."""
    if text.endswith("\n"):
        text = text[:-1]
    return text == text[::-1]


def count_text(text: str) -> TextCounts:
    """Count words, newline characters and characters in ``text``."""
    return TextCounts(
        words=len(_WORD.findall(text)),
        lines=text.count("\n"),
        chars=len(text),
    )


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping ``old`` with ``new``, line by line."""
    if not old:
        raise ValueError("search string must not be empty")
    return "".join(
        line.replace(old, new) for line in text.splitlines(keepends=True)
    )