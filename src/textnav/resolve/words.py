"""Word lookup by character offset.

A word character is an ASCII letter, an ASCII digit, an apostrophe or a
hyphen.  When the offset does not sit on a word, the nearest word forward is
preferred over the nearest one backward.
"""

from __future__ import annotations

import re

from textnav.base import EMPTY_RANGE, TextRange
from textnav.utils.constants import WORD_CHARS
from textnav.utils.textspan import clamp

_COUNT_RE = re.compile(r"\b[\w'-]+\b", re.ASCII)


def is_word_char(ch: str) -> bool:
    return ch in WORD_CHARS


def _nearest_word_char(text: str, idx: int) -> int | None:
    for i in range(idx + 1, len(text)):
        if text[i] in WORD_CHARS:
            return i
    for i in range(idx - 1, -1, -1):
        if text[i] in WORD_CHARS:
            return i
    return None


def word_range_at(text: str, offset: int) -> TextRange:
    """Return the ``[start, end)`` range of the word at ``offset``.

    The offset is clamped onto the last character of ``text``.  Returns
    ``[0, 0)`` for empty text or text without any word character.
    """

    if not text:
        return EMPTY_RANGE
    idx = clamp(offset, 0, len(text) - 1)
    if text[idx] not in WORD_CHARS:
        found = _nearest_word_char(text, idx)
        if found is None:
            return EMPTY_RANGE
        idx = found

    start = idx
    end = idx + 1
    while start > 0 and text[start - 1] in WORD_CHARS:
        start -= 1
    while end < len(text) and text[end] in WORD_CHARS:
        end += 1
    return TextRange(start, end)


def count_words(text: str) -> int:
    """Count word-like runs (ASCII letters, digits, underscores, apostrophes, hyphens)."""

    return len(_COUNT_RE.findall(text))


__all__ = ["is_word_char", "word_range_at", "count_words"]
