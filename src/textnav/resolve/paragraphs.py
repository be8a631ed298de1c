"""Paragraph lookup by character offset.

Paragraphs are separated by two consecutive newlines.  The returned range is
trimmed of surrounding whitespace.
"""

from __future__ import annotations

from textnav.base import EMPTY_RANGE, TextRange
from textnav.utils.constants import PARAGRAPH_BREAK
from textnav.utils.textspan import clamp


def paragraph_range_at(text: str, offset: int) -> TextRange:
    """Return the trimmed ``[start, end)`` range of the paragraph at ``offset``."""

    if not text:
        return EMPTY_RANGE
    n = len(text)
    at = clamp(offset, 0, n)
    start = 0
    end = n

    for i in range(at - 1, 0, -1):
        if text[i - 1 : i + 1] == PARAGRAPH_BREAK:
            start = i + 1
            break
    for i in range(at, n - 1):
        if text[i : i + 2] == PARAGRAPH_BREAK:
            end = i
            break

    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return TextRange(start, end)


__all__ = ["paragraph_range_at"]
