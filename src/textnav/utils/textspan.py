"""Utility functions for working with text spans and offsets.

The helpers in this module are pure and framework agnostic.  Spans are
represented as half‑open intervals ``[start, end)`` where ``start`` is inclusive
and ``end`` is exclusive.  Boundary touching spans therefore do not overlap.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

from textnav.base import SentenceSpan
from textnav.utils.errors import OverlapError, SpanOutOfBoundsError


def clamp(value: int, low: int, high: int) -> int:
    """Return ``value`` limited to the closed interval ``[low, high]``."""

    return max(low, min(high, value))


def first_non_space(text: str, start: int, end: int) -> int:
    """Return the first index in ``[start, end)`` that is not whitespace.

    ``end`` is returned when the whole slice is whitespace.
    """

    i = start
    while i < end and text[i].isspace():
        i += 1
    return i


def next_non_space_char(text: str, start: int) -> str:
    """Return the first non-whitespace character at or after ``start``.

    An empty string is returned when there is none.
    """

    i = first_non_space(text, start, len(text))
    return text[i] if i < len(text) else ""


def build_line_starts(text: str) -> tuple[int, ...]:
    """Return the starting character index for each line in ``text``."""

    starts = [0]
    for idx, char in enumerate(text):
        if char == "\n":
            starts.append(idx + 1)
    return tuple(starts)


def char_to_line_col(index: int, line_starts: tuple[int, ...]) -> tuple[int, int]:
    """Convert a character index to ``(line, col)`` using ``line_starts``.

    Line and column numbers are zero‑based.
    """

    if index < 0:
        raise ValueError("index must be non‑negative")
    line = bisect_right(line_starts, index) - 1
    if line < 0:
        line = 0
    col = index - line_starts[line]
    return line, col


def spans_overlap(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Return ``True`` if span ``a`` overlaps span ``b``."""

    return not (a[1] <= b[0] or b[1] <= a[0])


def ensure_well_formed(spans: Sequence[SentenceSpan], text: str) -> None:
    """Ensure ``spans`` is a valid segmentation of ``text``.

    Spans must lie within the text, be ordered by strictly increasing
    ``start`` and must not overlap.  Raises :class:`SpanOutOfBoundsError` or
    :class:`OverlapError` otherwise.
    """

    for span in spans:
        if span.end > len(text):
            msg = f"span [{span.start}, {span.end}) exceeds text length {len(text)}"
            raise SpanOutOfBoundsError(msg)
    for prev, cur in zip(spans, spans[1:]):
        if cur.start <= prev.start or spans_overlap((prev.start, prev.end), (cur.start, cur.end)):
            msg = f"Spans overlap or are out of order: {prev} and {cur}"
            raise OverlapError(msg)


__all__ = [
    "clamp",
    "first_non_space",
    "next_non_space_char",
    "build_line_starts",
    "char_to_line_col",
    "spans_overlap",
    "ensure_well_formed",
]
