"""Core span primitives shared by the segmenter and the position resolvers.

Spans follow the half‑open interval convention ``[start, end)`` where
``start`` is inclusive and ``end`` is exclusive.  Offsets always index the
original text; no normalized copy is ever involved.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from textnav.utils.errors import SpanOutOfBoundsError


@dataclass(slots=True, frozen=True)
class SentenceSpan:
    """A single sentence span.

    ``text`` is always ``original[start:end]`` and is kept only for
    convenience; the offsets are the source of truth.
    """

    start: int
    end: int
    text: str

    def __post_init__(self) -> None:  # noqa: D401 - simple validation
        if self.start < 0 or self.end < self.start:
            raise SpanOutOfBoundsError(f"invalid span [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        """Return span length in characters."""

        return self.end - self.start

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


@dataclass(slots=True, frozen=True)
class TextRange:
    """A ``[start, end)`` range returned by word and paragraph lookups.

    A degenerate range (``start == end``) means "nothing here"; callers fall
    back to a coarser granularity.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise SpanOutOfBoundsError(f"invalid range [{self.start}, {self.end})")

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Return the substring of ``text`` covered by this range."""

        return text[self.start : self.end]


EMPTY_RANGE = TextRange(0, 0)

__all__ = ["SentenceSpan", "TextRange", "EMPTY_RANGE"]
