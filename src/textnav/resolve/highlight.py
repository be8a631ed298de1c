"""Pick the finest non-empty highlight for an offset.

Word-level progress reported by a speech engine may land on whitespace or
punctuation.  The fallback order is word, then the current sentence span, then
the paragraph around the offset.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from textnav.base import EMPTY_RANGE, SentenceSpan, TextRange
from textnav.resolve.paragraphs import paragraph_range_at
from textnav.resolve.sentences import sentence_index_for
from textnav.resolve.words import word_range_at

Granularity = Literal["word", "sentence", "paragraph", "none"]


@dataclass(slots=True, frozen=True)
class Highlight:
    range: TextRange
    granularity: Granularity


def highlight_range_at(
    text: str,
    spans: Sequence[SentenceSpan],
    offset: int,
    *,
    sentence_index: int | None = None,
) -> Highlight:
    """Return the range to highlight for ``offset``.

    ``sentence_index`` pins the sentence fallback to the sentence currently
    being read; otherwise the sentence is looked up from ``offset``.
    """

    word = word_range_at(text, offset)
    if not word.is_empty:
        return Highlight(word, "word")

    if spans:
        idx = sentence_index
        if idx is None:
            idx = sentence_index_for(spans, text, offset)
        if 0 <= idx < len(spans) and spans[idx].length:
            span = spans[idx]
            return Highlight(TextRange(span.start, span.end), "sentence")

    paragraph = paragraph_range_at(text, offset)
    if not paragraph.is_empty:
        return Highlight(paragraph, "paragraph")
    return Highlight(EMPTY_RANGE, "none")


__all__ = ["Granularity", "Highlight", "highlight_range_at"]
