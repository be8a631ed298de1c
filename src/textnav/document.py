"""A text version paired with its sentence spans.

:class:`SegmentedText` segments once and answers every offset query from the
cached spans.  Editing the text means building a new instance via
:meth:`SegmentedText.with_text`; spans are never patched incrementally.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from textnav.base import SentenceSpan, TextRange
from textnav.boundaries.abbreviations import AbbreviationTable
from textnav.boundaries.segmenter import segment
from textnav.resolve.highlight import Highlight, highlight_range_at
from textnav.resolve.paragraphs import paragraph_range_at
from textnav.resolve.sentences import sentence_index_for
from textnav.resolve.words import count_words, word_range_at
from textnav.utils.textspan import ensure_well_formed


@dataclass(slots=True, frozen=True)
class SegmentedText:
    text: str
    spans: tuple[SentenceSpan, ...]
    abbreviations: AbbreviationTable | None = None

    @classmethod
    def from_text(
        cls, text: str, *, abbreviations: AbbreviationTable | None = None
    ) -> "SegmentedText":
        return cls(text, tuple(segment(text, abbreviations=abbreviations)), abbreviations)

    @classmethod
    def from_spans(cls, text: str, spans: Sequence[SentenceSpan]) -> "SegmentedText":
        """Wrap externally produced spans after checking they fit ``text``."""

        ensure_well_formed(spans, text)
        return cls(text, tuple(spans))

    def with_text(self, text: str) -> "SegmentedText":
        """Return a fresh segmentation for edited text."""

        if text == self.text:
            return self
        return SegmentedText.from_text(text, abbreviations=self.abbreviations)

    def __len__(self) -> int:
        return len(self.spans)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @property
    def word_count(self) -> int:
        return count_words(self.text)

    def sentence_index_for(self, offset: int) -> int:
        return sentence_index_for(self.spans, self.text, offset)

    def sentence_at(self, offset: int) -> SentenceSpan | None:
        if not self.spans:
            return None
        return self.spans[self.sentence_index_for(offset)]

    def word_range_at(self, offset: int) -> TextRange:
        return word_range_at(self.text, offset)

    def paragraph_range_at(self, offset: int) -> TextRange:
        return paragraph_range_at(self.text, offset)

    def highlight_at(self, offset: int, *, sentence_index: int | None = None) -> Highlight:
        return highlight_range_at(self.text, self.spans, offset, sentence_index=sentence_index)


__all__ = ["SegmentedText"]
