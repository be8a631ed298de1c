"""Tests for the cached segmentation wrapper."""

from __future__ import annotations

import pytest

from textnav.base import SentenceSpan, TextRange
from textnav.boundaries import default_abbreviations
from textnav.document import SegmentedText
from textnav.utils.errors import OverlapError, SpanOutOfBoundsError


def test_queries_use_cached_spans() -> None:
    doc = SegmentedText.from_text("Hi there. Bye now.\n\nNew para.")
    assert len(doc) == 3
    assert doc.sentence_index_for(10) == 1
    assert doc.sentence_at(0) == doc.spans[0]
    assert doc.word_range_at(0) == TextRange(0, 2)
    assert doc.paragraph_range_at(25).slice(doc.text) == "New para."
    assert doc.highlight_at(3).granularity == "word"
    assert doc.word_count == 6


def test_with_text_resegments() -> None:
    doc = SegmentedText.from_text("One. Two.")
    assert doc.with_text("One. Two.") is doc
    edited = doc.with_text("One. Two. Three.")
    assert len(edited) == 3
    assert len(doc) == 2


def test_with_text_keeps_abbreviations() -> None:
    table = default_abbreviations().extended(titles=["capt."])
    doc = SegmentedText.from_text("x", abbreviations=table)
    edited = doc.with_text("Capt. Hook sails.")
    assert [s.text for s in edited.spans] == ["Capt. Hook sails."]


def test_blank_document() -> None:
    doc = SegmentedText.from_text("   ")
    assert doc.is_blank
    assert doc.spans == ()
    assert doc.sentence_at(1) is None
    assert doc.sentence_index_for(1) == 0


def test_from_spans_validates() -> None:
    text = "abc def"
    good = [SentenceSpan(0, 3, "abc"), SentenceSpan(4, 7, "def")]
    assert len(SegmentedText.from_spans(text, good)) == 2
    with pytest.raises(OverlapError):
        SegmentedText.from_spans(text, [SentenceSpan(0, 5, "abc d"), SentenceSpan(4, 7, "def")])
    with pytest.raises(OverlapError):
        SegmentedText.from_spans(text, list(reversed(good)))
    with pytest.raises(SpanOutOfBoundsError):
        SegmentedText.from_spans(text, [SentenceSpan(0, 9, "abc def")])


def test_span_validation() -> None:
    with pytest.raises(SpanOutOfBoundsError):
        SentenceSpan(5, 2, "")
    with pytest.raises(SpanOutOfBoundsError):
        TextRange(-1, 2)
