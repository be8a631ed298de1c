"""Tests for offset to sentence resolution."""

from __future__ import annotations

from textnav.base import SentenceSpan
from textnav.boundaries import segment
from textnav.resolve.sentences import sentence_index_for


def _spans(text: str, bounds: list[tuple[int, int]]) -> list[SentenceSpan]:
    return [SentenceSpan(s, e, text[s:e]) for s, e in bounds]


def test_gap_resolves_to_next_sentence() -> None:
    text = "Abcd.  Efgh."
    spans = _spans(text, [(0, 5), (7, 12)])
    assert sentence_index_for(spans, text, 6) == 1
    assert sentence_index_for(spans, text, 5) == 1


def test_offsets_inside_spans() -> None:
    text = "One. Two. Three."
    spans = segment(text)
    assert [sentence_index_for(spans, text, i) for i in (0, 3, 5, 8, 10, 15)] == [0, 0, 1, 1, 2, 2]


def test_span_start_maps_to_its_index() -> None:
    text = "  Alpha beta. Gamma?\n\nDelta! Epsilon"
    spans = segment(text)
    for idx, span in enumerate(spans):
        assert sentence_index_for(spans, text, span.start) == idx


def test_offset_is_clamped() -> None:
    text = "One. Two."
    spans = segment(text)
    assert sentence_index_for(spans, text, -50) == 0
    assert sentence_index_for(spans, text, 10_000) == len(spans) - 1


def test_leading_whitespace_resolves_to_first() -> None:
    text = "   One. Two."
    spans = segment(text)
    assert sentence_index_for(spans, text, 0) == 0


def test_end_of_text_resolves_to_last() -> None:
    text = "One. Two.   "
    spans = segment(text)
    assert sentence_index_for(spans, text, len(text)) == 1


def test_empty_spans_resolve_to_zero() -> None:
    assert sentence_index_for([], "", 5) == 0
    assert sentence_index_for([], "   ", 1) == 0
