"""Tests for paragraph lookup."""

from __future__ import annotations

from textnav.base import TextRange
from textnav.resolve.paragraphs import paragraph_range_at

TEXT = "First para line.\nStill first.\n\n  Second para.  \n\nThird."


def test_first_paragraph() -> None:
    r = paragraph_range_at(TEXT, 3)
    assert r.slice(TEXT) == "First para line.\nStill first."


def test_middle_paragraph_is_trimmed() -> None:
    r = paragraph_range_at(TEXT, TEXT.index("Second") + 2)
    assert r.slice(TEXT) == "Second para."


def test_last_paragraph() -> None:
    r = paragraph_range_at(TEXT, len(TEXT))
    assert r.slice(TEXT) == "Third."


def test_single_newline_is_not_a_break() -> None:
    text = "a\nb"
    assert paragraph_range_at(text, 2) == TextRange(0, 3)


def test_offset_on_break() -> None:
    text = "ab\n\ncd"
    assert paragraph_range_at(text, 2) == TextRange(0, 2)


def test_empty_and_blank_text() -> None:
    assert paragraph_range_at("", 4) == TextRange(0, 0)
    assert paragraph_range_at("   ", 1).is_empty


def test_offset_clamped() -> None:
    text = "x\n\ny"
    assert paragraph_range_at(text, -5) == TextRange(0, 1)
    assert paragraph_range_at(text, 500) == TextRange(3, 4)


def test_three_newlines_split_once() -> None:
    text = "A.\n\n\nB."
    assert paragraph_range_at(text, 0) == TextRange(0, 2)
    assert paragraph_range_at(text, text.index("B")) == TextRange(5, 7)
