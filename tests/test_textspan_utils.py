import pytest

from textnav.base import SentenceSpan
from textnav.utils.errors import OverlapError
from textnav.utils.textspan import (
    build_line_starts,
    char_to_line_col,
    clamp,
    ensure_well_formed,
    first_non_space,
    next_non_space_char,
    spans_overlap,
)


def test_line_starts_and_char_to_line_col() -> None:
    text = "John\nDoe\n\n"
    line_starts = build_line_starts(text)
    assert line_starts == (0, 5, 9, 10)
    assert char_to_line_col(0, line_starts) == (0, 0)
    assert char_to_line_col(5, line_starts) == (1, 0)
    assert char_to_line_col(9, line_starts) == (2, 0)
    with pytest.raises(ValueError):
        char_to_line_col(-1, line_starts)


def test_spans_overlap_truth_table() -> None:
    assert spans_overlap((0, 2), (1, 3)) is True
    assert spans_overlap((0, 2), (2, 4)) is False
    assert spans_overlap((2, 4), (0, 2)) is False


def test_clamp() -> None:
    assert clamp(-1, 0, 5) == 0
    assert clamp(9, 0, 5) == 5
    assert clamp(3, 0, 5) == 3


def test_whitespace_helpers() -> None:
    assert first_non_space("  \tab", 0, 5) == 3
    assert first_non_space("   ", 0, 3) == 3
    assert next_non_space_char("a  \n b", 1) == "b"
    assert next_non_space_char("a   ", 1) == ""


def test_ensure_well_formed_allows_touching_spans() -> None:
    text = "ab"
    ensure_well_formed([SentenceSpan(0, 1, "a"), SentenceSpan(1, 2, "b")], text)
    with pytest.raises(OverlapError):
        ensure_well_formed([SentenceSpan(0, 2, "ab"), SentenceSpan(1, 2, "b")], text)
