"""Lightweight sentence segmentation.

The :func:`segment` helper performs a single left-to-right scan over the
text.  Every ``!`` and ``?`` ends a sentence; a ``.`` ends one unless it sits
inside a decimal number, closes an abbreviation, or belongs to an ellipsis
that the sentence continues past.  A terminating dot absorbs any dots that
immediately follow it, and every terminator absorbs trailing closing quotes
and brackets.

Returned :class:`~textnav.base.SentenceSpan` objects use half‑open
``[start, end)`` offsets into the original string.  Leading whitespace is
trimmed from each span; whitespace between sentences belongs to no span.

When the input is not blank yet the scan yields nothing, a single span
covering the whole, *untrimmed*, input is returned.  This asymmetry with the
per-sentence spans is kept on purpose because consumers may rely on it.
"""

from __future__ import annotations

from typing import List

from textnav.base import SentenceSpan
from textnav.boundaries.abbreviations import AbbreviationTable, default_abbreviations
from textnav.boundaries.context import is_abbreviation, is_decimal, is_ellipsis_continuation
from textnav.utils.constants import TERMINATORS, TRAILING_CLOSERS
from textnav.utils.logging import get_logger
from textnav.utils.textspan import first_non_space

log = get_logger(__name__)


def _suppressed(text: str, idx: int, table: AbbreviationTable) -> bool:
    return (
        is_decimal(text, idx)
        or is_abbreviation(text, idx, table)
        or is_ellipsis_continuation(text, idx)
    )


def _sentence_end(text: str, idx: int) -> int:
    """Return the exclusive end of a sentence terminated at ``idx``."""

    n = len(text)
    end = idx + 1
    if text[idx] == ".":
        while end < n and text[end] == ".":
            end += 1
    while end < n and text[end] in TRAILING_CLOSERS:
        end += 1
    return end


def _make_span(text: str, start: int, end: int) -> SentenceSpan | None:
    if not text[start:end].strip():
        return None
    s = first_non_space(text, start, end)
    return SentenceSpan(s, end, text[s:end])


def segment(text: str, *, abbreviations: AbbreviationTable | None = None) -> List[SentenceSpan]:
    """Split ``text`` into sentence spans.

    Parameters
    ----------
    text:
        Arbitrary input text.
    abbreviations:
        Abbreviation table to consult; the package defaults when omitted.

    Returns
    -------
    list[SentenceSpan]
        Spans in strictly increasing ``start`` order.  Empty for blank input.
    """

    if not text.strip():
        return []

    table = abbreviations if abbreviations is not None else default_abbreviations()
    spans: List[SentenceSpan] = []
    n = len(text)
    start = 0
    i = 0

    while i < n:
        ch = text[i]
        if ch not in TERMINATORS or (ch == "." and _suppressed(text, i, table)):
            i += 1
            continue

        end = _sentence_end(text, i)
        span = _make_span(text, start, end)
        if span is not None:
            spans.append(span)
        start = i = end

    if start < n:
        span = _make_span(text, start, n)
        if span is not None:
            spans.append(span)

    if not spans:
        log.debug("no sentence found in %d chars; using whole-text span", n)
        return [SentenceSpan(0, n, text)]

    log.debug("segmented %d chars into %d sentences", n, len(spans))
    return spans


__all__ = ["SentenceSpan", "segment"]
