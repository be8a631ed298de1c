"""Map a character offset to the index of its sentence."""

from __future__ import annotations

from collections.abc import Sequence

from textnav.base import SentenceSpan
from textnav.utils.textspan import clamp


def sentence_index_for(spans: Sequence[SentenceSpan], text: str, offset: int) -> int:
    """Return the index of the span containing ``offset``.

    ``spans`` must come from segmenting exactly ``text``.  The offset is
    clamped into ``[0, len(text)]`` and located by binary search.

    Offsets that fall between two spans resolve to the *following* span, and
    offsets past the last span resolve to the last one.  An empty span
    sequence yields ``0``; callers guard the index themselves.
    """

    if not spans:
        return 0
    at = clamp(offset, 0, len(text))
    lo = 0
    hi = len(spans) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        span = spans[mid]
        if at < span.start:
            hi = mid - 1
        elif at >= span.end:
            lo = mid + 1
        else:
            return mid
    return clamp(lo, 0, len(spans) - 1)


__all__ = ["sentence_index_for"]
