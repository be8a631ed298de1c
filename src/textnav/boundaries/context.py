"""Local punctuation context checks.

Each predicate receives the full text and the index of a ``.`` and decides
whether that dot is *not* a sentence terminator.  The checks only look at the
token ending at the dot and the first character after it, which keeps the scan
linear apart from a small look-around.
"""

from __future__ import annotations

import re

from textnav.boundaries.abbreviations import AbbreviationTable
from textnav.utils.constants import (
    LEADING_OPENERS,
    is_ascii_digit,
    is_ascii_lower,
    is_ascii_upper,
)
from textnav.utils.textspan import next_non_space_char

_INITIAL_RE = re.compile(r"[a-z]\.")
_INITIALISM_RE = re.compile(r"(?:[a-z]\.){2,}")
_MIN_ELLIPSIS = 3


def _char_at(text: str, idx: int) -> str:
    return text[idx] if 0 <= idx < len(text) else ""


def _continues(ch: str) -> bool:
    return is_ascii_lower(ch) or is_ascii_digit(ch)


def token_before(text: str, idx: int) -> str:
    """Return the lowercased token ending at and including ``text[idx]``.

    The token is the maximal run of non-whitespace characters; leading
    opening brackets and quotes are stripped.
    """

    i = idx
    while i >= 0 and not text[i].isspace():
        i -= 1
    return text[i + 1 : idx + 1].lstrip(LEADING_OPENERS).lower()


def is_decimal(text: str, idx: int) -> bool:
    """``3.14``: a digit on both sides of the dot."""

    return is_ascii_digit(_char_at(text, idx - 1)) and is_ascii_digit(_char_at(text, idx + 1))


def is_abbreviation(text: str, idx: int, table: AbbreviationTable) -> bool:
    """Return ``True`` when the dot at ``idx`` closes an abbreviation."""

    token = token_before(text, idx)
    if not token:
        return False

    nxt = next_non_space_char(text, idx + 1)
    if table.is_title(token):
        return True
    if _INITIAL_RE.fullmatch(token) and is_ascii_upper(_char_at(text, idx + 1)):
        # Initial glued to a capital, e.g. "J.Smith".
        return True
    if _INITIALISM_RE.fullmatch(token):
        return _continues(nxt)
    if table.is_common(token):
        return _continues(nxt)
    # New sentences start capitalized.
    return is_ascii_lower(nxt)


def is_ellipsis_continuation(text: str, idx: int) -> bool:
    """A run of three or more dots followed by a lowercase word or digit."""

    if _char_at(text, idx) != ".":
        return False
    left = idx
    right = idx
    while _char_at(text, left - 1) == ".":
        left -= 1
    while _char_at(text, right + 1) == ".":
        right += 1
    if right - left + 1 < _MIN_ELLIPSIS:
        return False
    return _continues(next_non_space_char(text, right + 1))


__all__ = ["token_before", "is_decimal", "is_abbreviation", "is_ellipsis_continuation"]
