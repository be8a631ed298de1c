"""Shared character tables for the segmenter and position resolvers."""

from __future__ import annotations

import string

__all__ = [
    "TERMINATORS",
    "TRAILING_CLOSERS",
    "LEADING_OPENERS",
    "WORD_CHARS",
    "SPEECH_BLANKED_QUOTES",
    "PARAGRAPH_BREAK",
    "is_ascii_lower",
    "is_ascii_upper",
    "is_ascii_digit",
]

TERMINATORS: frozenset[str] = frozenset(".!?")
TRAILING_CLOSERS: frozenset[str] = frozenset("\"')]}")
LEADING_OPENERS: str = "(\"'[]"

WORD_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "'-")

# Replaced by spaces in speech copies; one-for-one so offsets stay aligned.
SPEECH_BLANKED_QUOTES: str = "\"“”"

PARAGRAPH_BREAK: str = "\n\n"


def is_ascii_lower(ch: str) -> bool:
    return len(ch) == 1 and "a" <= ch <= "z"


def is_ascii_upper(ch: str) -> bool:
    return len(ch) == 1 and "A" <= ch <= "Z"


def is_ascii_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"
