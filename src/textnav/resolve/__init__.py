"""Offset queries over a text and its sentence spans.

All lookups clamp the offset into the text and never raise; degenerate
ranges signal "nothing here" and are left for the caller to interpret.
"""

from .highlight import Highlight, highlight_range_at
from .paragraphs import paragraph_range_at
from .sentences import sentence_index_for
from .words import count_words, is_word_char, word_range_at

__all__ = [
    "Highlight",
    "count_words",
    "highlight_range_at",
    "is_word_char",
    "paragraph_range_at",
    "sentence_index_for",
    "word_range_at",
]
