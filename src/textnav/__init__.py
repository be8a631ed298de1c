"""Sentence segmentation and text-position lookup for read-aloud tools.

The engine splits free-form text into sentence spans and resolves character
offsets to the sentence, word or paragraph that contains them.  Everything is
pure and synchronous; a span sequence stays valid until its text changes.
"""

from .base import SentenceSpan, TextRange
from .boundaries import segment
from .document import SegmentedText
from .resolve import highlight_range_at, paragraph_range_at, sentence_index_for, word_range_at

__version__ = "0.1.0"

__all__ = [
    "SegmentedText",
    "SentenceSpan",
    "TextRange",
    "__version__",
    "highlight_range_at",
    "paragraph_range_at",
    "segment",
    "sentence_index_for",
    "word_range_at",
]
