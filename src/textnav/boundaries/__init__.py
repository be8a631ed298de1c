"""Sentence segmentation.

:func:`segment` partitions free-form text into ordered, non-overlapping
:class:`~textnav.base.SentenceSpan` objects using local punctuation context
and a configurable abbreviation dictionary.
"""

from .abbreviations import AbbreviationTable, default_abbreviations
from .segmenter import segment

__all__ = ["AbbreviationTable", "default_abbreviations", "segment"]
