"""File access for the CLI.

Input is read from ``.txt`` and ``.md`` files; span listings are written to
``.txt`` (tab separated) or ``.json`` files.  Text is never normalized on the
way in, so offsets computed on the read text match the file exactly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from ..utils.errors import UnsupportedFormatError
from .readers.txt_reader import read_text
from .writers.txt_writer import write_text

READABLE_SUFFIXES = frozenset({".txt", ".md"})
WRITABLE_SUFFIXES = frozenset({".txt", ".json"})


def _suffix(path: str | os.PathLike[str], allowed: frozenset[str]) -> str:
    suffix = Path(path).suffix.lower()
    if suffix not in allowed:
        expected = ", ".join(sorted(allowed))
        raise UnsupportedFormatError(
            f"Unsupported file extension: '{suffix}' (expected one of {expected})"
        )
    return suffix


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Return the contents of a ``.txt`` or ``.md`` file."""

    _suffix(path, READABLE_SUFFIXES)
    return read_text(path, **kwargs)


def write_file(path: str | os.PathLike[str], text: str, **kwargs: Any) -> None:
    """Write a span listing to a ``.txt`` or ``.json`` file."""

    _suffix(path, WRITABLE_SUFFIXES)
    write_text(path, text, **kwargs)


__all__ = ["READABLE_SUFFIXES", "WRITABLE_SUFFIXES", "read_file", "write_file"]
