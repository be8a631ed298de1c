"""Reader for plain-text and Markdown input.

Sentence and word offsets refer to positions in the decoded string, so the
file must come back exactly as stored: ``\r\n`` pairs stay two characters
and a leading UTF-8 byte-order mark is dropped by the ``utf-8-sig`` codec.
"""

from __future__ import annotations

import os
from pathlib import Path


def read_text(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Return the decoded contents of ``path`` with line endings untouched."""

    with Path(path).open("r", encoding=encoding, errors=errors, newline="") as fh:
        return fh.read()


__all__ = ["read_text"]
