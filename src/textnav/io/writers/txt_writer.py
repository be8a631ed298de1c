"""Writer for span listings produced by ``textnav segment --out``."""

from __future__ import annotations

import os
from pathlib import Path


def write_text(
    path: str | os.PathLike[str],
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """Write ``text`` to ``path``, creating missing parent directories.

    Line endings are written as given; no BOM is added.
    """

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding=encoding, newline="") as fh:
        fh.write(text)


__all__ = ["write_text"]
