from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from textnav.utils.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logging() -> Iterator[None]:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = root.level
    handlers = list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
