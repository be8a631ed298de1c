from __future__ import annotations

import logging

import pytest

from textnav.boundaries import segment
from textnav.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespaces() -> None:
    assert get_logger("cli").name == "textnav.cli"
    assert get_logger("textnav.boundaries").name == "textnav.boundaries"


def test_configure_logging_is_idempotent() -> None:
    configure_logging(False)
    configure_logging(True)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    cli_handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
    assert len(cli_handlers) == 1
    assert root.level == logging.DEBUG


def test_segmenter_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="textnav.boundaries.segmenter"):
        segment("One. Two.")
    assert any("into 2 sentences" in r.getMessage() for r in caplog.records)
