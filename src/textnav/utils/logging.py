"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain namespaced loggers.
    - Allow an optional verbose mode for the command line.

Inputs/Outputs:
    - Inputs: module name and verbosity settings.
    - Outputs: configured `logging.Logger` instances.

Public contracts:
    - `get_logger(name)`: Return a logger below the ``textnav`` namespace.
    - `configure_logging(verbose)`: Attach a single stderr handler.

Notes/Edge cases:
    - Logging configuration is idempotent; repeated calls never stack handlers.
    - The library itself only installs a ``NullHandler``.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "textnav"
_HANDLER_ATTR = "_textnav_cli_handler"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package root logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Install one stderr handler on the package root logger.

    ``verbose`` selects ``DEBUG`` instead of ``WARNING``.  Calling this again
    replaces the handler, so the current ``sys.stderr`` is always used.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for old in [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]:
        root.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
    return root


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
