"""Reading-time estimates and speech rate selection."""

from __future__ import annotations

import math
from collections.abc import Sequence

from textnav.utils.errors import ConfigError

DEFAULT_BASE_WPM = 180
MIN_RATE = 0.1


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def estimate_read_seconds(words: int, rate: float, *, base_wpm: int = DEFAULT_BASE_WPM) -> int:
    """Return whole seconds needed to read ``words`` aloud at ``rate``.

    ``base_wpm`` is the speaking speed at rate ``1``.  Rates below ``0.1``
    are treated as ``0.1``.
    """

    if words <= 0:
        return 0
    effective_wpm = base_wpm * max(MIN_RATE, rate)
    return _round_half_up(words / effective_wpm * 60)


def format_duration(total_seconds: float) -> str:
    """Format seconds as ``"42s"``, ``"3m 5s"`` or ``"1h 20m"``."""

    sec = max(0, _round_half_up(total_seconds))
    if sec >= 3600:
        hours = sec // 3600
        minutes = _round_half_up((sec % 3600) / 60)
        if minutes == 60:
            return f"{hours + 1}h 0m"
        return f"{hours}h {minutes}m"
    if sec >= 60:
        return f"{sec // 60}m {sec % 60}s"
    return f"{sec}s"


def validate_rate(rate: float, options: Sequence[float]) -> float:
    """Return ``rate`` if it is one of ``options``; raise :class:`ConfigError` otherwise."""

    if rate not in options:
        raise ConfigError(f"unsupported rate {rate}; choose one of {list(options)}")
    return rate


def step_rate(current: float, direction: int, options: Sequence[float]) -> float:
    """Move ``direction`` steps through ``options`` from ``current``.

    The result stays within the first and last option.  An unknown
    ``current`` is treated as sitting before the first option.
    """

    if not options:
        raise ConfigError("no rate options configured")
    idx = list(options).index(current) if current in options else -1
    nxt = max(0, min(len(options) - 1, idx + direction))
    return options[nxt]


def summarize(words: int, rate: float, *, base_wpm: int = DEFAULT_BASE_WPM) -> str:
    """Return the ``"12 words ~ 4s"`` label shown next to the text."""

    label = "word" if words == 1 else "words"
    seconds = estimate_read_seconds(words, rate, base_wpm=base_wpm)
    return f"{words} {label} ~ {format_duration(seconds)}"


__all__ = [
    "DEFAULT_BASE_WPM",
    "estimate_read_seconds",
    "format_duration",
    "validate_rate",
    "step_rate",
    "summarize",
]
