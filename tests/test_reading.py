"""Tests for reading-time estimates and rate stepping."""

from __future__ import annotations

import pytest

from textnav.reading import (
    estimate_read_seconds,
    format_duration,
    step_rate,
    summarize,
    validate_rate,
)
from textnav.utils.errors import ConfigError

OPTIONS = [1.0, 1.2, 1.5, 1.8, 2.0]


def test_estimate_read_seconds() -> None:
    assert estimate_read_seconds(0, 1.5) == 0
    assert estimate_read_seconds(-3, 1.5) == 0
    assert estimate_read_seconds(180, 1.0) == 60
    assert estimate_read_seconds(270, 1.5) == 60
    # 1 word at 180 wpm is 0.333s
    assert estimate_read_seconds(1, 1.0) == 0


def test_estimate_clamps_tiny_rates() -> None:
    assert estimate_read_seconds(18, 0.0) == estimate_read_seconds(18, 0.1) == 60


def test_estimate_rounds_half_up() -> None:
    # 3 words at 360 wpm is exactly 0.5s
    assert estimate_read_seconds(3, 2.0) == 1


def test_estimate_divides_before_scaling() -> None:
    # 441 / 216 * 60 lands just under 122.5
    assert estimate_read_seconds(441, 1.2) == 122


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "0s"),
        (-5, "0s"),
        (59, "59s"),
        (60, "1m 0s"),
        (125, "2m 5s"),
        (3600, "1h 0m"),
        (3600 + 29 * 60 + 29, "1h 29m"),
        (3600 + 59 * 60 + 45, "2h 0m"),
    ],
)
def test_format_duration(seconds: int, expected: str) -> None:
    assert format_duration(seconds) == expected


def test_step_rate_clamps() -> None:
    assert step_rate(1.5, 1, OPTIONS) == 1.8
    assert step_rate(2.0, 1, OPTIONS) == 2.0
    assert step_rate(1.0, -1, OPTIONS) == 1.0
    assert step_rate(3.3, 1, OPTIONS) == 1.0


def test_validate_rate() -> None:
    assert validate_rate(1.2, OPTIONS) == 1.2
    with pytest.raises(ConfigError):
        validate_rate(1.3, OPTIONS)


def test_summarize() -> None:
    assert summarize(1, 1.0) == "1 word ~ 0s"
    assert summarize(270, 1.5) == "270 words ~ 1m 0s"
