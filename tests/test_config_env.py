from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from textnav.config import load_config


def test_env_rate_override(monkeypatch: Any) -> None:
    monkeypatch.setenv("TEXTNAV_RATE", "2")
    cfg = load_config()
    assert cfg.reading.rate == 2.0


def test_env_rate_must_be_an_option() -> None:
    with pytest.raises(ValidationError):
        load_config(env={"TEXTNAV_RATE": "1.3"})


def test_env_config_path(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("navigation:\n  quick_back_ms: 300\n")
    monkeypatch.setenv("TEXTNAV_CONFIG", str(cfg_file))
    monkeypatch.delenv("TEXTNAV_RATE", raising=False)
    cfg = load_config()
    assert cfg.navigation.quick_back_ms == 300
    assert cfg.reading.rate == 1.5


def test_explicit_path_wins_over_env_path(monkeypatch: Any, tmp_path: Path) -> None:
    env_file = tmp_path / "env.yml"
    env_file.write_text("navigation:\n  quick_back_ms: 1\n")
    arg_file = tmp_path / "arg.yml"
    arg_file.write_text("navigation:\n  quick_back_ms: 2\n")
    cfg = load_config(arg_file, env={"TEXTNAV_CONFIG": str(env_file)})
    assert cfg.navigation.quick_back_ms == 2


def test_env_rate_beats_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("reading:\n  rate: 1.0\n")
    cfg = load_config(cfg_file, env={"TEXTNAV_RATE": "1.8"})
    assert cfg.reading.rate == 1.8
