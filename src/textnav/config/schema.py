"""Typed configuration schema and loader for the textnav package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, field_validator, model_validator

CONFIG_PATH_ENV = "TEXTNAV_CONFIG"
RATE_ENV = "TEXTNAV_RATE"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


def normalize_abbreviations(values: list[str]) -> list[str]:
    out: list[str] = []
    for raw in values:
        token = raw.strip().lower()
        if not token.endswith(".") or token == ".":
            raise ValueError(f"abbreviation must be a word ending with '.': {raw!r}")
        if any(ch.isspace() for ch in token):
            raise ValueError(f"abbreviation must not contain whitespace: {raw!r}")
        if token not in out:
            out.append(token)
    return out


class SegmenterSettings(BaseModel):
    """Abbreviation dictionaries consulted by the sentence segmenter."""

    title_abbreviations: list[str]
    common_abbreviations: list[str]

    model_config = ConfigDict(extra="forbid")

    @field_validator("title_abbreviations", "common_abbreviations")
    @classmethod
    def _check_tokens(cls, value: list[str]) -> list[str]:
        return normalize_abbreviations(value)


class ReadingSettings(BaseModel):
    """Reading speed used for time estimates."""

    base_wpm: conint(gt=0)
    rate: confloat(gt=0.0)
    rate_options: list[confloat(gt=0.0)]

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _rate_in_options(self) -> "ReadingSettings":
        if not self.rate_options:
            raise ValueError("rate_options must not be empty")
        if self.rate not in self.rate_options:
            raise ValueError(f"rate {self.rate} is not one of {self.rate_options}")
        return self


class NavigationSettings(BaseModel):
    """Sentence navigation behaviour."""

    quick_back_ms: conint(ge=0)

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    segmenter: SegmenterSettings
    reading: ReadingSettings
    navigation: NavigationSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_defaults() -> dict[str, Any]:
    """Return the raw package defaults mapping."""

    with (
        importlib_resources.files("textnav.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        return yaml.safe_load(f) or {}


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML
    (``path`` or ``$TEXTNAV_CONFIG``) < ``$TEXTNAV_RATE`` for the reading rate.
    """

    environ = env if env is not None else os.environ
    defaults = load_defaults()

    if path is None and environ.get(CONFIG_PATH_ENV):
        path = environ[CONFIG_PATH_ENV]

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    rate = environ.get(RATE_ENV, "").strip()
    if rate:
        merged = deep_merge_dicts(merged, {"reading": {"rate": rate}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "SegmenterSettings",
    "ReadingSettings",
    "NavigationSettings",
    "CONFIG_PATH_ENV",
    "RATE_ENV",
    "deep_merge_dicts",
    "normalize_abbreviations",
    "load_defaults",
    "load_config",
]
