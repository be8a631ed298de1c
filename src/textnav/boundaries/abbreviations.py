"""Abbreviation dictionaries used to suppress false sentence breaks.

Two fixed sets are loaded from the package configuration:

* *title* abbreviations (``mr.``, ``dr.`` ...) which never end a sentence;
* *common* abbreviations (``etc.``, ``e.g.`` ...) which only continue the
  sentence when the next word starts lowercase or with a digit.

The package default table is built once per process from ``defaults.yml`` and
is independent of user configuration files or environment variables.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from textnav.config.schema import (
    ConfigModel,
    SegmenterSettings,
    load_defaults,
    normalize_abbreviations,
)


@dataclass(slots=True, frozen=True)
class AbbreviationTable:
    """Lowercased abbreviation tokens, each including its trailing dot."""

    titles: frozenset[str]
    common: frozenset[str]

    @classmethod
    def from_settings(cls, settings: SegmenterSettings) -> "AbbreviationTable":
        return cls(
            titles=frozenset(settings.title_abbreviations),
            common=frozenset(settings.common_abbreviations),
        )

    @classmethod
    def from_config(cls, cfg: ConfigModel) -> "AbbreviationTable":
        return cls.from_settings(cfg.segmenter)

    def extended(
        self, *, titles: Iterable[str] = (), common: Iterable[str] = ()
    ) -> "AbbreviationTable":
        """Return a copy with extra tokens added to either set.

        Tokens are normalized like configuration input; a token without a
        trailing dot or with inner whitespace raises ``ValueError``.
        """

        return AbbreviationTable(
            titles=self.titles | set(normalize_abbreviations(list(titles))),
            common=self.common | set(normalize_abbreviations(list(common))),
        )

    def is_title(self, token: str) -> bool:
        return token in self.titles

    def is_common(self, token: str) -> bool:
        return token in self.common


@lru_cache(maxsize=1)
def default_abbreviations() -> AbbreviationTable:
    """Return the package default table, loaded once."""

    settings = SegmenterSettings.model_validate(load_defaults()["segmenter"])
    return AbbreviationTable.from_settings(settings)


__all__ = ["AbbreviationTable", "default_abbreviations"]
