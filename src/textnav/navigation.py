"""Sentence navigation and speech chunk helpers.

These functions hold the offset arithmetic a read-aloud front end needs:
which sentence "next" and "previous" land on, what to select after a jump,
which slice of text to hand to a speech engine and how the engine's word
boundary offsets map back into the source text.  Playback state itself is
owned by the caller.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from textnav.base import SentenceSpan, TextRange
from textnav.config.schema import ConfigModel, NavigationSettings
from textnav.resolve.sentences import sentence_index_for
from textnav.resolve.words import word_range_at
from textnav.utils.constants import SPEECH_BLANKED_QUOTES
from textnav.utils.textspan import clamp

DEFAULT_QUICK_BACK_MS = 560

_SPEECH_TABLE = str.maketrans({q: " " for q in SPEECH_BLANKED_QUOTES})


def _base_index(
    spans: Sequence[SentenceSpan], text: str, cursor: int, current: int | None
) -> int:
    return current if current is not None else sentence_index_for(spans, text, cursor)


def next_sentence_index(
    spans: Sequence[SentenceSpan],
    text: str,
    cursor: int,
    *,
    current: int | None = None,
) -> int | None:
    """Return the sentence index "next" should move to.

    ``current`` is the sentence being spoken, if any; otherwise the sentence
    under ``cursor`` is used.  Stops at the last sentence.  Returns ``None``
    for blank text.
    """

    if not text.strip() or not spans:
        return None
    return min(_base_index(spans, text, cursor, current) + 1, len(spans) - 1)


def previous_sentence_index(
    spans: Sequence[SentenceSpan],
    text: str,
    cursor: int,
    *,
    current: int | None = None,
    quick_repeat: bool = False,
) -> int | None:
    """Return the sentence index "previous" should move to.

    A quick repeated press restarts the current sentence instead of stepping
    back one more.
    """

    if not text.strip() or not spans:
        return None
    base = _base_index(spans, text, cursor, current)
    if quick_repeat:
        return base
    return max(0, base - 1)


@dataclass
class BackPressTracker:
    """Detect two "previous" presses within ``window_ms`` of each other."""

    window_ms: int = DEFAULT_QUICK_BACK_MS
    clock: Callable[[], float] = time.monotonic
    _last: float | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_settings(
        cls, settings: NavigationSettings, *, clock: Callable[[], float] = time.monotonic
    ) -> "BackPressTracker":
        return cls(window_ms=settings.quick_back_ms, clock=clock)

    @classmethod
    def from_config(
        cls, cfg: ConfigModel, *, clock: Callable[[], float] = time.monotonic
    ) -> "BackPressTracker":
        return cls.from_settings(cfg.navigation, clock=clock)

    def press(self) -> bool:
        """Record a press and return ``True`` when it is a quick repeat."""

        now = self.clock()
        quick = self._last is not None and (now - self._last) * 1000.0 < self.window_ms
        self._last = now
        return quick


def selection_for_sentence(text: str, span: SentenceSpan) -> TextRange:
    """Return the selection to show after jumping to ``span``.

    The first word of the sentence is selected; a collapsed caret at the
    sentence start is used when there is no word there.
    """

    word = word_range_at(text, span.start)
    if word.is_empty:
        return TextRange(span.start, span.start)
    return word


@dataclass(slots=True, frozen=True)
class Utterance:
    """A chunk of source text prepared for a speech engine.

    ``speech_text`` has the same length as ``text`` so that engine offsets
    index both.
    """

    start: int
    end: int
    text: str
    speech_text: str


def normalize_for_speech(text: str) -> str:
    """Blank out double quotes without changing the string length."""

    return text.translate(_SPEECH_TABLE)


def utterance_for(text: str, span: SentenceSpan, from_char: int) -> Utterance | None:
    """Return the part of ``span`` from ``from_char`` onwards.

    Returns ``None`` when that part is blank and the caller should move on
    to the next sentence.
    """

    start = max(from_char, span.start)
    chunk = text[start : span.end]
    if not chunk.strip():
        return None
    return Utterance(start, span.end, chunk, normalize_for_speech(chunk))


def boundary_offset(utterance: Utterance, local_index: int) -> int:
    """Map an engine word-boundary index inside ``utterance`` to a text offset."""

    return utterance.start + clamp(local_index, 0, len(utterance.speech_text))


__all__ = [
    "DEFAULT_QUICK_BACK_MS",
    "BackPressTracker",
    "Utterance",
    "boundary_offset",
    "next_sentence_index",
    "normalize_for_speech",
    "previous_sentence_index",
    "selection_for_sentence",
    "utterance_for",
]
