"""Deterministic text generation and fuzzing utilities.

The helpers in this module build English-like prose that is dense with the
punctuation the segmenter has to disambiguate, then apply small perturbations
to stress brittle logic.

Examples of generated or applied features:

* decimals (``3.14``), times (``9 a.m.``) and titles (``Dr. Lee``)
* initialisms (``U.S.``) and common abbreviations (``e.g.``)
* ellipses that do or do not continue the sentence
* quoted and bracketed sentences with trailing closers
* paragraph breaks, non-breaking spaces and mixed line endings
* straight⇄curly quote swapping

All edits are driven by a :class:`random.Random` seeded via
:func:`rng_from_seed`.  Given the same seed and options the output is fully
deterministic.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Iterable, Literal

_NBSP_CHARS = ["\u00a0", "\u202f"]

_WORDS = [
    "market", "river", "signal", "report", "window", "garden", "engine", "letter",
    "it's", "well-known", "data", "night", "paper", "voice", "sentence", "reader",
]
_NAMES = ["Smith", "Lee", "Garcia", "Okafor", "Novak"]
_TITLES = ["Dr.", "Mr.", "Mrs.", "Ms.", "Prof.", "St."]
_CAPITALS = ["The", "A", "Investors", "Nobody", "Everyone", "This", "Some"]
_INFIXES = [
    "3.14", "2.5", "9 a.m.", "5 p.m.", "the U.S. office", "e.g. apples", "i.e. pears",
    "fig. 4", "no. 7", "etc. and more", "vs. them",
]


@dataclass(slots=True, frozen=True)
class FuzzOptions:
    """Configuration for :func:`generate_text` and :func:`mutate_text`.

    Probabilities apply per sentence (generation) or per character/line
    (mutation).  ``max_variants`` controls how many texts :func:`variants`
    yields.
    """

    max_variants: int = 50
    sentences: tuple[int, int] = (1, 12)
    title_prob: float = 0.2
    infix_prob: float = 0.35
    ellipsis_prob: float = 0.15
    quote_prob: float = 0.15
    bracket_prob: float = 0.1
    unterminated_tail_prob: float = 0.3
    paragraph_prob: float = 0.2
    leading_space_prob: float = 0.3
    replace_nbsp_prob: float = 0.05
    quote_variant_prob: float = 0.3
    eol_style: Literal["mixed", "lf", "crlf"] = "mixed"


def rng_from_seed(seed: int) -> random.Random:
    """Return a deterministic :class:`~random.Random` seeded with ``seed``."""

    return random.Random(seed)


def _sentence(rng: random.Random, opts: FuzzOptions) -> str:
    words: list[str] = []
    if rng.random() < opts.title_prob:
        words += [rng.choice(_TITLES), rng.choice(_NAMES)]
    else:
        words.append(rng.choice(_CAPITALS))
    words += rng.sample(_WORDS, rng.randint(1, 5))
    if rng.random() < opts.infix_prob:
        words.insert(rng.randint(1, len(words)), rng.choice(_INFIXES))
    if rng.random() < opts.ellipsis_prob:
        words.insert(rng.randint(1, len(words)), "...")
    body = " ".join(words)
    end = rng.choice([".", ".", ".", "!", "?", "..."])
    sentence = body + end
    if rng.random() < opts.quote_prob:
        sentence = f'"{sentence}"'
    elif rng.random() < opts.bracket_prob:
        sentence = f"({sentence})"
    return sentence


def generate_text(seed: int, opts: FuzzOptions = FuzzOptions()) -> str:
    """Return generated prose for ``seed``."""

    rng = rng_from_seed(seed)
    low, high = opts.sentences
    parts: list[str] = []
    if rng.random() < opts.leading_space_prob:
        parts.append(rng.choice([" ", "  ", "\n", "\t "]))
    count = rng.randint(low, high)
    for i in range(count):
        sentence = _sentence(rng, opts)
        if i == count - 1 and rng.random() < opts.unterminated_tail_prob:
            sentence = sentence.rstrip(".!?\"')")
        parts.append(sentence)
        if i < count - 1:
            if rng.random() < opts.paragraph_prob:
                parts.append("\n\n")
            else:
                parts.append(rng.choice([" ", "  ", "\n"]))
    return "".join(parts)


def _replace_nbsp(text: str, rng: random.Random, prob: float) -> str:
    out: list[str] = []
    for ch in text:
        if ch == " " and rng.random() < prob:
            out.append(rng.choice(_NBSP_CHARS))
        else:
            out.append(ch)
    return "".join(out)


_QUOTE_RE = re.compile(r'("[^"\n]*"|\u201c[^\u201d\n]*\u201d)')


def swap_quotes(text: str, rng: random.Random, prob: float) -> str:
    """Swap straight and curly quotes around quoted substrings."""

    def repl(match: re.Match[str]) -> str:
        grp = match.group(0)
        if rng.random() >= prob:
            return grp
        if grp.startswith("\u201c"):
            return f'"{grp[1:-1]}"'
        return f"\u201c{grp[1:-1]}\u201d"

    return _QUOTE_RE.sub(repl, text)


def random_eol_mix(text: str, rng: random.Random, style: Literal["mixed", "lf", "crlf"]) -> str:
    """Apply the requested line-ending style to ``text``."""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if style == "lf":
        return text
    if style == "crlf":
        return text.replace("\n", "\r\n")
    parts = text.split("\n")
    out: list[str] = []
    for i, part in enumerate(parts):
        out.append(part)
        if i < len(parts) - 1:
            out.append("\r\n" if rng.random() < 0.5 else "\n")
    return "".join(out)


def mutate_text(text: str, *, seed: int, opts: FuzzOptions) -> str:
    """Return a fuzzed variant of ``text`` using ``seed`` and ``opts``."""

    rng = rng_from_seed(seed)
    mutated = text
    mutated = swap_quotes(mutated, rng, opts.quote_variant_prob)
    mutated = _replace_nbsp(mutated, rng, opts.replace_nbsp_prob)
    mutated = random_eol_mix(mutated, rng, opts.eol_style)
    return mutated


def variants(*, base_seed: int, opts: FuzzOptions = FuzzOptions()) -> Iterable[str]:
    """Yield deterministic generated-and-mutated texts."""

    for i in range(opts.max_variants):
        seed = base_seed + i
        yield mutate_text(generate_text(seed, opts), seed=seed, opts=opts)


__all__ = [
    "FuzzOptions",
    "rng_from_seed",
    "generate_text",
    "mutate_text",
    "variants",
    "swap_quotes",
    "random_eol_mix",
]
