"""Typer-based command line interface for sentence segmentation and lookup.

Commands
--------
``segment``  print or write the sentence spans of a file
``locate``   resolve a character offset to sentence, word and paragraph
``stats``    word count, sentence count and reading-time estimate

Exit codes
----------
0 success
2 usage error (raised by Typer)
3 I/O error (missing reader/writer, filesystem issues)
4 configuration error
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .boundaries.abbreviations import AbbreviationTable
from .config import ConfigModel, load_config
from .document import SegmentedText
from .io import read_file, write_file
from .reading import summarize, validate_rate
from .utils.errors import ConfigError, UnsupportedFormatError
from .utils.logging import configure_logging
from .utils.textspan import build_line_starts, char_to_line_col

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="textnav",
    help="Sentence segmentation and text-position lookup. Try 'textnav segment --in FILE'.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Optional[Path], verbose: bool) -> ConfigModel:
    configure_logging(verbose)
    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if verbose:
        typer.echo("Loaded config", err=True)
    return cfg


def _read(in_path: Path, encoding: str, verbose: bool) -> str:
    try:
        text = read_file(in_path, encoding=encoding)
    except (UnsupportedFormatError, OSError, UnicodeDecodeError, LookupError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Read {len(text)} chars", err=True)
    return text


def _document(text: str, cfg: ConfigModel, verbose: bool) -> SegmentedText:
    doc = SegmentedText.from_text(text, abbreviations=AbbreviationTable.from_config(cfg))
    if verbose:
        typer.echo(f"Segmented into {len(doc)} sentences", err=True)
    return doc


def _span_records(doc: SegmentedText) -> list[dict[str, Any]]:
    line_starts = build_line_starts(doc.text)
    records: list[dict[str, Any]] = []
    for idx, span in enumerate(doc.spans):
        line, col = char_to_line_col(span.start, line_starts)
        records.append(
            {
                "index": idx,
                "start": span.start,
                "end": span.end,
                "line": line,
                "col": col,
                "text": span.text,
            }
        )
    return records


InOption = typer.Option(..., "--in", "--input", help="Input text file (.txt or .md)")
ConfigOption = typer.Option(None, "--config", help="YAML config to override defaults")
EncodingOption = typer.Option("utf-8-sig", "--encoding", help="Input file encoding")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Emit progress messages to stderr")


@app.callback()
def main() -> None:
    """Entry point for the textnav command group."""
    pass


@app.command()
def segment(
    in_path: Path = InOption,  # noqa: B008
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Write the result to a .txt or .json file instead of stdout"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON array of spans"),  # noqa: B008
    config_path: Optional[Path] = ConfigOption,  # noqa: B008
    encoding: str = EncodingOption,  # noqa: B008
    verbose: bool = VerboseOption,  # noqa: B008
) -> None:
    """Print the sentence spans of ``in_path``."""

    cfg = _load(config_path, verbose)
    doc = _document(_read(in_path, encoding, verbose), cfg, verbose)
    records = _span_records(doc)

    if as_json or (out_path is not None and out_path.suffix.lower() == ".json"):
        output = json.dumps(records, ensure_ascii=False, indent=2) + "\n"
    else:
        output = "".join(
            f"{r['index']}\t{r['start']}\t{r['end']}\t{json.dumps(r['text'], ensure_ascii=False)}\n"
            for r in records
        )

    if out_path is None:
        typer.echo(output, nl=False)
        return
    try:
        write_file(out_path, output)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Wrote {out_path}", err=True)


@app.command()
def locate(
    in_path: Path = InOption,  # noqa: B008
    offset: int = typer.Option(..., "--offset", help="Character offset to resolve"),  # noqa: B008
    config_path: Optional[Path] = ConfigOption,  # noqa: B008
    encoding: str = EncodingOption,  # noqa: B008
    verbose: bool = VerboseOption,  # noqa: B008
) -> None:
    """Resolve ``offset`` to its sentence, word and paragraph."""

    cfg = _load(config_path, verbose)
    doc = _document(_read(in_path, encoding, verbose), cfg, verbose)

    sentence = doc.sentence_at(offset)
    word = doc.word_range_at(offset)
    paragraph = doc.paragraph_range_at(offset)
    highlight = doc.highlight_at(offset)
    result = {
        "offset": offset,
        "sentence_index": doc.sentence_index_for(offset) if sentence is not None else None,
        "sentence": None if sentence is None else [sentence.start, sentence.end],
        "word": [word.start, word.end],
        "word_text": word.slice(doc.text),
        "paragraph": [paragraph.start, paragraph.end],
        "highlight": {
            "granularity": highlight.granularity,
            "range": [highlight.range.start, highlight.range.end],
        },
    }
    typer.echo(json.dumps(result, ensure_ascii=False))


@app.command()
def stats(
    in_path: Path = InOption,  # noqa: B008
    rate: Optional[float] = typer.Option(  # noqa: B008
        None, "--rate", help="Speech rate multiplier; one of the configured options"
    ),
    config_path: Optional[Path] = ConfigOption,  # noqa: B008
    encoding: str = EncodingOption,  # noqa: B008
    verbose: bool = VerboseOption,  # noqa: B008
) -> None:
    """Print word count, sentence count and estimated reading time."""

    cfg = _load(config_path, verbose)
    chosen = cfg.reading.rate
    if rate is not None:
        try:
            chosen = validate_rate(rate, cfg.reading.rate_options)
        except ConfigError as exc:
            _safe_exit(4, str(exc))
    doc = _document(_read(in_path, encoding, verbose), cfg, verbose)

    typer.echo(f"sentences: {len(doc)}")
    typer.echo(summarize(doc.word_count, chosen, base_wpm=cfg.reading.base_wpm))


__all__ = ["app"]
