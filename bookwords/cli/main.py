"""
Command-line interface: analyze texts and manage the known-word list.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
from tqdm import tqdm

from bookwords.core.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_KNOWN_WORDS_FILE,
    DEFAULT_TOP_WORDS,
    ERROR_INVALID_MIN_FREQUENCY,
    REPORT_SUFFIX,
)
from bookwords.core.models import ProcessorConfig
from bookwords.core.utils import get_file_contents
from bookwords.known_words import KnownWordStore
from bookwords.processing.processor import WordProcessor
from bookwords.report import save_results

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)
known_app = typer.Typer(add_completion=False, no_args_is_help=True, help="Manage the known-word list.")
app.add_typer(known_app, name="known")


def _known_words_option():
    return typer.Option(
        Path(DEFAULT_KNOWN_WORDS_FILE),
        "--known-words",
        "-k",
        help="Path to the known-words JSON file",
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


async def _process_chapters(processor: WordProcessor, paths: List[Path]) -> int:
    """Feed each file to the processor; unreadable files are logged and skipped."""
    processed = 0
    for path in tqdm(paths, desc="Chapters", unit="chapter", disable=len(paths) < 2):
        try:
            text = get_file_contents(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read chapter %s: %s", path, exc)
            continue
        await processor.process_text(text)
        processed += 1
    return processed


@app.command()
def analyze(
    input_paths: List[Path] = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    min_freq: int = typer.Option(1, "--min-freq", "-m", help="Minimum word frequency"),
    include_known: bool = typer.Option(False, "--include-known", help="Do not exclude known words"),
    known_words: Path = _known_words_option(),
    top: int = typer.Option(DEFAULT_TOP_WORDS, "--top", "-n", min=0, help="Number of top words to print"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="JSON report path"),
    batch_size: int = typer.Option(DEFAULT_BATCH_SIZE, "--batch-size", min=1),
    download: bool = typer.Option(True, "--download/--no-download", help="Fetch the WordNet corpus if it is missing"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Count word frequencies across one or more text files."""
    _configure_logging(verbose)

    if min_freq < 1:
        typer.echo(ERROR_INVALID_MIN_FREQUENCY.format(value=min_freq), err=True)
        raise typer.Exit(code=1)

    config = ProcessorConfig(
        exclude_known_words=not include_known,
        batch_size=batch_size,
        known_words_path=known_words,
        download_wordnet=download,
    )
    processor = WordProcessor(config)
    if processor.known_words:
        typer.echo(f"Excluding {len(processor.known_words)} known words from {known_words}")

    chapters = asyncio.run(_process_chapters(processor, input_paths))

    all_words = processor.sorted_words(1)
    words = processor.sorted_words(min_freq)

    typer.echo(f"Chapters processed: {chapters}/{len(input_paths)}")
    typer.echo(f"Unique words: {len(all_words)}")
    if min_freq > 1:
        typer.echo(f"Words with frequency >= {min_freq}: {len(words)}")
        typer.echo(f"Rare words excluded: {len(all_words) - len(words)}")
    typer.echo(f"Total words: {processor.total_word_count()}")

    if top and words:
        typer.echo(f"Top {min(top, len(words))} words:")
        for rank, entry in enumerate(words[:top], start=1):
            typer.echo(f"  {rank}. {entry.word} - {entry.count}")

    if output is None:
        first = input_paths[0]
        output = first.with_name(f"{first.stem}{REPORT_SUFFIX}")
    json_path, text_path = save_results(words, output)
    typer.echo(f"Saved: {json_path}")
    typer.echo(f"Text version: {text_path}")


@known_app.command("add")
def add_known(
    words: List[str] = typer.Argument(...),
    known_words: Path = _known_words_option(),
) -> None:
    """Mark words as known."""
    known = KnownWordStore(known_words).add(words)
    typer.echo(f"Known words: {len(known)}")


@known_app.command("remove")
def remove_known(
    word: str = typer.Argument(...),
    known_words: Path = _known_words_option(),
) -> None:
    """Forget a known word."""
    known = KnownWordStore(known_words).remove(word)
    typer.echo(f"Known words: {len(known)}")


@known_app.command("list")
def list_known(known_words: Path = _known_words_option()) -> None:
    """Print known words, one per line."""
    for word in sorted(KnownWordStore(known_words).load()):
        typer.echo(word)


@known_app.command("count")
def count_known(known_words: Path = _known_words_option()) -> None:
    """Print the number of known words."""
    typer.echo(str(KnownWordStore(known_words).count()))


@known_app.command("clear")
def clear_known(
    known_words: Path = _known_words_option(),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Remove every known word."""
    if not yes:
        typer.confirm(f"Clear all known words in {known_words}?", abort=True)
    KnownWordStore(known_words).clear()
    typer.echo("Known words cleared")


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
