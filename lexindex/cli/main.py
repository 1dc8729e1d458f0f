"""
Command-line interface: sources, build, search.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from lexindex.core.diagnostics import configure_logging
from lexindex.core.lexical import Language
from lexindex.core.models import LoaderSettings
from lexindex.processing.index import VocabularyIndex
from lexindex.processing.query import group_counts, search_words

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _resolve_language(value: str) -> Language:
    try:
        return Language.coerce(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="LANGUAGE")


def _index(ctx: typer.Context) -> VocabularyIndex:
    settings: LoaderSettings = ctx.obj
    try:
        return VocabularyIndex(settings=settings)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", "-d", help="Directory holding <language>/<source>.json files"),
    base_url: Optional[str] = typer.Option(None, "--base-url", "-u", help="URL root serving <language>/<source>.json"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="Diagnostics format (console/json)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug events"),
) -> None:
    overrides = {}
    if data_dir is not None:
        overrides["data_dir"] = data_dir
    if base_url is not None:
        overrides["base_url"] = base_url
    if log_format is not None:
        overrides["log_format"] = log_format
    if verbose:
        overrides["log_level"] = "DEBUG"

    try:
        settings = LoaderSettings(**overrides)
    except ValidationError as e:
        raise typer.BadParameter(str(e))
    configure_logging(settings.log_level, settings.log_format)
    ctx.obj = settings


@app.command()
def sources(
    ctx: typer.Context,
    language: str = typer.Argument(..., help="Ancient Greek, Hebrew or Latin"),
) -> None:
    lang = _resolve_language(language)
    for source in _index(ctx).list_sources(lang):
        typer.echo(str(source))


@app.command()
def build(
    ctx: typer.Context,
    language: str = typer.Argument(..., help="Ancient Greek, Hebrew or Latin"),
    source_keys: Optional[List[str]] = typer.Argument(None, help="Sources to load, in order"),
    all_sources: bool = typer.Option(False, "--all", help="Load every source in the catalog"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout"),
    progress: bool = typer.Option(False, "--progress/--no-progress"),
) -> None:
    lang = _resolve_language(language)
    index = _index(ctx)

    if all_sources:
        groups = index.build_all(lang, progress=progress)
    elif source_keys:
        groups = index.build_index(lang, source_keys, progress=progress)
    else:
        raise typer.BadParameter("give at least one SOURCE or --all", param_hint="SOURCE_KEYS")

    payload = {group: [word.to_record() for word in words] for group, words in groups.items()}
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
    else:
        typer.echo(text)

    counts = group_counts(groups)
    summary = f"Language: {lang.value}; Groups: {len(counts)}; Words: {sum(counts.values())}"
    typer.echo(summary, err=True)


@app.command()
def search(
    ctx: typer.Context,
    language: str = typer.Argument(..., help="Ancient Greek, Hebrew or Latin"),
    term: str = typer.Argument(..., help="Text to look for in words and meanings"),
    source_keys: Optional[List[str]] = typer.Argument(None, help="Sources to search (default: all)"),
) -> None:
    lang = _resolve_language(language)
    index = _index(ctx)
    groups = index.build_index(lang, source_keys) if source_keys else index.build_all(lang)

    for word in search_words(groups, term):
        typer.echo(f"{word.word} - {'; '.join(word.meanings)}")


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
