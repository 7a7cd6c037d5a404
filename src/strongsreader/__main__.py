"""CLI entry point for the Strong's reader."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from strongsreader import __version__
from strongsreader.config import Settings
from strongsreader.engine.occurrences import find_occurrences
from strongsreader.ingest.lexicon_files import LexiconLoadError, store_from_settings
from strongsreader.ingest.verses import (
    VerseFileError,
    dump_verse_file,
    load_tagged_book_file,
    load_verse_file,
)
from strongsreader.lexicon import LexiconResolver, NormalizedDefinition
from strongsreader.parsing import tokenize

console = Console()
settings = Settings()


def _definition_panel(definition: NormalizedDefinition) -> Panel:
    lines = []
    heading = definition.number
    if definition.lemma:
        heading += f"  {definition.lemma}"
    if definition.transliteration:
        heading += f" ({definition.transliteration})"
    lines.append(f"[bold]{heading}[/bold]")

    if definition.pronunciation:
        lines.append(f"[dim]Pronunciation:[/dim] {definition.pronunciation}")
    if definition.part_of_speech:
        lines.append(f"[dim]Part of speech:[/dim] {definition.part_of_speech}")
    if definition.definition:
        lines.append(f"\n{definition.definition}")
    if definition.usage:
        lines.append(f"\n[dim]KJV usage:[/dim] {definition.usage}")
    if definition.derivation:
        lines.append(f"[dim]Derivation:[/dim] {definition.derivation}")

    return Panel("\n".join(lines), title="Strong's Concordance")


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Strong's Reader - tagged scripture tokenizer and lexicon lookup."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command("tokenize")
@click.argument("text")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def tokenize_command(text: str, output_json: bool):
    """Split tagged text into word and punctuation tokens.

    Example: strongsreader tokenize "love[G25][G26] one another,"
    """
    tokens = tokenize(text)

    if output_json:
        click.echo(json.dumps([t.to_dict() for t in tokens], ensure_ascii=False))
        return

    table = Table(title=f"{len(tokens)} tokens")
    table.add_column("#", justify="right")
    table.add_column("Text")
    table.add_column("Strong's")
    for i, token in enumerate(tokens):
        table.add_row(str(i), token.text, ", ".join(token.reference_codes))
    console.print(table)


@cli.command()
@click.argument("code")
@click.option(
    "--sibling",
    "siblings",
    multiple=True,
    help="Other codes on the same word, in order (enables fallback). Can be repeated.",
)
@click.option("--data-dir", type=click.Path(), help="Override lexicon data directory")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def define(code: str, siblings: tuple[str, ...], data_dir: str | None, output_json: bool):
    """Show the Strong's definition for a reference code.

    When the code has no entry but a --sibling does, the sibling's
    definition is shown and the substitution is reported.

    Examples:
        strongsreader define G26
        strongsreader define G9999 --sibling G9999 --sibling G1615
    """
    resolver = LexiconResolver(store_from_settings(settings.with_data_dir(data_dir)))

    codes = list(siblings) if siblings else [code]
    try:
        selection = resolver.select(codes, code)
    except LexiconLoadError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if output_json:
        click.echo(json.dumps(selection.to_dict(), ensure_ascii=False))
        if not selection.available:
            sys.exit(1)
        return

    if not selection.available:
        console.print(f"[yellow]No definition available for {selection.requested}[/yellow]")
        sys.exit(1)

    if selection.substituted:
        console.print(
            f"[yellow]{selection.requested} not found; showing {selection.shown_code}[/yellow]"
        )
    console.print(_definition_panel(selection.definition))


@cli.command("build-verses")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--book", "display_name", default=None, help="Display name for the book")
@click.option("--translation", default=None, help="Translation label (default KJV)")
@click.option("--output", "-o", type=click.Path(), required=True, help="Output JSON file")
def build_verses(
    source: str, display_name: str | None, translation: str | None, output: str
):
    """Convert a tagged book dump into verse records with tokens.

    Example: strongsreader build-verses Jhn.json -o verses/john.json
    """
    try:
        records = load_tagged_book_file(
            Path(source),
            display_name=display_name,
            translation=translation or settings.default_translation,
        )
    except VerseFileError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    dump_verse_file(records, Path(output))

    tagged = sum(1 for r in records if r.reference_codes)
    console.print(
        f"[green]✓ {len(records)} verses ({tagged} with Strong's) written to {output}[/green]"
    )


@cli.command()
@click.argument("code")
@click.argument("verse_files", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def occurrences(code: str, verse_files: tuple[str, ...], output_json: bool):
    """List every word tagged with CODE in the given verse files."""
    records = []
    try:
        for path in verse_files:
            records.extend(load_verse_file(Path(path)))
    except VerseFileError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    found = find_occurrences(records, code)

    if output_json:
        click.echo(json.dumps([o.to_dict() for o in found], ensure_ascii=False))
        return

    if not found:
        console.print(f"[yellow]No occurrences of {code.strip().upper()}[/yellow]")
        return

    table = Table(title=f"{code.strip().upper()}: {len(found)} occurrences")
    table.add_column("Reference")
    table.add_column("Word")
    table.add_column("Verse")
    for occ in found:
        table.add_row(occ.reference, occ.match_text, occ.verse_text)
    console.print(table)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind host")
@click.option("--port", default=8000, help="Bind port")
@click.option("--data-dir", type=click.Path(), help="Override lexicon data directory")
def serve(host: str, port: int, data_dir: str | None):
    """Start the API server.

    Both lexicon dictionaries are loaded before the server starts, so a
    missing or broken file stops startup instead of failing requests.
    """
    import uvicorn

    from strongsreader.api.main import create_app

    store = store_from_settings(settings.with_data_dir(data_dir))
    try:
        store.preload()
    except LexiconLoadError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    app = create_app(store=store)
    console.print(
        f"[bold blue]Starting Strong's Reader API at http://{host}:{port}[/bold blue]"
    )
    uvicorn.run(app, host=host, port=port)


def main():
    cli()


if __name__ == "__main__":
    main()
