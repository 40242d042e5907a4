"""CLI entry point for activitystreams.

Invoked as::

    activitystreams [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m activitystreams.cli.main

Commands
--------
version     Show version information
kinds       List registered kinds
inspect     Show how a document's fields were recognized
check       Check a document against its schema
convert     Re-emit a document as JSON or YAML

Files ending in ``.yaml`` or ``.yml`` are read as YAML, anything else as
JSON.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from activitystreams.node import Node
    from activitystreams.serializer import DocumentSerializer

console = Console()
err_console = Console(stderr=True)

_YAML_SUFFIXES = (".yaml", ".yml")


def _read_source(path: str) -> str:
    """Read a document file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_or_exit(
    path: str,
    serializer: "DocumentSerializer",
    kind: str | None = None,
) -> "Node":
    """Parse a document file, printing errors and exiting on failure."""
    from activitystreams.errors import DeserializationError
    from activitystreams.registry import UnknownKindError

    source = _read_source(path)
    try:
        cls = serializer.registry.get(kind) if kind is not None else None
        if path.lower().endswith(_YAML_SUFFIXES):
            return serializer.from_yaml(source, cls)
        return serializer.from_json(source, cls)
    except UnknownKindError as exc:
        err_console.print(f"[red]Unknown kind[/red] in {path}: {exc.kind!r}")
        sys.exit(1)
    except DeserializationError as exc:
        err_console.print(f"[red]Invalid document[/red] {path}: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="activitystreams")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Inspect, check and convert ActivityStreams 2.0 documents."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from activitystreams import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]activitystreams[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# kinds command
# ---------------------------------------------------------------------------


@cli.command(name="kinds")
@click.option(
    "--entrypoints/--no-entrypoints",
    default=False,
    help="Also load kinds declared by installed packages",
)
def kinds_command(entrypoints: bool) -> None:
    """List every kind in the default registry."""
    from activitystreams.registry import default_registry

    registry = default_registry()
    if entrypoints:
        registry.load_entrypoints()

    table = Table(title=f"Registered kinds ({len(registry)})")
    table.add_column("Kind", style="bold")
    table.add_column("Class")
    table.add_column("Module", style="dim")
    for literal in registry.list_kinds():
        cls = registry.get(literal)
        table.add_row(literal, cls.__qualname__, cls.__module__)
    console.print(table)


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


@cli.command(name="inspect")
@click.argument("file", type=click.Path(exists=False))
def inspect_command(file: str) -> None:
    """Show the kind, class and recognized fields of a document.

    FILE is the path to a JSON or YAML document.
    """
    from activitystreams.serializer import DocumentSerializer

    document = _load_or_exit(file, DocumentSerializer())

    table = Table(title=f"Document: {file}", show_header=False, show_lines=True)
    table.add_column("Property", style="bold")
    table.add_column("Value")
    table.add_row("Kind", document.type_name or "[dim](none)[/dim]")
    table.add_row("Class", type(document).__qualname__)
    table.add_row("Known fields", ", ".join(document.known_fields()) or "[dim](none)[/dim]")
    table.add_row("Unknown fields", ", ".join(document.unknown_fields()) or "[dim](none)[/dim]")
    console.print(table)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", type=click.Path(exists=False))
@click.option("--kind", "kind", default=None, help="Check against this kind instead of the document's type")
@click.option("--strict", is_flag=True, default=False, help="Fail on missing or unregistered kinds")
def check_command(file: str, kind: str | None, strict: bool) -> None:
    """Check that a document is structurally well-formed.

    FILE is the path to a JSON or YAML document.
    """
    from activitystreams.serializer import DocumentSerializer

    document = _load_or_exit(file, DocumentSerializer(strict=strict), kind)
    unknown = document.unknown_fields()
    console.print(
        f"[green]OK[/green] {file}: {type(document).__qualname__}"
        f" ({len(document.known_fields())} known, {len(unknown)} unknown field(s))"
    )


# ---------------------------------------------------------------------------
# convert command
# ---------------------------------------------------------------------------


@cli.command(name="convert")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def convert_command(file: str, output_format: str, output: str | None) -> None:
    """Parse a document and re-emit it with known fields first.

    FILE is the path to a JSON or YAML document.
    """
    from activitystreams.serializer import DocumentSerializer

    serializer = DocumentSerializer()
    document = _load_or_exit(file, serializer)

    if output_format.lower() == "json":
        text = serializer.to_json(document) + "\n"
        lang = "json"
    else:
        text = serializer.to_yaml(document)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Document written to[/green] {output}")
    else:
        console.print(Syntax(text, lang))


if __name__ == "__main__":
    cli()
