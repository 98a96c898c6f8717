"""
Main CLI application for html-metadata.

Provides the command-line interface for:
- Extracting metadata from a URL or an HTML file
- Listing the supported metadata formats
- Managing configuration
"""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from html_metadata import __version__
from html_metadata.config import Settings, load_config
from html_metadata.core.exceptions import HtmlMetadataError
from html_metadata.extraction import METADATA_FUNCTIONS, Document, parse_all, parse_all_merged
from html_metadata.loader import fetch_html
from html_metadata.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="html-metadata",
    help="Extract structured metadata (OpenGraph, Dublin Core, COinS, ...) from HTML pages",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

# Settings resolved by the global callback
_state: dict[str, Settings] = {}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]html-metadata[/bold blue] v{__version__}")
        raise typer.Exit()


def _settings() -> Settings:
    if "settings" not in _state:
        _state["settings"] = load_config()
    return _state["settings"]


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """
    html-metadata - extract structured metadata from HTML pages.

    Use 'html-metadata --help' for command list.
    """
    try:
        settings = load_config(config_file)
    except HtmlMetadataError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    _state["settings"] = settings
    setup_logging(settings.logging, level="DEBUG" if verbose else None)


def _load_document(source: str, settings: Settings) -> Document:
    """Build a Document from a URL or a file path."""
    if source.startswith(("http://", "https://")):
        html = asyncio.run(fetch_html(source, settings=settings))
        return Document.from_string(html, backend=settings.parser.backend)
    return Document.from_file(source, backend=settings.parser.backend)


@app.command()
def parse(
    source: str = typer.Argument(
        ...,
        help="URL (http/https) or path of an HTML file",
    ),
    formats: Optional[List[str]] = typer.Option(
        None,
        "--format",
        "-f",
        help="Only run this format (repeatable), e.g. -f openGraph -f twitter",
    ),
    merged: bool = typer.Option(
        False,
        "--merged",
        help="Merge all formats into one mapping of lists",
    ),
    indent: int = typer.Option(
        2,
        "--indent",
        help="JSON indentation",
        min=0,
        max=8,
    ),
) -> None:
    """
    Extract metadata from a page and print it as JSON.

    Examples:
        html-metadata parse https://example.com
        html-metadata parse page.html -f dublinCore
    """
    settings = _settings()
    selected = formats or settings.parser.formats or None

    try:
        document = _load_document(source, settings)
        if merged:
            result = parse_all_merged(document, formats=selected)
        else:
            result = parse_all(
                document,
                formats=selected,
                max_workers=settings.parser.max_workers,
            )
    except HtmlMetadataError as e:
        err_console.print(Panel(str(e), title="html-metadata", border_style="red"))
        logger.debug("Parse failed", exc_info=True)
        raise typer.Exit(1)

    typer.echo(json.dumps(result, indent=indent or None, ensure_ascii=False))


@app.command()
def formats() -> None:
    """List the supported metadata formats."""
    table = Table(show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Parser", style="dim")

    for key, fn in METADATA_FUNCTIONS.items():
        table.add_row(key, fn.__name__)

    console.print(table)


@app.command()
def config(
    show: bool = typer.Option(
        False,
        "--show",
        "-s",
        help="Show current configuration",
    ),
    init: bool = typer.Option(
        False,
        "--init",
        help="Create default configuration file",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path for config file",
    ),
) -> None:
    """
    Configuration management.

    Examples:
        html-metadata config --show
        html-metadata config --init --output ./html-metadata.yaml
    """
    if init:
        _init_config(output)
    elif show:
        _show_config()
    else:
        console.print(
            "Use --show to view config or --init to create default config")


def _show_config() -> None:
    """Show current configuration."""
    config_dict = _settings().model_dump(mode="json")

    console.print(Panel(
        "[bold]Current Configuration[/bold]",
        border_style="blue",
    ))

    for section, values in config_dict.items():
        console.print(f"\n[bold cyan]{section}:[/bold cyan]")
        if isinstance(values, dict):
            for key, value in values.items():
                console.print(f"  {key}: [dim]{value}[/dim]")
        else:
            console.print(f"  {values}")


def _init_config(output: Optional[Path]) -> None:
    """Create default configuration file."""
    import yaml

    config_dict = Settings().model_dump(mode="json")
    output_path = output or Path("html-metadata.yaml")

    if output_path.exists():
        if not typer.confirm(f"File {output_path} exists. Overwrite?"):
            raise typer.Exit(0)

    with open(output_path, "w", encoding="utf-8") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]✓[/green] Configuration saved to: {output_path}")


if __name__ == "__main__":
    app()
