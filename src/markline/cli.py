"""CLI interface for Markline.

Command-line tool for converting markdown to HTML and serving rendered pages.
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO

import click

from markline.config import Config
from markline.core.converter import MarkdownConverter


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
def cli() -> None:
    """Markline - line-oriented markdown to HTML."""


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.File("wb"),
    default="-",
    help="Write HTML to this file (default: stdout)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def convert(source: BinaryIO, output: BinaryIO, verbose: bool) -> None:
    """Convert a markdown file (or stdin) to HTML."""
    _configure_logging(verbose)

    try:
        # Bytes in and out: "\r" stays in line content
        html = MarkdownConverter().convert(source.read().decode("utf-8"))
        output.write(html.encode("utf-8"))
    except Exception as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover markline.toml)",
)
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
@click.option(
    "--cache-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Cache directory (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log page renders)",
)
@click.option(
    "--live-reload/--no-live-reload",
    default=None,
    help="Enable/disable live reload (overrides config, default: enabled)",
)
@click.option(
    "--cache/--no-cache",
    default=None,
    help="Enable/disable caching (overrides config, default: enabled)",
)
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    cache_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
    live_reload: bool | None,
    cache: bool | None,
) -> None:
    """Start the rendering server."""
    from markline.server import run_server

    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            source_dir=source_dir,
            cache_dir=cache_dir,
            cache_enabled=cache,
            live_reload_enabled=live_reload,
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    if config.docs.cache_enabled:
        click.echo(f"Cache directory: {config.docs.cache_dir}")
    else:
        click.echo("Cache: disabled")
    if config.live_reload.enabled:
        click.echo("Live reload: enabled")
    else:
        click.echo("Live reload: disabled")

    run_server(config, verbose=verbose)


if __name__ == "__main__":
    cli()
