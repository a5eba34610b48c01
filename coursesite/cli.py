"""Command-line interface for coursesite.

This module defines the CLI commands using Click framework.

Commands:
- build: Build the site into the output directory.
- serve: Run development server with live reload.
"""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(version=__version__, prog_name="coursesite")
def cli():
    """Course website generator."""


@cli.command()
@click.option(
    "--output",
    type=click.Path(file_okay=False, path_type=Path),
    required=False,
    help="Directory to write the site to (overrides coursesite.yaml)",
)
def build(output: Path | None):
    """Build the site into the output directory."""
    project_root = Path.cwd()
    from .build import BuildError, build_site

    try:
        result = build_site(project_root, output_dir_override=output)
    except BuildError as exc:
        _report_build_error(project_root, exc)
        raise SystemExit(1) from None
    except FileNotFoundError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Built {len(result.pages)} articles into {result.output_dir}")


@cli.command()
@click.option(
    "--port",
    type=int,
    required=False,
    help="Port to run the dev server (overrides coursesite.yaml)",
)
@click.option(
    "--ws-port",
    type=int,
    required=False,
    help="Port for the live reload websocket server (overrides coursesite.yaml ws_port)",
)
def serve(port: int | None, ws_port: int | None):
    """Run dev server with live reload."""
    project_root = Path.cwd()
    from .build import BuildError
    from .server import DevServer

    try:
        server = DevServer(project_root, http_port=port, ws_port=ws_port)
        server.start()
    except BuildError as exc:
        _report_build_error(project_root, exc)
        raise SystemExit(1) from None
    except FileNotFoundError as exc:
        raise click.ClickException(str(exc)) from exc


def _report_build_error(project_root: Path, exc) -> None:
    """Print a BuildError with its source path relative to the project."""
    try:
        rel_path = exc.source_path.relative_to(project_root)
    except ValueError:
        rel_path = exc.source_path
    click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
    click.echo(click.style(f"  File: {rel_path}", fg="yellow"), err=True)
    click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)


def main():
    """Entry point for the CLI application."""
    cli()
