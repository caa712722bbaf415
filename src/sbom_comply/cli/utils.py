"""Shared utilities for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from sbom_comply.utils.config import SbomComplyConfig, get_config, load_config
from sbom_comply.utils.errors import SbomComplyError

# Shared console instance
console = Console()


def fail(error: SbomComplyError | str, as_json: bool = False, file_name: str = "") -> None:
    """Print an error and exit with status 1.

    With ``as_json`` the error is written to stdout as an ErrorDetail
    object, so JSON consumers always get JSON.
    """
    if isinstance(error, str):
        error = SbomComplyError(error)

    if as_json:
        typer.echo(error.to_error_detail(file_name).model_dump_json(indent=2))
    else:
        console.print(f"[red]Error:[/red] {escape(error.message)}")
    raise typer.Exit(1)


def resolve_config(config_path: Path | None) -> SbomComplyConfig:
    """Load an explicit config file, or the discovered one."""
    if config_path is not None:
        return load_config(config_path)
    return get_config()


def write_output(content: str, output: Path | None = None) -> None:
    """Write rendered output to a file or to stdout.

    Args:
        content: Rendered report
        output: Optional output file path
    """
    if output:
        output.write_text(content, encoding="utf-8")
        console.print(f"Report written to {escape(str(output))}")
    else:
        typer.echo(content)
