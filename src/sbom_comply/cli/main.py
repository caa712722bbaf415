"""Main CLI entry point for sbom-comply."""

import typer
from rich.console import Console

from sbom_comply.cli import check, standards

app = typer.Typer(
    name="sbom-comply",
    help="Check SBOM documents against compliance standards.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="check")(check.check_cmd)
app.command(name="standards")(standards.standards_cmd)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
) -> None:
    """
    sbom-comply: score SBOM documents against compliance standards.

    - [bold]check[/bold]: Evaluate a document and print a report
    - [bold]standards[/bold]: List the supported standards
    """
    from sbom_comply.utils.logging import configure_logging, level_from_flags

    configure_logging(level=level_from_flags(verbose, quiet))


@app.command()
def version() -> None:
    """Show the sbom-comply version."""
    from sbom_comply import __version__

    console.print(f"sbom-comply version {__version__}")


if __name__ == "__main__":
    app()
