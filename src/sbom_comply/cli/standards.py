"""CLI command listing the registered standards."""

import typer
from rich.table import Table

from sbom_comply.cli.utils import console, write_output


def standards_cmd(
    format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format (table, json)",
    ),
) -> None:
    """
    List the compliance standards that can be checked.

    Example:
        sbom-comply standards
    """
    from sbom_comply.core.registry import get_default_registry

    registry = get_default_registry()

    if format == "json":
        import json

        data = [
            {
                "name": s.name,
                "aliases": list(s.aliases),
                "description": s.description,
                "report_name": s.report_name,
            }
            for s in registry.standards()
        ]
        write_output(json.dumps(data, indent=2))
        return

    table = Table(title="Compliance Standards")
    table.add_column("Name", style="bold")
    table.add_column("Aliases")
    table.add_column("Description")

    for s in registry.standards():
        table.add_row(s.name, ", ".join(s.aliases), s.description)

    console.print(table)
