"""CLI command for compliance checks."""

from pathlib import Path
from typing import Optional

import typer

from sbom_comply.cli.utils import console, fail, resolve_config, write_output
from sbom_comply.utils.errors import SbomComplyError


def check_cmd(
    document: Path = typer.Argument(..., help="Path to the SBOM document (JSON or YAML)"),
    standard: Optional[str] = typer.Option(
        None,
        "--standard",
        "-s",
        help="Compliance standard (ntia, bsi, bsi-v2, oct, fsct)",
    ),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (json, basic, detailed)",
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        "-l",
        help="Colorize the detailed report",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path",
    ),
    fail_under: Optional[float] = typer.Option(
        None,
        "--fail-under",
        help="Exit with status 1 when the total score is below this value",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a configuration file",
    ),
) -> None:
    """
    Check an SBOM document against a compliance standard.

    Example:
        sbom-comply check sbom.json --standard bsi-v2 --format detailed --color
    """
    from sbom_comply.core.document import load_document
    from sbom_comply.core.runner import ComplianceRunner
    from sbom_comply.renderers import RenderContext, get_renderer

    try:
        settings = resolve_config(config)

        standard = standard or settings.compliance.default_standard
        format = format or settings.output.default_format
        color = settings.output.color if color is None else color
        threshold = fail_under if fail_under is not None else settings.compliance.fail_under

        renderer = get_renderer(format)
        sbom = load_document(document)

        with console.status("Running compliance checks..."):
            report = ComplianceRunner().run(sbom, standard, document.name)

        content = renderer.render(report, RenderContext(format=renderer.format, color=color))
    except SbomComplyError as e:
        fail(e, as_json=(format or "").lower() == "json", file_name=document.name)

    write_output(content, output)

    if threshold is not None and report.summary.total_score < threshold:
        console.print(
            f"[red]Score {report.summary.total_score:0.1f} is below the required {threshold:0.1f}[/red]"
        )
        raise typer.Exit(1)
