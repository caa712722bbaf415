"""Detailed table renderer for compliance reports."""

from __future__ import annotations

import io

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sbom_comply.models.record import Maturity
from sbom_comply.models.report import ComplianceReport
from sbom_comply.renderers.base import BaseRenderer, OutputFormat, RenderContext

MATURITY_STYLES = {
    Maturity.NONE: "red",
    Maturity.MINIMUM: "green",
    Maturity.RECOMMENDED: "cyan",
    Maturity.ASPIRATIONAL: "yellow",
}


def score_style(score: float) -> str:
    """Style for a score: red when zero, yellow below half, green otherwise."""
    if score == 0:
        return "red"
    if score < 5:
        return "yellow"
    return "green"


class DetailedRenderer(BaseRenderer):
    """Render every section as a rich table.

    Rows are grouped by element; the element id is printed once per group.
    Section ids of optional fields are marked with ``*``. A maturity column
    is added when any section carries a maturity label.

    Example:
        renderer = DetailedRenderer()
        print(renderer.render(report, RenderContext(color=True)))
    """

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.DETAILED

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        console = Console(
            file=io.StringIO(),
            record=True,
            width=context.width,
            force_terminal=context.color,
            no_color=not context.color,
        )

        summary = report.summary
        console.print(Text(report.report_name, style="bold"))
        console.print(
            f"Compliance score by sbom-comply Score:{summary.total_score:0.1f} "
            f"RequiredScore:{summary.required_elements_score:0.1f} "
            f"OptionalScore:{summary.optional_elements_score:0.1f} for {report.file_name}",
            markup=False,
            highlight=False,
        )
        console.print("* indicates optional fields", markup=False)
        console.print(self._build_table(report, context))

        return console.export_text(styles=context.color)

    def _build_table(self, report: ComplianceReport, context: RenderContext) -> Table:
        with_maturity = report.has_maturity

        table = Table(show_lines=False)
        table.add_column("Element ID", style="bold")
        table.add_column("Section ID")
        table.add_column("Data Field")
        table.add_column("Element Result", overflow="fold")
        table.add_column("Score", justify="right")
        if with_maturity:
            table.add_column("Maturity")

        element_ids = report.element_ids
        for index, element_id in enumerate(element_ids):
            sections = report.sections_for(element_id)
            for position, section in enumerate(sections):
                section_id = section.section_id if section.required else f"{section.section_id}*"
                score_text = f"{section.score:0.1f}"

                row = [
                    Text(element_id if position == 0 else ""),
                    Text(section_id),
                    Text(section.section_data_field, style="blue" if context.color else ""),
                    Text(section.element_result, style="cyan" if context.color else ""),
                    Text(score_text, style=score_style(section.score) if context.color else ""),
                ]
                if with_maturity:
                    maturity = section.maturity.value if section.maturity else ""
                    style = MATURITY_STYLES.get(section.maturity, "") if context.color else ""
                    row.append(Text(maturity, style=style))

                last_of_group = position == len(sections) - 1 and index < len(element_ids) - 1
                table.add_row(*row, end_section=last_of_group)

        return table
