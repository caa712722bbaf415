"""One-line summary renderer."""

from __future__ import annotations

from sbom_comply.models.report import ComplianceReport
from sbom_comply.renderers.base import BaseRenderer, OutputFormat, RenderContext


class BasicRenderer(BaseRenderer):
    """Render the report name and its scores, nothing else."""

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.BASIC

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        summary = report.summary
        return (
            f"{report.report_name}\n"
            f"Score:{summary.total_score:0.1f} "
            f"RequiredScore:{summary.required_elements_score:0.1f} "
            f"OptionalScore:{summary.optional_elements_score:0.1f} "
            f"for {report.file_name}"
        )
