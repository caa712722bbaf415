"""JSON renderer for compliance reports."""

from __future__ import annotations

import json

from sbom_comply.models.report import ComplianceReport
from sbom_comply.renderers.base import BaseRenderer, OutputFormat, RenderContext


class JSONRenderer(BaseRenderer):
    """Renderer for the JSON report.

    Sections without a maturity label omit the ``maturity`` key.

    Example:
        renderer = JSONRenderer()
        json_str = renderer.render(report, context)
    """

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.JSON

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        data = report.model_dump(mode="json", exclude_none=True)

        return json.dumps(
            data,
            indent=context.indent if context.indent else None,
            ensure_ascii=False,
        )
