"""Base renderer protocol and types."""

from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from sbom_comply.models.report import ComplianceReport


class OutputFormat(str, Enum):
    """Supported output formats."""

    JSON = "json"
    BASIC = "basic"
    DETAILED = "detailed"


class RenderContext(BaseModel):
    """Context for rendering operations."""

    model_config = {"frozen": True}

    format: OutputFormat = Field(default=OutputFormat.DETAILED, description="Output format")
    output_path: Path | None = Field(default=None, description="Output file path")
    color: bool = Field(default=False, description="Colorize scores and maturity (detailed only)")

    # Formatting options
    indent: int = Field(default=2, description="JSON indentation")
    width: int = Field(default=160, description="Table width for the detailed report")


@runtime_checkable
class Renderer(Protocol):
    """Protocol for report renderers.

    Example:
        class MyRenderer:
            @property
            def format(self) -> OutputFormat:
                return OutputFormat.BASIC

            def render(self, report: ComplianceReport, context: RenderContext) -> str:
                return f"{report.report_name}: {report.summary.total_score:0.1f}"

            def render_to_file(self, report: ComplianceReport, context: RenderContext) -> None:
                context.output_path.write_text(self.render(report, context))
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        ...

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        """Render a report to a string."""
        ...

    def render_to_file(self, report: ComplianceReport, context: RenderContext) -> None:
        """Render a report directly to ``context.output_path``."""
        ...


class BaseRenderer:
    """Base implementation with common functionality.

    Provides default implementation of render_to_file.
    Subclasses should implement format property and render method.
    """

    def render_to_file(self, report: ComplianceReport, context: RenderContext) -> None:
        """Render a report directly to a file.

        Raises:
            ValueError: If context.output_path is not set
        """
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")

        content = self.render(report, context)
        context.output_path.write_text(content, encoding="utf-8")

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        """Render a report to a string. Must be implemented by subclasses."""
        raise NotImplementedError
