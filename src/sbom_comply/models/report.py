"""Compliance report models."""

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from sbom_comply.models.section import Section

ENGINE_VERSION = "1"
TOOL_NAME = "sbom-comply"
TOOL_VENDOR = "sbom-comply contributors"


def _generated_at() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class RunInfo(BaseModel):
    """Identity of one compliance run."""

    model_config = {"frozen": True}

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    generated_at: str = Field(default_factory=_generated_at)
    file_name: str = ""
    engine_version: str = ENGINE_VERSION


class ToolInfo(BaseModel):
    """The tool that produced the report."""

    model_config = {"frozen": True}

    name: str = TOOL_NAME
    version: str = ""
    vendor: str = TOOL_VENDOR


class Summary(BaseModel):
    """Aggregated scores for a whole document."""

    model_config = {"frozen": True}

    total_score: float = 0.0
    max_score: float = 10.0
    required_elements_score: float = 0.0
    optional_elements_score: float = 0.0


class ComplianceReport(BaseModel):
    """Result of evaluating one document against one standard."""

    model_config = {"frozen": True}

    report_name: str
    subtitle: str = ""
    revision: str = ""
    run: RunInfo = Field(default_factory=RunInfo)
    tool: ToolInfo = Field(default_factory=ToolInfo)
    summary: Summary = Field(default_factory=Summary)
    sections: list[Section] = Field(default_factory=list)

    # Registry name of the standard, not part of the JSON report
    standard: str = Field(default="", exclude=True)

    @property
    def file_name(self) -> str:
        return self.run.file_name

    @property
    def has_maturity(self) -> bool:
        """Whether any section carries a maturity label."""
        return any(s.maturity is not None for s in self.sections)

    def sections_for(self, element_id: str) -> list[Section]:
        """Get the sections of one element, in report order."""
        return [s for s in self.sections if s.element_id == element_id]

    @property
    def element_ids(self) -> list[str]:
        """Element labels in report order, without duplicates."""
        seen: dict[str, None] = {}
        for section in self.sections:
            seen.setdefault(section.element_id, None)
        return list(seen)
