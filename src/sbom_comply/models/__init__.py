"""Data models for sbom-comply.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from sbom_comply.models.common import ErrorDetail
from sbom_comply.models.document import (
    Author,
    Checksum,
    Component,
    Composition,
    Contact,
    Document,
    ExternalReference,
    License,
    Organization,
    Relationship,
    Signature,
    Spec,
    Swid,
    Tool,
    Vulnerability,
)
from sbom_comply.models.record import Maturity, Record
from sbom_comply.models.report import (
    ComplianceReport,
    RunInfo,
    Summary,
    ToolInfo,
)
from sbom_comply.models.section import Section, SectionMeta

__all__ = [
    # Common
    "ErrorDetail",
    # Document
    "Author",
    "Checksum",
    "Component",
    "Composition",
    "Contact",
    "Document",
    "ExternalReference",
    "License",
    "Organization",
    "Relationship",
    "Signature",
    "Spec",
    "Swid",
    "Tool",
    "Vulnerability",
    # Records
    "Maturity",
    "Record",
    # Sections
    "Section",
    "SectionMeta",
    # Report
    "ComplianceReport",
    "RunInfo",
    "Summary",
    "ToolInfo",
]
