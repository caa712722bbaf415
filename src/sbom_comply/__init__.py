"""sbom-comply: score SBOM documents against compliance standards.

Supported standards:

- **NTIA**: NTIA minimum elements
- **BSI**: BSI TR-03183-2 v1.1 and v2.0.0
- **OCT**: OpenChain Telco SBOM Guide v1.0 (SPDX only)
- **FSCT**: Framing Software Component Transparency v3, with maturity levels

Usage:
    # Library API
    from sbom_comply import ComplianceRunner, load_document

    document = load_document("sbom.json")
    report = ComplianceRunner().run(document, "ntia", "sbom.json")
    print(report.summary.total_score)

    # Lower level: records, scores and sections
    from sbom_comply import RecordStore, ScoreAggregator, Record

    store = RecordStore()
    store.add(Record.required_stmt(1, "doc", "spdx, json", 10.0))
    ScoreAggregator(store).score_of_document()

CLI:
    sbom-comply check <document> --standard bsi-v2 --format detailed
    sbom-comply standards
"""

__version__ = "0.1.0"

# Core classes
from sbom_comply.core.store import RecordStore
from sbom_comply.core.scoring import ScoreAggregator, ScoreResult
from sbom_comply.core.sections import SectionBuilder
from sbom_comply.core.context import RunContext
from sbom_comply.core.standard import Standard
from sbom_comply.core.registry import StandardRegistry, get_default_registry
from sbom_comply.core.document import load_document
from sbom_comply.core.runner import ComplianceRunner

# Models (commonly used)
from sbom_comply.models.record import Maturity, Record
from sbom_comply.models.section import Section, SectionMeta
from sbom_comply.models.report import ComplianceReport, Summary
from sbom_comply.models.document import Document

# Renderers
from sbom_comply.renderers.base import Renderer, RenderContext, OutputFormat

__all__ = [
    # Version
    "__version__",
    # Core
    "RecordStore",
    "ScoreAggregator",
    "ScoreResult",
    "SectionBuilder",
    "RunContext",
    "Standard",
    "StandardRegistry",
    "get_default_registry",
    "load_document",
    "ComplianceRunner",
    # Models
    "Maturity",
    "Record",
    "Section",
    "SectionMeta",
    "ComplianceReport",
    "Summary",
    "Document",
    # Renderers
    "Renderer",
    "RenderContext",
    "OutputFormat",
]
