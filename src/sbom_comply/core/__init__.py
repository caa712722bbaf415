"""Core domain logic for sbom-comply.

This module provides the record store, scoring, section building and run
orchestration used by every compliance standard.
"""

from sbom_comply.core.store import RecordStore
from sbom_comply.core.scoring import ScoreAggregator, ScoreResult
from sbom_comply.core.sections import SectionBuilder, natural_key
from sbom_comply.core.context import RunContext
from sbom_comply.core.standard import DOCUMENT_ID, Check, Standard
from sbom_comply.core.registry import StandardRegistry, get_default_registry
from sbom_comply.core.document import load_document
from sbom_comply.core.runner import ComplianceRunner

__all__ = [
    "RecordStore",
    "ScoreAggregator",
    "ScoreResult",
    "SectionBuilder",
    "natural_key",
    "RunContext",
    "DOCUMENT_ID",
    "Check",
    "Standard",
    "StandardRegistry",
    "get_default_registry",
    "load_document",
    "ComplianceRunner",
]
