"""Run a standard against a document and produce a report."""

from __future__ import annotations

from sbom_comply import __version__
from sbom_comply.core.context import RunContext
from sbom_comply.core.registry import StandardRegistry, get_default_registry
from sbom_comply.core.scoring import ScoreAggregator
from sbom_comply.core.sections import SectionBuilder
from sbom_comply.models.document import Document
from sbom_comply.models.report import ComplianceReport, RunInfo, ToolInfo
from sbom_comply.utils.errors import UnsupportedDocumentError, ValidationError, validate_file_name
from sbom_comply.utils.logging import get_logger_with_context


class ComplianceRunner:
    """Evaluate documents against registered standards.

    Every run gets its own record store and run context; nothing is shared
    between runs.

    Example:
        runner = ComplianceRunner()
        report = runner.run(document, "ntia", "sbom.json")
        print(report.summary.total_score)
    """

    def __init__(self, registry: StandardRegistry | None = None) -> None:
        self.registry = registry or get_default_registry()

    def run(self, document: Document | None, standard: str, file_name: str) -> ComplianceReport:
        """Evaluate a document.

        Args:
            document: Parsed SBOM document
            standard: Standard name or alias
            file_name: Name of the evaluated file, shown in the report

        Returns:
            The compliance report

        Raises:
            UnknownStandardError: If the standard is not registered
            ValidationError: If the document or file name is missing
            UnsupportedDocumentError: If the standard cannot evaluate the document
            MissingSectionMetadataError: If a record has no report metadata
        """
        selected = self.registry.get(standard)
        if document is None:
            raise ValidationError("Document cannot be empty", field="document")
        validate_file_name(file_name)

        reason = selected.supports(document)
        if reason:
            raise UnsupportedDocumentError(selected.name, reason)

        logger = get_logger_with_context("runner", standard=selected.name, file=file_name)
        logger.info(f"Running compliance check on {len(document.components)} components")

        context = RunContext.from_document(document)
        store = selected.evaluate(document, context)
        sections = SectionBuilder(store, selected).build()
        summary = ScoreAggregator(store).summary(selected.max_score)

        logger.bind(sections=len(sections)).info(f"Compliance check finished with score {summary.total_score:.1f}")

        return ComplianceReport(
            report_name=selected.report_name,
            subtitle=selected.subtitle,
            revision=selected.revision,
            run=RunInfo(file_name=file_name),
            tool=ToolInfo(version=__version__),
            summary=summary,
            sections=sections,
            standard=selected.name,
        )
