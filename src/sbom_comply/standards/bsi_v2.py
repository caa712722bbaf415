"""BSI TR-03183-2 v2.0.0."""

from __future__ import annotations

from sbom_comply.core.context import RunContext
from sbom_comply.core.standard import DOCUMENT_ID, Check
from sbom_comply.models.document import Document
from sbom_comply.models.record import Record
from sbom_comply.models.section import SectionMeta
from sbom_comply.standards import bsi
from sbom_comply.standards.bsi import SCORE_FULL, SCORE_PARTIAL, SCORE_ZERO, BsiKey

VALID_SPDX_VERSIONS = ("SPDX-2.2", "SPDX-2.3")
VALID_CDX_VERSIONS = ("1.5", "1.6")

# Versions recognised as SPDX at all; anything else is not reported
KNOWN_SPDX_VERSIONS = ("SPDX-2.1", "SPDX-2.2", "SPDX-2.3")


def check_vulnerabilities(doc: Document, ctx: RunContext) -> Record:
    """An SBOM for this revision must not carry vulnerability data."""
    if not doc.vulnerabilities:
        return Record.required_stmt(BsiKey.SBOM_VULNERABILITIES, DOCUMENT_ID, "no-vulnerability", SCORE_FULL)
    result = doc.vulnerabilities[0].id or "no-vulnerability"
    return Record.required_stmt(BsiKey.SBOM_VULNERABILITIES, DOCUMENT_ID, result, SCORE_ZERO)


def check_spec_version(doc: Document, ctx: RunContext) -> Record:
    version = doc.spec.version

    if doc.spec_type == "spdx":
        if version not in KNOWN_SPDX_VERSIONS:
            return Record.required_stmt(BsiKey.SBOM_SPEC_VERSION, DOCUMENT_ID, "", SCORE_ZERO)
        score = SCORE_FULL if version in VALID_SPDX_VERSIONS else SCORE_ZERO
        return Record.required_stmt(BsiKey.SBOM_SPEC_VERSION, DOCUMENT_ID, version, score)

    if doc.spec_type == "cyclonedx":
        score = SCORE_FULL if version in VALID_CDX_VERSIONS else SCORE_ZERO
        return Record.required_stmt(BsiKey.SBOM_SPEC_VERSION, DOCUMENT_ID, version, score)

    return Record.required_stmt(BsiKey.SBOM_SPEC_VERSION, DOCUMENT_ID, "", SCORE_ZERO)


def check_signature(doc: Document, ctx: RunContext) -> Record:
    """Report an enveloped signature. The signature is not verified."""
    signature = doc.signature
    if signature is None or not signature.is_present:
        return Record.optional_stmt(BsiKey.SBOM_SIGNATURE, DOCUMENT_ID, "", SCORE_ZERO)

    algorithm = f" ({signature.algorithm})" if signature.algorithm else ""
    return Record.optional_stmt(
        BsiKey.SBOM_SIGNATURE, DOCUMENT_ID, f"signature present{algorithm}, not verified", SCORE_PARTIAL
    )


class BsiV2Standard(bsi.BsiStandard):
    """BSI TR-03183-2 v2.0.0."""

    name = "bsi-v2"
    aliases = ("bsi-v2.0", "bsi-v2.0.0")
    description = "BSI TR-03183-2 v2.0.0"

    report_name = "BSI TR-03183-2 v2.0.0 Compliance Report"
    revision = "TR-03183-2 (2.0.0)"

    @property
    def check_keys(self) -> frozenset[int]:
        return frozenset(BsiKey)

    def metadata(self) -> dict[int, SectionMeta]:
        return dict(bsi.SECTIONS)

    def checks(self) -> list[Check]:
        return [
            check_vulnerabilities,
            bsi.check_spec,
            check_spec_version,
            bsi.check_build_phase,
            bsi.check_depth,
            bsi.check_creator,
            bsi.check_timestamp,
            bsi.check_sbom_uri,
            bsi.check_components,
            check_signature,
        ]
