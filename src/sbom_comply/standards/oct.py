"""OpenChain Telco SBOM Guide v1.0.

Only SPDX documents can be evaluated. Document-level records are filed
under the guide's own headings ("SPDX Elements", "SBOM Format", ...) and
package records under the package's SPDX element id.
"""

from __future__ import annotations

from enum import IntEnum

from sbom_comply.core.context import RunContext
from sbom_comply.core.standard import Check, Standard
from sbom_comply.models.document import Component, Document
from sbom_comply.models.record import Record
from sbom_comply.models.section import SectionMeta
from sbom_comply.standards.common import (
    first_tool_name,
    is_rfc3339,
    is_spdx_placeholder,
    purl_share,
    sha256_content,
)

SCORE_FULL = 10.0
SCORE_ZERO = 0.0

FORMAT = "SBOM Format"
SPDX_ELEMENTS = "SPDX Elements"
BUILD_INFO = "SBOM Build Information"
MACHINE_FORMAT = "Machine Readable Data Format"
HUMAN_FORMAT = "Human Readable Data Format"
DELIVERY_TIME = "Timing of SBOM delivery"
DELIVERY_METHOD = "Method of SBOM delivery"
SCOPE = "SBOM Scope"

READABLE_FORMATS = ("json", "tag-value")


class OctKey(IntEnum):
    SBOM_SPEC = 1
    SBOM_SPEC_VERSION = 2
    SBOM_SPDXID = 3
    SBOM_ORG = 4
    SBOM_COMMENT = 5
    SBOM_NAMESPACE = 6
    SBOM_LICENSE = 7
    SBOM_NAME = 8
    SBOM_TIMESTAMP = 9
    SBOM_TOOL = 10
    SBOM_MACHINE_FORMAT = 11
    SBOM_HUMAN_FORMAT = 12
    SBOM_DELIVERY_TIME = 13
    SBOM_DELIVERY_METHOD = 14
    SBOM_SCOPE = 15
    SBOM_COMPONENTS = 16
    PACK_INFO = 20
    PACK_NAME = 21
    PACK_SPDXID = 22
    PACK_VERSION = 23
    PACK_FILE_ANALYZED = 24
    PACK_DOWNLOAD_URL = 25
    PACK_HASH = 26
    PACK_SUPPLIER = 27
    PACK_LICENSE_CON = 28
    PACK_LICENSE_DEC = 29
    PACK_COPYRIGHT = 30
    PACK_EXT_REF = 31


SECTIONS = {
    OctKey.SBOM_SPEC: SectionMeta(title=FORMAT, section_id="3.1.1", data_field="SBOM data format"),
    OctKey.SBOM_SPEC_VERSION: SectionMeta(title=SPDX_ELEMENTS, section_id="3.1.2", data_field="Spec version"),
    OctKey.SBOM_SPDXID: SectionMeta(title=SPDX_ELEMENTS, section_id="3.1.3", data_field="Spec spdxid"),
    OctKey.SBOM_ORG: SectionMeta(title=BUILD_INFO, section_id="3.1.4", data_field="SBOM creator organization"),
    OctKey.SBOM_COMMENT: SectionMeta(title=SPDX_ELEMENTS, section_id="3.1.5", data_field="SBOM creator comment"),
    OctKey.SBOM_NAMESPACE: SectionMeta(title=SPDX_ELEMENTS, section_id="3.1.6", data_field="SBOM namespace"),
    OctKey.SBOM_LICENSE: SectionMeta(title=SPDX_ELEMENTS, section_id="3.1.7", data_field="SBOM license"),
    OctKey.SBOM_NAME: SectionMeta(title=SPDX_ELEMENTS, section_id="3.1.8", data_field="SBOM name"),
    OctKey.SBOM_TIMESTAMP: SectionMeta(title=SPDX_ELEMENTS, section_id="3.1.9", data_field="SBOM timestamp"),
    OctKey.SBOM_TOOL: SectionMeta(title=BUILD_INFO, section_id="3.1.10", data_field="SBOM creator tool"),
    OctKey.SBOM_MACHINE_FORMAT: SectionMeta(title=MACHINE_FORMAT, section_id="3.1.11", data_field="SBOM machine readable format"),
    OctKey.SBOM_HUMAN_FORMAT: SectionMeta(title=HUMAN_FORMAT, section_id="3.1.12", data_field="SBOM human readable format"),
    OctKey.SBOM_DELIVERY_TIME: SectionMeta(title=DELIVERY_TIME, section_id="3.1.14", data_field="SBOM delivery time"),
    OctKey.SBOM_DELIVERY_METHOD: SectionMeta(title=DELIVERY_METHOD, section_id="3.1.15", data_field="SBOM delivery method"),
    OctKey.SBOM_SCOPE: SectionMeta(title=SCOPE, section_id="3.1.16", data_field="SBOM scope"),
    OctKey.SBOM_COMPONENTS: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.1", data_field="Packages"),
    OctKey.PACK_INFO: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.1", data_field="Package info"),
    OctKey.PACK_NAME: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.2", data_field="Package name"),
    OctKey.PACK_SPDXID: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.3", data_field="Package spdxid"),
    OctKey.PACK_VERSION: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.4", data_field="Package version"),
    OctKey.PACK_FILE_ANALYZED: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.5", data_field="FileAnalyze"),
    OctKey.PACK_DOWNLOAD_URL: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.6", data_field="Package download URL"),
    OctKey.PACK_HASH: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.7", data_field="Package checksum"),
    OctKey.PACK_SUPPLIER: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.8", data_field="Package supplier"),
    OctKey.PACK_LICENSE_CON: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.9", data_field="Package concluded License"),
    OctKey.PACK_LICENSE_DEC: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.10", data_field="Package declared License"),
    OctKey.PACK_COPYRIGHT: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.11", data_field="Package copyright"),
    OctKey.PACK_EXT_REF: SectionMeta(title=SPDX_ELEMENTS, section_id="3.2.12", data_field="Package external References"),
}


def _present(key: OctKey, id: str, value: str) -> Record:
    return Record.required_stmt(key, id, value, SCORE_FULL if value else SCORE_ZERO)


def _asserted(key: OctKey, id: str, value: str) -> Record:
    score = SCORE_ZERO if is_spdx_placeholder(value) else SCORE_FULL
    return Record.required_stmt(key, id, value, score)


def check_spec(doc: Document, ctx: RunContext) -> Record:
    score = SCORE_FULL if doc.spec_type == "spdx" else SCORE_ZERO
    return Record.required_stmt(OctKey.SBOM_SPEC, FORMAT, doc.spec.spec_type, score)


def check_spec_fields(doc: Document, ctx: RunContext) -> list[Record]:
    spec = doc.spec
    return [
        _present(OctKey.SBOM_SPEC_VERSION, SPDX_ELEMENTS, spec.version),
        _present(OctKey.SBOM_SPDXID, SPDX_ELEMENTS, spec.spdx_id),
        _present(OctKey.SBOM_COMMENT, SPDX_ELEMENTS, spec.comment),
        _present(OctKey.SBOM_NAMESPACE, SPDX_ELEMENTS, spec.namespace),
        _present(OctKey.SBOM_LICENSE, SPDX_ELEMENTS, ", ".join(l.name for l in spec.licenses if l.name)),
        _present(OctKey.SBOM_NAME, SPDX_ELEMENTS, spec.name),
    ]


def check_timestamp(doc: Document, ctx: RunContext) -> Record:
    result = doc.spec.creation_timestamp
    score = SCORE_FULL if is_rfc3339(result) else SCORE_ZERO
    return Record.required_stmt(OctKey.SBOM_TIMESTAMP, SPDX_ELEMENTS, result, score)


def package_records(component: Component) -> list[Record]:
    id = component.id
    supplier = component.supplier.email if component.supplier else ""
    file_analyzed = (
        Record.required_stmt(OctKey.PACK_FILE_ANALYZED, id, "yes", SCORE_FULL)
        if component.file_analyzed
        else Record.required_stmt(OctKey.PACK_FILE_ANALYZED, id, "no", SCORE_ZERO)
    )
    result, score = purl_share(component.external_references)

    return [
        _present(OctKey.PACK_NAME, id, component.name),
        _present(OctKey.PACK_SPDXID, id, component.spdx_id),
        _present(OctKey.PACK_VERSION, id, component.version),
        _present(OctKey.PACK_SUPPLIER, id, supplier),
        _present(OctKey.PACK_DOWNLOAD_URL, id, component.download_location),
        file_analyzed,
        _present(OctKey.PACK_HASH, id, sha256_content(component.checksums)),
        _asserted(OctKey.PACK_LICENSE_CON, id, component.license_concluded),
        _asserted(OctKey.PACK_LICENSE_DEC, id, component.license_declared),
        _asserted(OctKey.PACK_COPYRIGHT, id, component.copyright),
        Record.required_stmt(OctKey.PACK_EXT_REF, id, result, score),
    ]


def check_packages(doc: Document, ctx: RunContext) -> list[Record]:
    if not doc.components:
        return [Record.required_stmt(OctKey.SBOM_COMPONENTS, SPDX_ELEMENTS, "", SCORE_ZERO)]

    records = []
    for component in doc.components:
        records.extend(package_records(component))
    records.append(Record.required_stmt(OctKey.PACK_INFO, SPDX_ELEMENTS, "present", SCORE_FULL))
    return records


def check_formats(doc: Document, ctx: RunContext) -> list[Record]:
    file_format = doc.spec.file_format
    score = SCORE_FULL if file_format in READABLE_FORMATS else SCORE_ZERO
    return [
        Record.required_stmt(OctKey.SBOM_MACHINE_FORMAT, MACHINE_FORMAT, f"{doc.spec.spec_type}, {file_format}", score),
        Record.required_stmt(OctKey.SBOM_HUMAN_FORMAT, HUMAN_FORMAT, file_format, score),
    ]


def check_build_information(doc: Document, ctx: RunContext) -> list[Record]:
    return [
        _present(OctKey.SBOM_TOOL, BUILD_INFO, first_tool_name(doc.tools)),
        _present(OctKey.SBOM_ORG, BUILD_INFO, doc.spec.organization),
    ]


def check_delivery(doc: Document, ctx: RunContext) -> list[Record]:
    """Delivery and scope cannot be read from the document itself."""
    return [
        Record.required_stmt(OctKey.SBOM_DELIVERY_TIME, DELIVERY_TIME, "unknown", SCORE_ZERO),
        Record.required_stmt(OctKey.SBOM_DELIVERY_METHOD, DELIVERY_METHOD, "unknown", SCORE_ZERO),
        Record.required_stmt(OctKey.SBOM_SCOPE, SCOPE, "unknown", SCORE_ZERO),
    ]


class OctStandard(Standard):
    """OpenChain Telco SBOM Guide v1.0."""

    name = "oct"
    aliases = ("openchain-telco", "oct-v1.0")
    description = "OpenChain Telco SBOM Guide v1.0 (SPDX only)"

    report_name = "OpenChain Telco SBOM Guide Version 1.0"
    subtitle = "SBOM guide"
    revision = "v1.0"

    document_label = FORMAT
    key_enum = OctKey

    def supports(self, document: Document) -> str | None:
        if document.spec_type != "spdx":
            return f"OpenChain Telco applies to SPDX documents only, got {document.spec_type or 'unknown'}"
        return None

    def metadata(self) -> dict[int, SectionMeta]:
        return dict(SECTIONS)

    def checks(self) -> list[Check]:
        return [
            check_spec,
            check_spec_fields,
            check_timestamp,
            check_packages,
            check_formats,
            check_build_information,
            check_delivery,
        ]
