"""NTIA minimum elements for a Software Bill of Materials."""

from __future__ import annotations

from enum import IntEnum

from sbom_comply.core.context import RunContext
from sbom_comply.core.standard import DOCUMENT_ID, Check, Standard
from sbom_comply.models.document import Component, Document
from sbom_comply.models.record import Record
from sbom_comply.models.section import SectionMeta
from sbom_comply.standards.common import (
    first_author_contact,
    first_tool_name,
    is_rfc3339,
    organization_contact,
    purl_share,
    unique_element_id,
)

SCORE_FULL = 10.0
SCORE_ZERO = 0.0

VALID_SPECS = ("cyclonedx", "spdx")
VALID_FORMATS = ("json", "xml", "yaml", "yml", "tag-value")


class NtiaKey(IntEnum):
    SBOM_MACHINE_FORMAT = 1
    SBOM_CREATOR = 2
    SBOM_TIMESTAMP = 3
    SBOM_DEPENDENCY = 4
    SBOM_COMPONENTS = 5
    COMP_NAME = 10
    COMP_DEPTH = 11
    COMP_CREATOR = 12
    COMP_VERSION = 13
    COMP_OTHER_UNIQ_IDS = 14


SECTIONS = {
    NtiaKey.SBOM_MACHINE_FORMAT: SectionMeta(title="Automation Support", section_id="1.1", data_field="Machine-Readable Formats"),
    NtiaKey.SBOM_CREATOR: SectionMeta(title="Required fields sboms", section_id="2.1", data_field="Author"),
    NtiaKey.SBOM_TIMESTAMP: SectionMeta(title="Required fields sboms", section_id="2.2", data_field="Timestamp"),
    NtiaKey.SBOM_DEPENDENCY: SectionMeta(title="Required fields sboms", section_id="2.3", data_field="Dependencies"),
    NtiaKey.SBOM_COMPONENTS: SectionMeta(title="Required fields sboms", section_id="2.4", data_field="Components"),
    NtiaKey.COMP_NAME: SectionMeta(title="Required fields components", section_id="2.4", data_field="Package Name"),
    NtiaKey.COMP_DEPTH: SectionMeta(title="Required fields components", section_id="2.5", data_field="Dependencies on other components"),
    NtiaKey.COMP_CREATOR: SectionMeta(title="Required fields component", section_id="2.6", data_field="Package Supplier"),
    NtiaKey.COMP_VERSION: SectionMeta(title="Required fields components", section_id="2.7", data_field="Package Version"),
    NtiaKey.COMP_OTHER_UNIQ_IDS: SectionMeta(title="Required fields component", section_id="2.8", data_field="Other Uniq IDs"),
}


def _full_if(value: str) -> float:
    return SCORE_FULL if value else SCORE_ZERO


def check_machine_format(doc: Document, ctx: RunContext) -> Record:
    spec = doc.spec_type
    file_format = doc.spec.file_format.strip().lower()
    score = SCORE_FULL if spec in VALID_SPECS and file_format in VALID_FORMATS else SCORE_ZERO
    return Record.required_stmt(NtiaKey.SBOM_MACHINE_FORMAT, DOCUMENT_ID, f"{spec}, {file_format}", score)


def check_creator(doc: Document, ctx: RunContext) -> Record:
    """SPDX names the creating tool or person; CycloneDX may also name the supplier or manufacturer."""
    if doc.spec_type == "spdx":
        candidates = [first_tool_name(doc.tools), first_author_contact(doc.authors)]
    elif doc.spec_type == "cyclonedx":
        candidates = [
            first_author_contact(doc.authors),
            first_tool_name(doc.tools),
            organization_contact(doc.supplier),
            organization_contact(doc.manufacturer),
        ]
    else:
        candidates = []

    result = next((c for c in candidates if c), "")
    return Record.required_stmt(NtiaKey.SBOM_CREATOR, DOCUMENT_ID, result, _full_if(result))


def check_timestamp(doc: Document, ctx: RunContext) -> Record:
    result = doc.spec.creation_timestamp
    score = SCORE_FULL if is_rfc3339(result) else SCORE_ZERO
    return Record.required_stmt(NtiaKey.SBOM_TIMESTAMP, DOCUMENT_ID, result, score)


def check_dependency(doc: Document, ctx: RunContext) -> Record:
    total = len(ctx.primary_dependencies)
    score = SCORE_FULL if total > 0 else SCORE_ZERO
    return Record.required_stmt(NtiaKey.SBOM_DEPENDENCY, DOCUMENT_ID, f"doc has {total} dependencies", score)


def _component_supplier(doc: Document, component: Component) -> str:
    result = organization_contact(component.supplier)
    if not result and doc.spec_type == "cyclonedx":
        result = organization_contact(component.manufacturer)
    return result


def _component_unique_ids(doc: Document, component: Component, id: str) -> Record:
    if doc.spec_type == "spdx":
        result, score = purl_share(component.external_references)
        return Record.required_stmt(NtiaKey.COMP_OTHER_UNIQ_IDS, id, result, score)

    if doc.spec_type == "cyclonedx":
        if component.purls:
            return Record.optional_stmt(NtiaKey.COMP_OTHER_UNIQ_IDS, id, component.purls[0], SCORE_FULL)
        if component.cpes:
            return Record.optional_stmt(NtiaKey.COMP_OTHER_UNIQ_IDS, id, component.cpes[0], SCORE_FULL)
        return Record.optional_stmt(NtiaKey.COMP_OTHER_UNIQ_IDS, id, "", SCORE_ZERO)

    return Record.required_stmt(NtiaKey.COMP_OTHER_UNIQ_IDS, id, "", SCORE_ZERO)


def _component_dependencies(doc: Document, ctx: RunContext, component: Component, id: str) -> Record:
    dependencies = doc.dependencies_of(component.id)
    if not dependencies:
        return Record.required_stmt(NtiaKey.COMP_DEPTH, id, "no-relationships", SCORE_ZERO)
    return Record.required_stmt(NtiaKey.COMP_DEPTH, id, ", ".join(ctx.names_of(dependencies)), SCORE_FULL)


def check_components(doc: Document, ctx: RunContext) -> list[Record]:
    if not doc.components:
        return [Record.required_stmt(NtiaKey.SBOM_COMPONENTS, DOCUMENT_ID, "absent", SCORE_ZERO)]

    records = []
    for component in doc.components:
        id = unique_element_id(component)
        supplier = _component_supplier(doc, component)
        records.extend(
            [
                Record.required_stmt(NtiaKey.COMP_NAME, id, component.name, _full_if(component.name)),
                Record.required_stmt(NtiaKey.COMP_CREATOR, id, supplier, _full_if(supplier)),
                Record.required_stmt(NtiaKey.COMP_VERSION, id, component.version, _full_if(component.version)),
                _component_unique_ids(doc, component, id),
                _component_dependencies(doc, ctx, component, id),
            ]
        )
    return records


class NtiaStandard(Standard):
    """NTIA minimum elements (July 2021)."""

    name = "ntia"
    aliases = ("ntia-minimum-elements",)
    description = "NTIA minimum elements for an SBOM"

    report_name = "NTIA-minimum elements Compliance Report"
    subtitle = "Part 2: Software Bill of Materials (SBOM)"
    revision = ""

    document_label = "SBOM Data Fields"
    key_enum = NtiaKey

    def metadata(self) -> dict[int, SectionMeta]:
        return dict(SECTIONS)

    def checks(self) -> list[Check]:
        return [check_machine_format, check_creator, check_timestamp, check_dependency, check_components]
