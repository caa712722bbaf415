"""Framing Software Component Transparency, 3rd edition.

Every record carries a maturity label next to its score. Scores above 10
reward fields that go beyond the minimum: 12 for Recommended and 15 for
Aspirational.
"""

from __future__ import annotations

from enum import IntEnum

from sbom_comply.core.context import RunContext
from sbom_comply.core.standard import DOCUMENT_ID, Check, Standard
from sbom_comply.models.document import Component, Document
from sbom_comply.models.record import Maturity, Record
from sbom_comply.models.section import SectionMeta
from sbom_comply.standards.common import (
    describe_authors,
    describe_copyright,
    describe_hash_algorithms,
    describe_supplier,
    describe_tools,
    describe_unique_ids,
    is_rfc3339,
    join_present,
    truncate,
    unique_element_id,
)

SCORE_ZERO = 0.0
SCORE_MINIMUM = 10.0
SCORE_RECOMMENDED = 12.0
SCORE_ASPIRATIONAL = 15.0

COPYRIGHT_LIMIT = 50


class FsctKey(IntEnum):
    SBOM_AUTHOR = 1
    SBOM_TIMESTAMP = 2
    SBOM_TYPE = 3
    SBOM_PRIMARY_COMPONENT = 4
    COMP_NAME = 10
    COMP_VERSION = 11
    COMP_SUPPLIER = 12
    COMP_UNIQ_ID = 13
    COMP_CHECKSUM = 14
    COMP_RELATIONSHIP = 15
    COMP_LICENSE = 16
    COMP_COPYRIGHT = 17


SBOM_LEVEL = "SBOM Level"
COMPONENT_LEVEL = "Component Level"

SECTIONS = {
    FsctKey.SBOM_AUTHOR: SectionMeta(title=SBOM_LEVEL, section_id="2.2.1.1", data_field="SBOM Author"),
    FsctKey.SBOM_TIMESTAMP: SectionMeta(title=SBOM_LEVEL, section_id="2.2.1.2", data_field="SBOM Timestamp"),
    FsctKey.SBOM_TYPE: SectionMeta(title=SBOM_LEVEL, section_id="2.2.1.3", data_field="SBOM Type", required=False),
    FsctKey.SBOM_PRIMARY_COMPONENT: SectionMeta(title=SBOM_LEVEL, section_id="2.2.1.4", data_field="Primary Component"),
    FsctKey.COMP_NAME: SectionMeta(title=COMPONENT_LEVEL, section_id="2.2.2.1", data_field="Component Name"),
    FsctKey.COMP_VERSION: SectionMeta(title=COMPONENT_LEVEL, section_id="2.2.2.2", data_field="Component Version"),
    FsctKey.COMP_SUPPLIER: SectionMeta(title=COMPONENT_LEVEL, section_id="2.2.2.3", data_field="Component Supplier"),
    FsctKey.COMP_UNIQ_ID: SectionMeta(title=COMPONENT_LEVEL, section_id="2.2.2.4", data_field="Component Unique ID"),
    FsctKey.COMP_CHECKSUM: SectionMeta(title=COMPONENT_LEVEL, section_id="2.2.2.5", data_field="Component Checksum"),
    FsctKey.COMP_RELATIONSHIP: SectionMeta(title=COMPONENT_LEVEL, section_id="2.2.2.6", data_field="Component Relationship"),
    FsctKey.COMP_LICENSE: SectionMeta(title=COMPONENT_LEVEL, section_id="2.2.2.7", data_field="Component License"),
    FsctKey.COMP_COPYRIGHT: SectionMeta(title=COMPONENT_LEVEL, section_id="2.2.2.8", data_field="Component Copyright"),
}


def _minimum_if(key: FsctKey, id: str, value: str) -> Record:
    if value:
        return Record.required_stmt(key, id, value, SCORE_MINIMUM, Maturity.MINIMUM)
    return Record.required_stmt(key, id, "", SCORE_ZERO, Maturity.NONE)


def check_author(doc: Document, ctx: RunContext) -> Record:
    """Person authors are the minimum; authors plus tools are recommended."""
    authors = describe_authors(doc.authors)
    tools = describe_tools(doc.tools)

    if authors and tools:
        return Record.required_stmt(
            FsctKey.SBOM_AUTHOR, DOCUMENT_ID, f"{authors}, {tools}", SCORE_RECOMMENDED, Maturity.RECOMMENDED
        )
    if authors:
        return Record.required_stmt(FsctKey.SBOM_AUTHOR, DOCUMENT_ID, authors, SCORE_MINIMUM, Maturity.MINIMUM)
    return Record.required_stmt(FsctKey.SBOM_AUTHOR, DOCUMENT_ID, tools, SCORE_ZERO, Maturity.NONE)


def check_timestamp(doc: Document, ctx: RunContext) -> Record:
    result = doc.spec.creation_timestamp
    if is_rfc3339(result):
        return Record.required_stmt(FsctKey.SBOM_TIMESTAMP, DOCUMENT_ID, result, SCORE_MINIMUM, Maturity.MINIMUM)
    return Record.required_stmt(FsctKey.SBOM_TIMESTAMP, DOCUMENT_ID, result, SCORE_ZERO, Maturity.NONE)


def check_type(doc: Document, ctx: RunContext) -> Record:
    lifecycle = doc.lifecycles[0] if doc.lifecycles else ""
    if lifecycle:
        return Record.optional_stmt(FsctKey.SBOM_TYPE, DOCUMENT_ID, lifecycle, SCORE_ASPIRATIONAL, Maturity.ASPIRATIONAL)
    return Record.optional_stmt(FsctKey.SBOM_TYPE, DOCUMENT_ID, "", SCORE_ZERO, Maturity.NONE)


def check_primary_component(doc: Document, ctx: RunContext) -> Record:
    primary = doc.primary_component()
    return _minimum_if(FsctKey.SBOM_PRIMARY_COMPONENT, DOCUMENT_ID, primary.name if primary else "")


def component_checksum(doc: Document, component: Component, id: str) -> Record:
    algorithms, weak, strong = describe_hash_algorithms(component.checksums)

    if algorithms and strong and doc.is_primary(component):
        return Record.required_stmt(FsctKey.COMP_CHECKSUM, id, algorithms, SCORE_RECOMMENDED, Maturity.RECOMMENDED)
    if algorithms and (strong or weak):
        return Record.required_stmt(FsctKey.COMP_CHECKSUM, id, algorithms, SCORE_MINIMUM, Maturity.MINIMUM)
    return Record.required_stmt(FsctKey.COMP_CHECKSUM, id, "", SCORE_ZERO, Maturity.NONE)


def component_relationship(doc: Document, ctx: RunContext, component: Component, id: str) -> Record:
    """Grade a component's place in the primary component's dependency tree.

    Nothing scores unless every direct dependency of the primary component
    is itself declared in the document.
    """
    if not ctx.primary_dependencies_declared:
        return Record.required_stmt(FsctKey.COMP_RELATIONSHIP, id, "", SCORE_ZERO, Maturity.NONE)

    if ctx.is_primary_dependency(component.id):
        dependencies = doc.dependencies_of(component.id)
        result = ", ".join(ctx.names_of(dependencies))
        if dependencies:
            return Record.required_stmt(FsctKey.COMP_RELATIONSHIP, id, result, SCORE_RECOMMENDED, Maturity.RECOMMENDED)
        return Record.required_stmt(FsctKey.COMP_RELATIONSHIP, id, result, SCORE_MINIMUM, Maturity.MINIMUM)

    if component.id == ctx.primary_id:
        result = ", ".join(ctx.primary_dependency_names)
        return Record.required_stmt(FsctKey.COMP_RELATIONSHIP, id, result, SCORE_MINIMUM, Maturity.MINIMUM)

    return Record.required_stmt(FsctKey.COMP_RELATIONSHIP, id, "", SCORE_ZERO, Maturity.NONE)


def component_license(component: Component, id: str) -> Record:
    licenses = component.licenses
    if not licenses:
        return Record.required_stmt(FsctKey.COMP_LICENSE, id, "", SCORE_ZERO, Maturity.NONE)

    result = ""
    for license in licenses:
        if license.short_id:
            result = license.short_id

    has_name = any(l.name for l in licenses)
    has_id = any(l.short_id for l in licenses)
    has_text = any(l.text for l in licenses)
    has_url = any(l.url.startswith("http") for l in licenses)
    has_spdx = any(l.source == "spdx" for l in licenses)

    if has_name and has_id and has_text and has_url and has_spdx:
        return Record.required_stmt(FsctKey.COMP_LICENSE, id, result, SCORE_ASPIRATIONAL, Maturity.ASPIRATIONAL)
    if has_name and has_id and (has_text or has_url):
        return Record.required_stmt(FsctKey.COMP_LICENSE, id, result, SCORE_RECOMMENDED, Maturity.RECOMMENDED)
    return Record.required_stmt(FsctKey.COMP_LICENSE, id, result, SCORE_MINIMUM, Maturity.MINIMUM)


def component_records(doc: Document, ctx: RunContext, component: Component) -> list[Record]:
    id = unique_element_id(component)
    copyright = describe_copyright(component.copyright)

    return [
        _minimum_if(FsctKey.COMP_NAME, id, component.name),
        _minimum_if(FsctKey.COMP_VERSION, id, component.version),
        _minimum_if(FsctKey.COMP_SUPPLIER, id, describe_supplier(component.supplier)),
        _minimum_if(FsctKey.COMP_UNIQ_ID, id, describe_unique_ids(component)),
        component_checksum(doc, component, id),
        component_relationship(doc, ctx, component, id),
        component_license(component, id),
        _minimum_if(FsctKey.COMP_COPYRIGHT, id, truncate(copyright, COPYRIGHT_LIMIT)),
    ]


def check_components(doc: Document, ctx: RunContext) -> list[Record]:
    records = []
    for component in doc.components:
        records.extend(component_records(doc, ctx, component))
    return records


class FsctStandard(Standard):
    """Framing Software Component Transparency v3."""

    name = "fsct"
    aliases = ("fsct-v3", "fsctv3")
    description = "Framing Software Component Transparency v3 (with maturity levels)"

    report_name = "Framing Software Component Transparency (v3)"
    subtitle = "NTIA Minimum Elements 3rd Edition"
    revision = "3rd Edition"

    document_label = SBOM_LEVEL
    key_enum = FsctKey

    def metadata(self) -> dict[int, SectionMeta]:
        return dict(SECTIONS)

    def checks(self) -> list[Check]:
        return [check_author, check_timestamp, check_type, check_primary_component, check_components]
