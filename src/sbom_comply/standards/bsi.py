"""BSI TR-03183-2 v1.1: Cyber Resilience Requirements, Part 2 (SBOM)."""

from __future__ import annotations

from enum import IntEnum

from sbom_comply.core.context import RunContext
from sbom_comply.core.standard import DOCUMENT_ID, Check, Standard
from sbom_comply.models.document import Component, Document, License
from sbom_comply.models.record import Record
from sbom_comply.models.section import SectionMeta
from sbom_comply.standards.common import organization_contact, sha256_content, unique_element_id

SCORE_FULL = 10.0
SCORE_PARTIAL = 5.0
SCORE_ZERO = 0.0

VALID_SPDX_VERSIONS = ("SPDX-2.3",)
VALID_CDX_VERSIONS = ("1.4", "1.5", "1.6")

COMPLIANT_LICENSE_SOURCES = ("spdx", "aboutcode")
CUSTOM_LICENSE_PREFIX = "LicenseRef-"


class BsiKey(IntEnum):
    """Check keys shared by both BSI revisions."""

    SBOM_SPEC = 1
    SBOM_SPEC_VERSION = 2
    SBOM_BUILD = 3
    SBOM_DEPTH = 4
    SBOM_CREATOR = 5
    SBOM_TIMESTAMP = 6
    SBOM_COMPONENTS = 7
    SBOM_URI = 8
    SBOM_VULNERABILITIES = 9
    SBOM_SIGNATURE = 10
    COMP_CREATOR = 20
    COMP_NAME = 21
    COMP_VERSION = 22
    COMP_DEPTH = 23
    COMP_LICENSE = 24
    COMP_HASH = 25
    COMP_SOURCE_CODE_URL = 26
    COMP_DOWNLOAD_URL = 27
    COMP_SOURCE_HASH = 28
    COMP_OTHER_UNIQ_IDS = 29


SECTIONS = {
    BsiKey.SBOM_SPEC: SectionMeta(title="SBOM formats", section_id="4", data_field="specification"),
    BsiKey.SBOM_SPEC_VERSION: SectionMeta(title="SBOM formats", section_id="4", data_field="specification version"),
    BsiKey.SBOM_BUILD: SectionMeta(title="Level of Detail", section_id="5.1", data_field="build process"),
    BsiKey.SBOM_DEPTH: SectionMeta(title="Level of Detail", section_id="5.1", data_field="depth"),
    BsiKey.SBOM_CREATOR: SectionMeta(title="Required fields sboms", section_id="5.2.1", data_field="creator of sbom"),
    BsiKey.SBOM_TIMESTAMP: SectionMeta(title="Required fields sboms", section_id="5.2.1", data_field="timestamp"),
    BsiKey.SBOM_COMPONENTS: SectionMeta(title="Required fields component", section_id="5.2.2", data_field="components"),
    BsiKey.SBOM_URI: SectionMeta(title="Additional fields sboms", section_id="5.3.1", data_field="SBOM-URI", required=False),
    BsiKey.COMP_CREATOR: SectionMeta(title="Required fields component", section_id="5.2.2", data_field="component creator"),
    BsiKey.COMP_NAME: SectionMeta(title="Required fields components", section_id="5.2.2", data_field="component name"),
    BsiKey.COMP_VERSION: SectionMeta(title="Required fields components", section_id="5.2.2", data_field="component version"),
    BsiKey.COMP_DEPTH: SectionMeta(title="Required fields components", section_id="5.2.2", data_field="Dependencies on other components"),
    BsiKey.COMP_LICENSE: SectionMeta(title="Required fields components", section_id="5.2.2", data_field="License"),
    BsiKey.COMP_HASH: SectionMeta(title="Required fields components", section_id="5.2.2", data_field="Hash value of the executable component"),
    BsiKey.COMP_SOURCE_CODE_URL: SectionMeta(title="Additional fields components", section_id="5.3.2", data_field="Source code URI", required=False),
    BsiKey.COMP_DOWNLOAD_URL: SectionMeta(title="Additional fields components", section_id="5.3.2", data_field="URI of the executable form of the component", required=False),
    BsiKey.COMP_SOURCE_HASH: SectionMeta(title="Additional fields components", section_id="5.3.2", data_field="Hash value of the source code of the component", required=False),
    BsiKey.COMP_OTHER_UNIQ_IDS: SectionMeta(title="Additional fields components", section_id="5.3.2", data_field="Other unique identifiers", required=False),
    BsiKey.SBOM_VULNERABILITIES: SectionMeta(title="Definition of SBOM", section_id="3.1", data_field="vuln"),
    BsiKey.SBOM_SIGNATURE: SectionMeta(title="Additional fields sboms", section_id="5.3.1", data_field="signature", required=False),
}


def _full_if(value: str) -> float:
    return SCORE_FULL if value else SCORE_ZERO


def check_spec(doc: Document, ctx: RunContext) -> Record:
    spec = doc.spec_type
    if spec in ("spdx", "cyclonedx"):
        return Record.required_stmt(BsiKey.SBOM_SPEC, DOCUMENT_ID, doc.spec.spec_type, SCORE_FULL)
    return Record.required_stmt(BsiKey.SBOM_SPEC, DOCUMENT_ID, "", SCORE_ZERO)


def check_spec_version(doc: Document, ctx: RunContext) -> Record:
    version = doc.spec.version
    valid = {"spdx": VALID_SPDX_VERSIONS, "cyclonedx": VALID_CDX_VERSIONS}.get(doc.spec_type, ())
    if version in valid:
        return Record.required_stmt(BsiKey.SBOM_SPEC_VERSION, DOCUMENT_ID, version, SCORE_FULL)
    return Record.required_stmt(BsiKey.SBOM_SPEC_VERSION, DOCUMENT_ID, "", SCORE_ZERO)


def check_build_phase(doc: Document, ctx: RunContext) -> Record:
    if "build" in doc.lifecycles:
        return Record.required_stmt(BsiKey.SBOM_BUILD, DOCUMENT_ID, "build", SCORE_FULL)
    return Record.required_stmt(BsiKey.SBOM_BUILD, DOCUMENT_ID, "", SCORE_ZERO)


def check_depth(doc: Document, ctx: RunContext) -> Record:
    total = len(ctx.primary_dependencies)
    score = SCORE_FULL if total > 0 else SCORE_ZERO
    return Record.required_stmt(BsiKey.SBOM_DEPTH, DOCUMENT_ID, f"doc has {total} dependencies", score)


def check_creator(doc: Document, ctx: RunContext) -> Record:
    """Author email first, then supplier contact, then manufacturer contact."""
    result = next((a.email for a in doc.authors if a.email), "")
    result = result or organization_contact(doc.supplier) or organization_contact(doc.manufacturer)
    return Record.required_stmt(BsiKey.SBOM_CREATOR, DOCUMENT_ID, result, _full_if(result))


def check_timestamp(doc: Document, ctx: RunContext) -> Record:
    result = doc.spec.creation_timestamp
    return Record.required_stmt(BsiKey.SBOM_TIMESTAMP, DOCUMENT_ID, result, _full_if(result))


def check_sbom_uri(doc: Document, ctx: RunContext) -> Record:
    uri = doc.spec.uri
    return Record.optional_stmt(BsiKey.SBOM_URI, DOCUMENT_ID, uri, _full_if(uri))


def _is_compliant_license(license: License) -> bool:
    if license.source in COMPLIANT_LICENSE_SOURCES:
        return True
    if license.source == "custom":
        return license.short_id.startswith(CUSTOM_LICENSE_PREFIX) or license.name.startswith(CUSTOM_LICENSE_PREFIX)
    return False


def component_license(component: Component, id: str) -> Record:
    if component.licenses and all(_is_compliant_license(l) for l in component.licenses):
        return Record.required_stmt(BsiKey.COMP_LICENSE, id, "compliant", SCORE_FULL)
    return Record.required_stmt(BsiKey.COMP_LICENSE, id, "not-compliant", SCORE_ZERO)


def component_depth(doc: Document, ctx: RunContext, component: Component, id: str) -> Record:
    """Dependencies score full only when their completeness is attested."""
    dependencies = doc.dependencies_of(component.id)
    if not dependencies:
        return Record.required_stmt(BsiKey.COMP_DEPTH, id, "no-relationships", SCORE_ZERO)

    score = SCORE_FULL if doc.composition_of(component.id) == "complete" else SCORE_PARTIAL
    return Record.required_stmt(BsiKey.COMP_DEPTH, id, ", ".join(ctx.names_of(dependencies)), score)


def component_other_unique_ids(component: Component, id: str) -> Record:
    result = ""
    if component.purls:
        result = component.purls[0]
    elif component.cpes:
        result = component.cpes[0]
    return Record.optional_stmt(BsiKey.COMP_OTHER_UNIQ_IDS, id, result, _full_if(result))


def component_records(doc: Document, ctx: RunContext, component: Component) -> list[Record]:
    """Every per-component record, in check order."""
    id = unique_element_id(component)
    creator = organization_contact(component.supplier) or organization_contact(component.manufacturer)
    digest = sha256_content(component.checksums)

    return [
        Record.required_stmt(BsiKey.COMP_CREATOR, id, creator, _full_if(creator)),
        Record.required_stmt(BsiKey.COMP_NAME, id, component.name, _full_if(component.name)),
        Record.required_stmt(BsiKey.COMP_VERSION, id, component.version, _full_if(component.version)),
        component_license(component, id),
        component_depth(doc, ctx, component, id),
        Record.required_stmt(BsiKey.COMP_HASH, id, digest, _full_if(digest)),
        Record.optional_stmt(BsiKey.COMP_SOURCE_CODE_URL, id, component.source_code_url, _full_if(component.source_code_url)),
        Record.optional_stmt(BsiKey.COMP_DOWNLOAD_URL, id, component.download_location, _full_if(component.download_location)),
        Record.optional_stmt(BsiKey.COMP_SOURCE_HASH, id, component.source_code_hash, _full_if(component.source_code_hash)),
        component_other_unique_ids(component, id),
    ]


def check_components(doc: Document, ctx: RunContext) -> list[Record]:
    if not doc.components:
        return [Record.required_stmt(BsiKey.SBOM_COMPONENTS, DOCUMENT_ID, "", SCORE_ZERO)]

    records = []
    for component in doc.components:
        records.extend(component_records(doc, ctx, component))
    records.append(Record.required_stmt(BsiKey.SBOM_COMPONENTS, DOCUMENT_ID, "present", SCORE_FULL))
    return records


class BsiStandard(Standard):
    """BSI TR-03183-2 v1.1."""

    name = "bsi"
    aliases = ("bsi-v1.1", "bsi-v1")
    description = "BSI TR-03183-2 v1.1"

    report_name = "BSI TR-03183-2 v1.1 Compliance Report"
    revision = "TR-03183-2 (1.1)"

    document_label = "SBOM"
    key_enum = BsiKey

    @property
    def check_keys(self) -> frozenset[int]:
        return frozenset(BsiKey) - {BsiKey.SBOM_VULNERABILITIES, BsiKey.SBOM_SIGNATURE}

    def metadata(self) -> dict[int, SectionMeta]:
        return {k: v for k, v in SECTIONS.items() if k in self.check_keys}

    def checks(self) -> list[Check]:
        return [
            check_spec,
            check_spec_version,
            check_build_phase,
            check_depth,
            check_creator,
            check_timestamp,
            check_sbom_uri,
            check_components,
        ]
