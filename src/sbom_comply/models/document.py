"""SBOM document object model.

These models describe an SBOM that has already been parsed from its native
format (SPDX or CycloneDX). Checks only ever read from them.
"""

from pydantic import BaseModel, Field

DEPENDENCY_RELATIONSHIPS = frozenset({"DEPENDS_ON", "CONTAINS"})


class License(BaseModel):
    """A license attached to a document or component."""

    model_config = {"frozen": True}

    name: str = Field(default="", description="Full license name")
    short_id: str = Field(default="", description="SPDX short identifier or LicenseRef")
    source: str = Field(default="", description="License list the id comes from (spdx, aboutcode, custom)")
    url: str = Field(default="", description="Location of the license text")
    text: str = Field(default="", description="Embedded license text")


class Spec(BaseModel):
    """Specification-level metadata of the document."""

    model_config = {"frozen": True}

    spec_type: str = Field(default="", description="spdx or cyclonedx")
    version: str = Field(default="", description="Specification version, e.g. SPDX-2.3 or 1.5")
    file_format: str = Field(default="", description="Serialization format, e.g. json or tag-value")
    name: str = Field(default="", description="Document name")
    creation_timestamp: str = Field(default="", description="Creation timestamp as written")
    licenses: list[License] = Field(default_factory=list, description="Data licenses")
    namespace: str = Field(default="", description="Document namespace")
    uri: str = Field(default="", description="Document URI")
    organization: str = Field(default="", description="Creator organization")
    comment: str = Field(default="", description="Creator comment")
    spdx_id: str = Field(default="", description="Document SPDXID")


class Author(BaseModel):
    """A person or organization that authored the document."""

    model_config = {"frozen": True}

    name: str = ""
    email: str = ""
    phone: str = ""
    type: str = Field(default="person", description="person or organization")


class Tool(BaseModel):
    """A tool used to generate the document."""

    model_config = {"frozen": True}

    name: str = ""
    version: str = ""


class Contact(BaseModel):
    """A contact of a supplier or manufacturer."""

    model_config = {"frozen": True}

    name: str = ""
    email: str = ""
    phone: str = ""


class Organization(BaseModel):
    """A supplier or manufacturer."""

    model_config = {"frozen": True}

    name: str = ""
    email: str = ""
    url: str = ""
    contacts: list[Contact] = Field(default_factory=list)

    @property
    def is_present(self) -> bool:
        return bool(self.name or self.email or self.url or self.contacts)


class Checksum(BaseModel):
    """A checksum of a component."""

    model_config = {"frozen": True}

    algorithm: str
    content: str = ""


class ExternalReference(BaseModel):
    """An external reference of a component."""

    model_config = {"frozen": True}

    ref_type: str
    locator: str = ""


class Swid(BaseModel):
    """A software identification tag."""

    model_config = {"frozen": True}

    tag_id: str = ""
    name: str = ""


class Component(BaseModel):
    """A component (package) described by the document."""

    model_config = {"frozen": True}

    # Identity
    id: str = Field(description="Identifier used in relationships")
    spdx_id: str = Field(default="", description="SPDXID for SPDX documents")
    name: str = ""
    version: str = ""
    is_primary: bool = Field(default=False, description="Whether this is the described component")

    # Identifiers
    purls: list[str] = Field(default_factory=list)
    cpes: list[str] = Field(default_factory=list)
    omnibor_ids: list[str] = Field(default_factory=list)
    swhids: list[str] = Field(default_factory=list)
    swids: list[Swid] = Field(default_factory=list)
    external_references: list[ExternalReference] = Field(default_factory=list)

    # Provenance
    supplier: Organization | None = None
    manufacturer: Organization | None = None
    checksums: list[Checksum] = Field(default_factory=list)
    source_code_url: str = ""
    download_location: str = ""
    source_code_hash: str = ""
    file_analyzed: bool = False

    # Licensing
    licenses: list[License] = Field(default_factory=list)
    license_declared: str = ""
    license_concluded: str = ""
    copyright: str = ""


class Relationship(BaseModel):
    """A directed relationship between two elements."""

    model_config = {"frozen": True}

    from_id: str
    to_id: str
    type: str = "DEPENDS_ON"


class Composition(BaseModel):
    """An aggregate-completeness declaration."""

    model_config = {"frozen": True}

    aggregate: str = Field(default="unknown", description="complete, incomplete, unknown, ...")
    dependencies: list[str] = Field(
        default_factory=list,
        description="Elements whose dependency lists the declaration covers",
    )


class Vulnerability(BaseModel):
    """A vulnerability embedded in the document."""

    model_config = {"frozen": True}

    id: str = ""


class Signature(BaseModel):
    """An enveloped document signature. It is reported, never verified."""

    model_config = {"frozen": True}

    algorithm: str = ""
    value: str = ""
    public_key: str = ""

    @property
    def is_present(self) -> bool:
        return bool(self.value)


class Document(BaseModel):
    """A parsed SBOM document."""

    model_config = {"frozen": True}

    spec: Spec = Field(default_factory=Spec)
    components: list[Component] = Field(default_factory=list)
    relationships: list[Relationship] = Field(default_factory=list)
    authors: list[Author] = Field(default_factory=list)
    tools: list[Tool] = Field(default_factory=list)
    supplier: Organization | None = None
    manufacturer: Organization | None = None
    lifecycles: list[str] = Field(default_factory=list)
    primary_component_id: str | None = None
    vulnerabilities: list[Vulnerability] = Field(default_factory=list)
    signature: Signature | None = None
    compositions: list[Composition] = Field(default_factory=list)

    @property
    def spec_type(self) -> str:
        return self.spec.spec_type.strip().lower()

    def primary_component(self) -> Component | None:
        """Get the component the document describes, if declared."""
        for component in self.components:
            if self.primary_component_id and component.id == self.primary_component_id:
                return component
        for component in self.components:
            if component.is_primary:
                return component
        return None

    def is_primary(self, component: Component) -> bool:
        primary = self.primary_component()
        return primary is not None and primary.id == component.id

    def dependencies_of(self, element_id: str) -> list[str]:
        """Get the ids an element depends on, in declaration order."""
        return [
            r.to_id
            for r in self.relationships
            if r.from_id == element_id and r.type.upper() in DEPENDENCY_RELATIONSHIPS
        ]

    def primary_dependencies(self) -> list[str]:
        """Get the direct dependencies of the primary component."""
        primary = self.primary_component()
        if primary is None:
            return []
        return self.dependencies_of(primary.id)

    def composition_of(self, element_id: str) -> str:
        """Get the declared aggregate completeness of an element's dependencies."""
        for composition in self.compositions:
            if element_id in composition.dependencies:
                return composition.aggregate
        return ""
