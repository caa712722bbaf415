"""Shared test fixtures for sbom-comply tests."""

import logging

import pytest

from sbom_comply.core.store import RecordStore
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
    Spec,
    Tool,
)
from sbom_comply.models.record import Record
from sbom_comply.utils.config import set_config


@pytest.fixture(autouse=True)
def reset_config():
    """Keep the global config from leaking between tests."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo CLI logging setup so caplog sees package records."""
    yield
    logger = logging.getLogger("sbom_comply")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def spdx_document() -> Document:
    """An SPDX 2.3 JSON document with a primary package and one dependency."""
    return Document(
        spec=Spec(
            spec_type="spdx",
            version="SPDX-2.3",
            file_format="json",
            name="example-app-sbom",
            creation_timestamp="2024-01-15T12:00:00Z",
            licenses=[License(name="CC0-1.0", short_id="CC0-1.0", source="spdx")],
            namespace="https://example.com/spdx/example-app-1.0.0",
            organization="Example Corp",
            comment="Generated in CI",
            spdx_id="SPDXRef-DOCUMENT",
        ),
        components=[
            Component(
                id="SPDXRef-app",
                spdx_id="SPDXRef-app",
                name="app",
                version="1.0.0",
                is_primary=True,
                purls=["pkg:generic/app@1.0.0"],
                external_references=[ExternalReference(ref_type="purl", locator="pkg:generic/app@1.0.0")],
                supplier=Organization(name="Example Corp", email="oss@example.com"),
                checksums=[Checksum(algorithm="SHA256", content="a1b2c3")],
                download_location="https://example.com/app-1.0.0.tgz",
                file_analyzed=True,
                licenses=[License(name="MIT License", short_id="MIT", source="spdx")],
                license_declared="MIT",
                license_concluded="MIT",
                copyright="Copyright 2024 Example Corp",
            ),
            Component(
                id="SPDXRef-lib",
                spdx_id="SPDXRef-lib",
                name="lib",
                version="2.1.0",
                external_references=[
                    ExternalReference(ref_type="purl", locator="pkg:pypi/lib@2.1.0"),
                    ExternalReference(ref_type="cpe23Type", locator="cpe:2.3:a:lib:lib:2.1.0:*:*:*:*:*:*:*"),
                ],
                supplier=Organization(url="https://lib.example.org"),
                checksums=[Checksum(algorithm="SHA1", content="d4e5f6")],
                licenses=[License(name="Custom", short_id="Custom-1", source="custom")],
                license_declared="NOASSERTION",
                license_concluded="NONE",
                copyright="NOASSERTION",
            ),
        ],
        relationships=[
            Relationship(from_id="SPDXRef-DOCUMENT", to_id="SPDXRef-app", type="DESCRIBES"),
            Relationship(from_id="SPDXRef-app", to_id="SPDXRef-lib", type="DEPENDS_ON"),
        ],
        authors=[Author(name="Jane Doe", email="jane@example.com")],
        tools=[Tool(name="syft", version="1.0.0")],
        primary_component_id="SPDXRef-app",
    )


@pytest.fixture
def cyclonedx_document() -> Document:
    """A CycloneDX 1.5 JSON document with a complete dependency graph."""
    return Document(
        spec=Spec(
            spec_type="cyclonedx",
            version="1.5",
            file_format="json",
            creation_timestamp="2024-03-01T08:30:00+01:00",
            uri="urn:uuid:3e671687-395b-41f5-a30f-a58921a69b79",
        ),
        components=[
            Component(
                id="pkg:npm/web@3.0.0",
                name="web",
                version="3.0.0",
                is_primary=True,
                purls=["pkg:npm/web@3.0.0"],
                supplier=Organization(name="Web Team", contacts=[Contact(name="Ops", email="ops@web.example")]),
                checksums=[Checksum(algorithm="SHA-256", content="0f0f0f")],
                source_code_url="https://git.example.com/web",
                licenses=[License(name="Apache License 2.0", short_id="Apache-2.0", source="spdx")],
                copyright="Copyright Web Team",
            ),
            Component(
                id="pkg:npm/left-pad@1.3.0",
                name="left-pad",
                version="1.3.0",
                cpes=["cpe:2.3:a:left-pad:left-pad:1.3.0:*:*:*:*:*:*:*"],
                manufacturer=Organization(email="maintainer@left-pad.example"),
                licenses=[License(name="WTFPL", short_id="WTFPL", source="aboutcode")],
            ),
        ],
        relationships=[
            Relationship(from_id="pkg:npm/web@3.0.0", to_id="pkg:npm/left-pad@1.3.0"),
        ],
        authors=[Author(name="Sam Smith", email="sam@web.example")],
        tools=[Tool(name="cdxgen", version="10.2.1")],
        lifecycles=["build"],
        primary_component_id="pkg:npm/web@3.0.0",
        compositions=[Composition(aggregate="complete", dependencies=["pkg:npm/web@3.0.0"])],
    )


@pytest.fixture
def empty_document() -> Document:
    """An SPDX document without components."""
    return Document(
        spec=Spec(
            spec_type="spdx",
            version="SPDX-2.3",
            file_format="json",
            creation_timestamp="2024-01-15T12:00:00Z",
        ),
    )


@pytest.fixture
def sample_store() -> RecordStore:
    """A store with a document element and two component elements."""
    store = RecordStore()
    store.add_all(
        [
            Record.required_stmt(1, "doc", "spdx, json", 10.0),
            Record.required_stmt(2, "doc", "", 0.0),
            Record.required_stmt(10, "a", "a", 10.0),
            Record.optional_stmt(11, "a", "", 0.0),
            Record.required_stmt(10, "b", "b", 10.0),
        ]
    )
    return store
