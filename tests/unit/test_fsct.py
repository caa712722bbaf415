"""Unit tests for the FSCT v3 standard."""

from sbom_comply.core.context import RunContext
from sbom_comply.models.document import Author, Component, Document, License, Relationship, Tool
from sbom_comply.models.record import Maturity
from sbom_comply.standards.fsct import FsctKey, FsctStandard, check_author, component_license


def _result(store, key, id="doc"):
    records = store.by_check_key_and_id(key, id)
    assert len(records) == 1
    return records[0]


class TestFsctAuthor:
    """Tests for author maturity."""

    def test_authors_and_tools_recommended(self, spdx_document: Document):
        """Test that person authors plus tools are recommended."""
        record = check_author(spdx_document, RunContext.from_document(spdx_document))
        assert record.check_value == "Jane Doe (jane@example.com), syft-1.0.0"
        assert record.score == 12.0
        assert record.maturity == Maturity.RECOMMENDED

    def test_authors_only_minimum(self):
        """Test that person authors alone are the minimum."""
        doc = Document(authors=[Author(name="Jane")])
        record = check_author(doc, RunContext.from_document(doc))
        assert record.score == 10.0
        assert record.maturity == Maturity.MINIMUM

    def test_tools_only_none(self):
        """Test that tools without a person author score zero."""
        doc = Document(
            authors=[Author(name="Acme", type="organization")],
            tools=[Tool(name="syft", version="1.0.0")],
        )
        record = check_author(doc, RunContext.from_document(doc))
        assert record.check_value == "syft-1.0.0"
        assert record.score == 0.0
        assert record.maturity == Maturity.NONE


class TestFsctLicense:
    """Tests for license maturity."""

    def test_aspirational(self):
        """Test a fully described SPDX license."""
        license = License(
            name="MIT License",
            short_id="MIT",
            source="spdx",
            text="Permission is hereby granted...",
            url="https://opensource.org/licenses/MIT",
        )
        record = component_license(Component(id="c", licenses=[license]), "c")
        assert record.score == 15.0
        assert record.maturity == Maturity.ASPIRATIONAL

    def test_recommended_with_url(self):
        """Test a named license with a text location."""
        license = License(name="Apache License 2.0", short_id="Apache-2.0", url="https://apache.org/licenses")
        record = component_license(Component(id="c", licenses=[license]), "c")
        assert record.score == 12.0

    def test_result_is_last_short_id(self):
        """Test the reported identifier when several licenses are present."""
        licenses = [License(short_id="MIT"), License(name="Custom"), License(short_id="BSD-3-Clause")]
        record = component_license(Component(id="c", licenses=licenses), "c")
        assert record.check_value == "BSD-3-Clause"
        assert record.score == 10.0

    def test_no_license(self):
        """Test that a component without licenses scores zero."""
        record = component_license(Component(id="c"), "c")
        assert record.score == 0.0
        assert record.maturity == Maturity.NONE


class TestFsctStandard:
    """Tests for evaluating whole documents against FSCT."""

    def test_metadata_complete(self):
        """Test that every key has report metadata."""
        assert FsctStandard().missing_metadata() == []

    def test_every_record_has_maturity(self, spdx_document: Document):
        """Test that FSCT always attaches a maturity label."""
        store = FsctStandard().evaluate(spdx_document)
        assert all(r.maturity is not None for r in store)

    def test_type_is_optional(self, spdx_document: Document, cyclonedx_document: Document):
        """Test the SBOM type record."""
        record = _result(FsctStandard().evaluate(spdx_document), FsctKey.SBOM_TYPE)
        assert record.required is False
        assert record.score == 0.0

        record = _result(FsctStandard().evaluate(cyclonedx_document), FsctKey.SBOM_TYPE)
        assert record.check_value == "build"
        assert record.score == 15.0

    def test_checksums(self, spdx_document: Document):
        """Test that a strong primary checksum is recommended."""
        store = FsctStandard().evaluate(spdx_document)

        app = _result(store, FsctKey.COMP_CHECKSUM, "app-1.0.0")
        assert app.check_value == "SHA256"
        assert app.score == 12.0

        lib = _result(store, FsctKey.COMP_CHECKSUM, "lib-2.1.0")
        assert lib.check_value == "SHA1"
        assert lib.maturity == Maturity.MINIMUM

    def test_relationships(self, spdx_document: Document):
        """Test primary and direct dependency relationships."""
        store = FsctStandard().evaluate(spdx_document)

        app = _result(store, FsctKey.COMP_RELATIONSHIP, "app-1.0.0")
        assert app.check_value == "lib"
        assert app.score == 10.0

        lib = _result(store, FsctKey.COMP_RELATIONSHIP, "lib-2.1.0")
        assert lib.check_value == ""
        assert lib.score == 10.0

    def test_relationships_need_declared_dependencies(self, spdx_document: Document):
        """Test that an undeclared dependency zeroes every relationship."""
        document = spdx_document.model_copy(
            update={
                "relationships": [
                    Relationship(from_id="SPDXRef-app", to_id="SPDXRef-lib"),
                    Relationship(from_id="SPDXRef-app", to_id="SPDXRef-ghost"),
                ]
            }
        )
        store = FsctStandard().evaluate(document)
        assert all(r.score == 0.0 for r in store.by_check_key(FsctKey.COMP_RELATIONSHIP))

    def test_supplier_and_copyright(self, spdx_document: Document):
        """Test supplier description and placeholder copyright."""
        store = FsctStandard().evaluate(spdx_document)

        assert _result(store, FsctKey.COMP_SUPPLIER, "app-1.0.0").check_value == "Example Corp, oss@example.com"
        assert _result(store, FsctKey.COMP_COPYRIGHT, "lib-2.1.0").score == 0.0

    def test_long_copyright_truncated(self):
        """Test that copyright text is cut at fifty characters."""
        doc = Document(components=[Component(id="c", name="c", version="1", copyright="x" * 80)])
        store = FsctStandard().evaluate(doc)
        assert _result(store, FsctKey.COMP_COPYRIGHT, "c-1").check_value == "x" * 50 + "..."

    def test_no_components(self, empty_document: Document):
        """Test that only document records exist without components."""
        assert FsctStandard().evaluate(empty_document).all_ids() == {"doc"}
