"""Unit tests for the document and report models."""

import pytest
from pydantic import ValidationError

from sbom_comply.models.document import Component, Document, Relationship, Signature, Spec
from sbom_comply.models.report import ComplianceReport, RunInfo
from sbom_comply.models.section import Section


def make_section(element_id: str, section_id: str, maturity=None) -> Section:
    return Section(
        section_title="t",
        section_id=section_id,
        section_data_field="f",
        required=True,
        element_id=element_id,
        element_result="",
        score=0.0,
        maturity=maturity,
    )


class TestDocument:
    """Tests for Document accessors."""

    def test_spec_type_normalized(self):
        """Test that the spec type is trimmed and lowercased."""
        assert Document(spec=Spec(spec_type=" SPDX ")).spec_type == "spdx"

    def test_primary_component_by_id(self, spdx_document: Document):
        """Test lookup through primary_component_id."""
        assert spdx_document.primary_component().name == "app"
        assert spdx_document.is_primary(spdx_document.components[0])
        assert not spdx_document.is_primary(spdx_document.components[1])

    def test_primary_component_by_flag(self):
        """Test the is_primary fallback when no id is declared."""
        doc = Document(components=[Component(id="a"), Component(id="b", is_primary=True)])
        assert doc.primary_component().id == "b"

    def test_no_primary_component(self, empty_document: Document):
        """Test documents without a described component."""
        assert empty_document.primary_component() is None
        assert empty_document.primary_dependencies() == []

    def test_dependencies_of(self):
        """Test that only dependency relationships count."""
        doc = Document(
            components=[Component(id="a", is_primary=True)],
            relationships=[
                Relationship(from_id="a", to_id="b"),
                Relationship(from_id="a", to_id="c", type="contains"),
                Relationship(from_id="a", to_id="d", type="DESCRIBES"),
                Relationship(from_id="b", to_id="e"),
            ],
        )
        assert doc.dependencies_of("a") == ["b", "c"]
        assert doc.primary_dependencies() == ["b", "c"]

    def test_composition_of(self, cyclonedx_document: Document):
        """Test declared completeness lookup."""
        assert cyclonedx_document.composition_of("pkg:npm/web@3.0.0") == "complete"
        assert cyclonedx_document.composition_of("pkg:npm/left-pad@1.3.0") == ""

    def test_frozen(self, spdx_document: Document):
        """Test that documents are immutable."""
        with pytest.raises(ValidationError):
            spdx_document.primary_component_id = "other"

    def test_signature_presence(self):
        """Test that a signature needs a value."""
        assert Signature(algorithm="ES256", value="abc").is_present
        assert not Signature(algorithm="ES256").is_present


class TestComplianceReport:
    """Tests for ComplianceReport helpers."""

    def test_element_ids_in_order(self):
        """Test that element labels keep report order."""
        report = ComplianceReport(
            report_name="r",
            sections=[make_section("doc", "1"), make_section("a", "2"), make_section("doc", "3")],
        )
        assert report.element_ids == ["doc", "a"]
        assert [s.section_id for s in report.sections_for("doc")] == ["1", "3"]

    def test_has_maturity(self):
        """Test maturity detection."""
        assert not ComplianceReport(report_name="r", sections=[make_section("a", "1")]).has_maturity
        assert ComplianceReport(
            report_name="r", sections=[make_section("a", "1", maturity="Minimum")]
        ).has_maturity

    def test_file_name_and_run_ids(self):
        """Test the file name shortcut and generated run ids."""
        report = ComplianceReport(report_name="r", run=RunInfo(file_name="sbom.json"))
        assert report.file_name == "sbom.json"
        assert RunInfo().id != RunInfo().id

    def test_standard_not_serialized(self):
        """Test that the registry name stays out of the JSON report."""
        report = ComplianceReport(report_name="r", standard="ntia")
        assert "standard" not in report.model_dump()
