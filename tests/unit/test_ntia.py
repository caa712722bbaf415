"""Unit tests for the NTIA minimum elements standard."""

import pytest

from sbom_comply.core.context import RunContext
from sbom_comply.core.scoring import ScoreAggregator
from sbom_comply.models.document import Document, Organization, Spec
from sbom_comply.standards.ntia import (
    NtiaKey,
    NtiaStandard,
    check_creator,
    check_dependency,
    check_machine_format,
    check_timestamp,
)


def _result(store, key, id="doc"):
    records = store.by_check_key_and_id(key, id)
    assert len(records) == 1
    return records[0]


class TestNtiaDocumentChecks:
    """Tests for document-level NTIA checks."""

    def test_machine_format(self, spdx_document: Document):
        """Test a known spec and format."""
        record = check_machine_format(spdx_document, RunContext.from_document(spdx_document))
        assert record.check_value == "spdx, json"
        assert record.score == 10.0

    def test_machine_format_unknown(self):
        """Test an unknown serialization scores zero."""
        doc = Document(spec=Spec(spec_type="spdx", file_format="rdf"))
        record = check_machine_format(doc, RunContext.from_document(doc))
        assert record.check_value == "spdx, rdf"
        assert record.score == 0.0

    def test_creator_spdx_prefers_tool(self, spdx_document: Document):
        """Test that SPDX reports the tool before the author."""
        record = check_creator(spdx_document, RunContext.from_document(spdx_document))
        assert record.check_value == "syft"
        assert record.score == 10.0

    def test_creator_cyclonedx_prefers_author(self, cyclonedx_document: Document):
        """Test that CycloneDX reports the author email first."""
        record = check_creator(cyclonedx_document, RunContext.from_document(cyclonedx_document))
        assert record.check_value == "sam@web.example"

    def test_creator_cyclonedx_falls_back_to_supplier(self):
        """Test the supplier fallback when no author or tool is named."""
        doc = Document(spec=Spec(spec_type="cyclonedx"), supplier=Organization(url="https://acme.example"))
        record = check_creator(doc, RunContext.from_document(doc))
        assert record.check_value == "https://acme.example"
        assert record.score == 10.0

    def test_creator_missing(self, empty_document: Document):
        """Test that a document without creators scores zero."""
        record = check_creator(empty_document, RunContext.from_document(empty_document))
        assert record.check_value == ""
        assert record.score == 0.0

    def test_timestamp(self, spdx_document: Document):
        """Test a valid timestamp."""
        record = check_timestamp(spdx_document, RunContext.from_document(spdx_document))
        assert record.score == 10.0

    def test_timestamp_invalid(self):
        """Test that the raw value is reported even when invalid."""
        doc = Document(spec=Spec(creation_timestamp="yesterday"))
        record = check_timestamp(doc, RunContext.from_document(doc))
        assert record.check_value == "yesterday"
        assert record.score == 0.0

    def test_dependency(self, spdx_document: Document):
        """Test the primary component dependency count."""
        record = check_dependency(spdx_document, RunContext.from_document(spdx_document))
        assert record.check_value == "doc has 1 dependencies"
        assert record.score == 10.0

    def test_dependency_without_primary(self, empty_document: Document):
        """Test that no primary component means no dependencies."""
        record = check_dependency(empty_document, RunContext.from_document(empty_document))
        assert record.check_value == "doc has 0 dependencies"
        assert record.score == 0.0


class TestNtiaStandard:
    """Tests for evaluating whole documents against NTIA."""

    def test_metadata_complete(self):
        """Test that every key has report metadata."""
        assert NtiaStandard().missing_metadata() == []

    def test_spdx_components(self, spdx_document: Document):
        """Test component records of an SPDX document."""
        store = NtiaStandard().evaluate(spdx_document)

        assert store.all_ids() == {"doc", "app-1.0.0", "lib-2.1.0"}
        assert _result(store, NtiaKey.COMP_CREATOR, "app-1.0.0").check_value == "oss@example.com"
        assert _result(store, NtiaKey.COMP_CREATOR, "lib-2.1.0").check_value == "https://lib.example.org"
        assert _result(store, NtiaKey.COMP_DEPTH, "app-1.0.0").check_value == "lib"

        unique_ids = _result(store, NtiaKey.COMP_OTHER_UNIQ_IDS, "lib-2.1.0")
        assert unique_ids.check_value == "purl:(1/2)"
        assert unique_ids.score == pytest.approx(5.0)
        assert unique_ids.required is True

        depth = _result(store, NtiaKey.COMP_DEPTH, "lib-2.1.0")
        assert depth.check_value == "no-relationships"
        assert depth.score == 0.0

    def test_spdx_document_score(self, spdx_document: Document):
        """Test the pooled score over all elements."""
        store = NtiaStandard().evaluate(spdx_document)
        # doc 4 x 10, app 5 x 10, lib 10 + 10 + 10 + 5 + 0
        assert ScoreAggregator(store).score_of_document() == pytest.approx(125.0 / 14)

    def test_cyclonedx_components(self, cyclonedx_document: Document):
        """Test CycloneDX suppliers, manufacturers and optional ids."""
        store = NtiaStandard().evaluate(cyclonedx_document)

        assert _result(store, NtiaKey.COMP_CREATOR, "web-3.0.0").check_value == "ops@web.example"
        assert _result(store, NtiaKey.COMP_CREATOR, "left-pad-1.3.0").check_value == "maintainer@left-pad.example"

        unique_ids = _result(store, NtiaKey.COMP_OTHER_UNIQ_IDS, "left-pad-1.3.0")
        assert unique_ids.check_value.startswith("cpe:2.3:a:left-pad")
        assert unique_ids.required is False

    def test_no_components(self, empty_document: Document):
        """Test the document-level components record of an empty document."""
        store = NtiaStandard().evaluate(empty_document)

        assert store.all_ids() == {"doc"}
        record = _result(store, NtiaKey.SBOM_COMPONENTS)
        assert record.check_value == "absent"
        assert record.score == 0.0
