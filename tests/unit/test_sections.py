"""Unit tests for the SectionBuilder."""

from enum import IntEnum

import pytest

from sbom_comply.core.sections import SectionBuilder, natural_key
from sbom_comply.core.standard import Standard
from sbom_comply.core.store import RecordStore
from sbom_comply.models.record import Maturity, Record
from sbom_comply.models.section import SectionMeta
from sbom_comply.utils.errors import MissingSectionMetadataError


class DemoKey(IntEnum):
    FORMAT = 1
    AUTHOR = 2
    NAME = 3
    VERSION = 4
    LATE_CLAUSE = 5


class DemoStandard(Standard):
    name = "demo"
    report_name = "Demo Report"
    document_label = "SBOM Data Fields"
    key_enum = DemoKey

    def __init__(self, sections: dict[int, SectionMeta] | None = None):
        self._sections = sections if sections is not None else {
            DemoKey.FORMAT: SectionMeta(title="Automation", section_id="1.1", data_field="format"),
            DemoKey.AUTHOR: SectionMeta(title="Required", section_id="2.1", data_field="author"),
            DemoKey.NAME: SectionMeta(title="Components", section_id="2.4", data_field="name"),
            DemoKey.VERSION: SectionMeta(title="Components", section_id="2.7", data_field="version", required=False),
            DemoKey.LATE_CLAUSE: SectionMeta(title="Required", section_id="2.10", data_field="late"),
        }

    def metadata(self):
        return dict(self._sections)

    def checks(self):
        return []


@pytest.fixture
def demo_store() -> RecordStore:
    store = RecordStore()
    store.add_all(
        [
            Record.required_stmt(DemoKey.VERSION, "zlib-1.3", "1.3", 10.0),
            Record.required_stmt(DemoKey.NAME, "zlib-1.3", "zlib", 10.0),
            Record.required_stmt(DemoKey.LATE_CLAUSE, "doc", "late", 0.0),
            Record.required_stmt(DemoKey.AUTHOR, "doc", "jane@example.com", 10.0),
            Record.required_stmt(DemoKey.FORMAT, "doc", "spdx, json", 10.0),
            Record.required_stmt(DemoKey.NAME, "app-1.0", "app", 10.0, Maturity.MINIMUM),
        ]
    )
    return store


class TestNaturalKey:
    """Tests for numeric-aware clause ordering."""

    def test_numeric_components(self):
        """Test that digit runs compare as numbers."""
        ids = ["3.1.10", "3.1.2", "3.1.1", "2.10", "2.9"]
        assert sorted(ids, key=natural_key) == ["2.9", "2.10", "3.1.1", "3.1.2", "3.1.10"]

    def test_prefix_sorts_first(self):
        """Test that a shorter clause sorts before its children."""
        assert sorted(["5.2.1", "5"], key=natural_key) == ["5", "5.2.1"]


class TestSectionBuilder:
    """Tests for building ordered report sections."""

    def test_document_group_first(self, demo_store: RecordStore):
        """Test the group order: document, then labels sorted."""
        sections = SectionBuilder(demo_store, DemoStandard()).build()
        order = list(dict.fromkeys(s.element_id for s in sections))
        assert order == ["SBOM Data Fields", "app-1.0", "zlib-1.3"]

    def test_sorted_by_clause_within_group(self, demo_store: RecordStore):
        """Test that 2.10 comes after 2.1 within the document group."""
        sections = SectionBuilder(demo_store, DemoStandard()).build()
        doc_ids = [s.section_id for s in sections if s.element_id == "SBOM Data Fields"]
        assert doc_ids == ["1.1", "2.1", "2.10"]

        zlib_ids = [s.section_id for s in sections if s.element_id == "zlib-1.3"]
        assert zlib_ids == ["2.4", "2.7"]

    def test_metadata_merged(self, demo_store: RecordStore):
        """Test that sections carry metadata, result, score and maturity."""
        sections = SectionBuilder(demo_store, DemoStandard()).build()
        app = next(s for s in sections if s.element_id == "app-1.0")

        assert app.section_title == "Components"
        assert app.section_data_field == "name"
        assert app.element_result == "app"
        assert app.score == 10.0
        assert app.maturity == Maturity.MINIMUM
        assert app.check_key == DemoKey.NAME

        version = next(s for s in sections if s.section_id == "2.7")
        assert version.required is False

    def test_deterministic(self, demo_store: RecordStore):
        """Test that repeated builds give identical output."""
        builder = SectionBuilder(demo_store, DemoStandard())
        first = builder.build()
        second = builder.build()

        assert first == second
        assert {s.model_dump_json() for s in first} == {s.model_dump_json() for s in second}

    def test_insertion_order_does_not_matter(self, demo_store: RecordStore):
        """Test that a store filled in reverse builds the same sections."""
        reversed_store = RecordStore()
        reversed_store.add_all(reversed(list(demo_store)))

        assert SectionBuilder(reversed_store, DemoStandard()).build() == SectionBuilder(
            demo_store, DemoStandard()
        ).build()

    def test_ties_broken_by_key_then_result(self):
        """Test ordering of records sharing a clause id."""
        standard = DemoStandard(
            {
                DemoKey.FORMAT: SectionMeta(title="Formats", section_id="4", data_field="spec"),
                DemoKey.AUTHOR: SectionMeta(title="Formats", section_id="4", data_field="version"),
            }
        )
        store = RecordStore()
        store.add_all(
            [
                Record.required_stmt(DemoKey.AUTHOR, "doc", "b", 10.0),
                Record.required_stmt(DemoKey.AUTHOR, "doc", "a", 10.0),
                Record.required_stmt(DemoKey.FORMAT, "doc", "z", 10.0),
            ]
        )
        sections = SectionBuilder(store, standard).build()
        assert [s.element_result for s in sections] == ["z", "a", "b"]

    def test_attribute_score_used(self):
        """Test that every section of an attribute shows the attribute score."""
        store = RecordStore()
        store.add_all(
            [
                Record.required_stmt(DemoKey.NAME, "doc", "one", 10.0),
                Record.required_stmt(DemoKey.NAME, "doc", "two", 0.0),
            ]
        )
        sections = SectionBuilder(store, DemoStandard()).build()
        assert [s.score for s in sections] == [5.0, 5.0]

    def test_missing_metadata_raises(self, demo_store: RecordStore):
        """Test that an unmapped key fails instead of rendering a blank row."""
        standard = DemoStandard(
            {DemoKey.FORMAT: SectionMeta(title="Automation", section_id="1.1", data_field="format")}
        )
        with pytest.raises(MissingSectionMetadataError) as exc_info:
            SectionBuilder(demo_store, standard).build()

        assert exc_info.value.code == "MISSING_METADATA"
        assert exc_info.value.details["check_keys"] == [2, 3, 4, 5]

    def test_empty_store(self):
        """Test that an empty store builds no sections."""
        assert SectionBuilder(RecordStore(), DemoStandard()).build() == []
