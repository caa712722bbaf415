"""Build ordered report sections from a run's records."""

from __future__ import annotations

import re
from collections import defaultdict
from typing import TYPE_CHECKING

from sbom_comply.core.scoring import ScoreAggregator
from sbom_comply.core.store import RecordStore
from sbom_comply.models.section import Section
from sbom_comply.utils.errors import MissingSectionMetadataError
from sbom_comply.utils.logging import get_logger

if TYPE_CHECKING:
    from sbom_comply.core.standard import Standard

logger = get_logger("sections")

_NUMBER = re.compile(r"(\d+)")


def natural_key(value: str) -> tuple:
    """Sort key that compares digit runs numerically.

    "3.1.2" sorts before "3.1.10", "2.4" before "2.10".
    """
    parts = []
    for chunk in _NUMBER.split(value):
        if not chunk:
            continue
        if chunk.isdigit():
            parts.append((0, int(chunk), ""))
        else:
            parts.append((1, 0, chunk))
    return tuple(parts)


def _section_order(section: Section) -> tuple:
    return (natural_key(section.section_id), section.check_key, section.element_result)


class SectionBuilder:
    """Merge records with a standard's metadata into report sections.

    The output order depends only on the records' contents: the document
    group comes first, remaining groups follow ordered by label, and within
    a group sections are ordered by clause id, check key and result.
    """

    def __init__(self, store: RecordStore, standard: "Standard") -> None:
        self._store = store
        self._standard = standard
        self._aggregator = ScoreAggregator(store)

    def build(self) -> list[Section]:
        """Build every section.

        Raises:
            MissingSectionMetadataError: If a record's key has no metadata
        """
        metadata = self._standard.metadata()
        missing = sorted(
            {r.check_key for r in self._store if r.check_key not in metadata}
        )
        if missing:
            raise MissingSectionMetadataError(self._standard.name, missing)

        groups: dict[str, list[Section]] = defaultdict(list)
        for id in sorted(self._store.all_ids()):
            label = self._standard.element_label(id)
            for record in self._store.by_id(id):
                meta = metadata[record.check_key]
                groups[label].append(
                    Section(
                        section_title=meta.title,
                        section_id=meta.section_id,
                        section_data_field=meta.data_field,
                        required=meta.required,
                        element_id=label,
                        element_result=record.check_value,
                        score=self._aggregator.score_of_attribute(record.check_key, id),
                        maturity=record.maturity,
                        check_key=record.check_key,
                    )
                )

        document_label = self._standard.document_label
        labels = sorted(l for l in groups if l != document_label)
        if document_label in groups:
            labels.insert(0, document_label)

        sections: list[Section] = []
        for label in labels:
            sections.extend(sorted(groups[label], key=_section_order))

        logger.debug(f"Built {len(sections)} sections in {len(labels)} groups")
        return sections
