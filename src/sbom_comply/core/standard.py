"""Base class for compliance standards."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable, ClassVar, Iterable, Union

from sbom_comply.core.context import RunContext
from sbom_comply.core.store import RecordStore
from sbom_comply.models.document import Document
from sbom_comply.models.record import Record
from sbom_comply.models.section import SectionMeta
from sbom_comply.utils.logging import get_logger

logger = get_logger("standard")

DOCUMENT_ID = "doc"

CheckResult = Union[Record, Iterable[Record]]
Check = Callable[[Document, RunContext], CheckResult]


class Standard(ABC):
    """A compliance standard: a set of checks plus report metadata.

    Subclasses declare their check-key enumeration and implement
    ``metadata()`` and ``checks()``. Every key a standard's checks can
    produce must have metadata; ``missing_metadata()`` reports the gaps and
    the registry refuses standards that have any.

    Example:
        class MyStandard(Standard):
            name = "mine"
            report_name = "My Compliance Report"
            key_enum = MyKey

            def metadata(self):
                return {MyKey.NAME: SectionMeta(title="Fields", section_id="1", data_field="name")}

            def checks(self):
                return [check_name]
    """

    name: ClassVar[str]
    aliases: ClassVar[tuple[str, ...]] = ()
    description: ClassVar[str] = ""

    # Report header
    report_name: ClassVar[str]
    subtitle: ClassVar[str] = ""
    revision: ClassVar[str] = ""

    max_score: ClassVar[float] = 10.0
    document_label: ClassVar[str] = "SBOM Level"
    key_enum: ClassVar[type[IntEnum]]

    @property
    def check_keys(self) -> frozenset[int]:
        """Keys this standard's checks can produce."""
        return frozenset(self.key_enum)

    @abstractmethod
    def metadata(self) -> dict[int, SectionMeta]:
        """Static report metadata keyed by check key."""

    @abstractmethod
    def checks(self) -> list[Check]:
        """The checks to run, in order."""

    def supports(self, document: Document) -> str | None:
        """Return a reason when this standard cannot evaluate the document."""
        return None

    def missing_metadata(self) -> list[int]:
        """Check keys without metadata, sorted."""
        meta = self.metadata()
        return sorted(int(k) for k in self.check_keys if k not in meta)

    def element_label(self, id: str) -> str:
        """Display label for an element id."""
        return self.document_label if id == DOCUMENT_ID else id

    def evaluate(self, document: Document, context: RunContext | None = None) -> RecordStore:
        """Run every check against a document and collect the records."""
        context = context or RunContext.from_document(document)
        store = RecordStore()

        for check in self.checks():
            result = check(document, context)
            if isinstance(result, Record):
                store.add(result)
            else:
                store.add_all(result)

        logger.debug(f"{self.name}: {len(store)} records for {len(store.all_ids())} elements")
        return store
