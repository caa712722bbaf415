"""In-memory record store for one compliance run."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Iterator

from sbom_comply.models.record import Record
from sbom_comply.utils.logging import get_logger

logger = get_logger("store")


class RecordStore:
    """Ingest-then-query, three-way index over compliance records.

    Every record is reachable by its check key, by its element id, and by
    the ``(id, check_key)`` pair. The store is populated once by a run's
    checks and then only read; it does no locking, so concurrent writers
    must be prevented by the caller.

    Example:
        store = RecordStore()
        store.add_all(records)

        for element_id in sorted(store.all_ids()):
            print(element_id, len(store.by_id(element_id)))
    """

    def __init__(self) -> None:
        self._records: list[Record] = []
        self._by_key: dict[int, list[Record]] = defaultdict(list)
        self._by_id: dict[str, list[Record]] = defaultdict(list)
        self._by_id_key: dict[str, dict[int, list[Record]]] = defaultdict(lambda: defaultdict(list))
        self._ids: set[str] = set()

    def add(self, record: Record) -> None:
        """Add a single record to every index."""
        self._records.append(record)
        self._by_key[record.check_key].append(record)
        self._by_id[record.id].append(record)
        self._by_id_key[record.id][record.check_key].append(record)
        self._ids.add(record.id)

    def add_all(self, records: Iterable[Record]) -> None:
        """Add records in order."""
        for record in records:
            self.add(record)

    def by_check_key(self, key: int) -> list[Record]:
        """Get all records for one check key, across every element."""
        return list(self._by_key.get(key, ()))

    def all_ids(self) -> set[str]:
        """Get the distinct element ids. Callers sort when order matters."""
        return set(self._ids)

    def by_id(self, id: str) -> list[Record]:
        """Get every record of one element."""
        return list(self._by_id.get(id, ()))

    def by_check_key_and_id(self, key: int, id: str) -> list[Record]:
        """Get the record(s) for one attribute of one element."""
        keyed = self._by_id_key.get(id)
        if keyed is None:
            return []
        return list(keyed.get(key, ()))

    def dump(self, keys: Iterable[int] | None = None) -> None:
        """Log records at DEBUG level, optionally only those with the given keys."""
        wanted = set(keys) if keys is not None else None
        for record in self._records:
            if wanted is None or record.check_key in wanted:
                logger.debug(
                    "id: %s, key: %d, value: %s", record.id, record.check_key, record.check_value
                )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))
