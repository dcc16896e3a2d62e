"""
In-memory record store for the roster.

Holds the current ordered sequence of personnel records as an immutable tuple.
Writers swap in a new tuple under a lock; readers get the tuple itself, so a
snapshot can never change underneath a running query or search.
"""

from __future__ import annotations

import threading
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from roster.data.seed import seed_records
from roster.domain.models import PersonnelRecord
from roster.errors import DuplicateRecordError, RecordNotFoundError
from roster.utils.logging import get_logger

log = get_logger(__name__)


class RecordStore:
    """
    Ordered, newest-first collection of personnel records.

    Records are appended by the creation form (prepended, to be exact) and
    replaced wholesale on edit. Deletion is not supported.
    """

    def __init__(self, records: Iterable[PersonnelRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._records: Tuple[PersonnelRecord, ...] = ()
        for record in records:
            self._check_unique(record, self._records)
            self._records = self._records + (record,)

    @classmethod
    def from_seed(cls) -> "RecordStore":
        """Build a store from the static seed roster."""
        return cls(seed_records())

    @staticmethod
    def _check_unique(record: PersonnelRecord, existing: Sequence[PersonnelRecord]) -> None:
        if any(current.id == record.id for current in existing):
            raise DuplicateRecordError(f"Record id '{record.id}' already exists")

    def snapshot(self) -> Tuple[PersonnelRecord, ...]:
        """Return the current records; the tuple is immutable."""
        return self._records

    def add(self, record: PersonnelRecord) -> None:
        """Insert a new record at the front of the collection."""
        with self._lock:
            self._check_unique(record, self._records)
            self._records = (record,) + self._records
        log.info(
            "[STORE] Record added",
            extra={"record_id": record.id, "employee_code": record.employee_code},
        )

    def replace(self, record: PersonnelRecord) -> None:
        """Swap the record sharing `record.id`, keeping its position."""
        with self._lock:
            for index, current in enumerate(self._records):
                if current.id == record.id:
                    self._records = self._records[:index] + (record,) + self._records[index + 1 :]
                    break
            else:
                raise RecordNotFoundError(record.id)
        log.info("[STORE] Record replaced", extra={"record_id": record.id})

    def get(self, record_id: str) -> Optional[PersonnelRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PersonnelRecord]:
        return iter(self._records)


def out_of_whitelist(
    records: Iterable[PersonnelRecord], allowed_locations: Iterable[str]
) -> List[PersonnelRecord]:
    """Records whose location is not in the configured location whitelist."""
    allowed = set(allowed_locations)
    return [record for record in records if record.location not in allowed]


__all__ = ["RecordStore", "out_of_whitelist"]
