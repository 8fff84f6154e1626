from dataclasses import dataclass
from operator import attrgetter
from typing import Iterator, List, Optional, Tuple

from .errors import EmptyStoreError


@dataclass
class StudentRecord:
    """One student's name, raw scores and letter grade.

    ``grade`` stays empty until the grade engine has run.
    """

    name: str
    scores: Tuple[int, ...]
    grade: str = ""


class RecordStore:
    """Ordered collection of all student records for one run.

    Records keep file order until ``sort_by_name`` is called. The store is
    torn down once with ``clear``; it does not accept records afterwards.
    """

    def __init__(self):
        self._records: List[StudentRecord] = []
        self._closed = False

    def append(self, record: StudentRecord) -> None:
        if self._closed:
            raise EmptyStoreError("Student record store has already been torn down")
        if record is None:
            raise EmptyStoreError("Student record for store operation is empty")
        self._records.append(record)

    def sort_by_name(self) -> None:
        """Sort in place by case-sensitive name; equal names keep file order."""
        if len(self._records) < 2 or self.is_sorted():
            return
        self._records.sort(key=attrgetter("name"))

    def is_sorted(self) -> bool:
        return all(a.name <= b.name for a, b in zip(self._records, self._records[1:]))

    def names(self) -> List[str]:
        return [record.name for record in self._records]

    def clear(self) -> None:
        self._records.clear()
        self._closed = True

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> StudentRecord:
        return self._records[index]


def require_store(store: Optional[RecordStore]) -> RecordStore:
    """Return ``store`` or raise when the caller has no store at all."""
    if store is None:
        raise EmptyStoreError("Student record store is not initialized")
    return store


def sort_records(store: Optional[RecordStore]) -> RecordStore:
    store = require_store(store)
    store.sort_by_name()
    return store
