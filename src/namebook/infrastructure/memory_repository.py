"""In-memory implementation of RecordRepository (no storage)."""

from namebook.domain import Record


class InMemoryRecordRepository:
    """Holds the collection in memory. Order preserved as given."""

    def __init__(self, records: list[Record] | None = None) -> None:
        self._records: list[Record] = list(records or [])

    def load_all(self) -> list[Record]:
        return list(self._records)

    def replace_all(self, records: list[Record]) -> None:
        self._records = list(records)
