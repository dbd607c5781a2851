"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from namebook.domain import Record


class RecordRepository(Protocol):
    """Stores the whole record collection as one aggregate."""

    def load_all(self) -> list[Record]:
        """Return the stored collection, or an empty list if nothing usable is stored."""
        ...

    def replace_all(self, records: list[Record]) -> None:
        """Replace the stored collection in one step. Failures must not raise."""
        ...
