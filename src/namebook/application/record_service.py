"""Record collection use cases: batch import, add, edit, delete, list.

Every mutation reads the whole collection, computes a new one and replaces it
in a single repository call, holding the service lock from read to write.
Indexes are positions in canonical order.
"""

import logging
import threading

from namebook.application.dto import (
    EmptyInput,
    FieldErrors,
    NoNewRecords,
    RecordCandidate,
    RecordDeleted,
    RecordNotFound,
    RecordSaved,
    RecordsExtracted,
)
from namebook.application.extractor import clean_phone, extract_batch
from namebook.application.ordering import sort_records
from namebook.application.ports import RecordRepository
from namebook.application.validation import validate_edit
from namebook.domain import Record

logger = logging.getLogger(__name__)


class RecordService:
    """Owns one record collection through a repository. Safe to share across threads."""

    def __init__(self, repository: RecordRepository) -> None:
        self._repo = repository
        self._lock = threading.Lock()

    def list_records(self) -> list[Record]:
        return sort_records(self._repo.load_all())

    def find_by_phone(self, phone: str) -> Record | None:
        phone = (phone or "").strip()
        for record in self._repo.load_all():
            if record.phone == phone:
                return record
        return None

    def get_record(self, index: int) -> Record | None:
        records = self.list_records()
        if 0 <= index < len(records):
            return records[index]
        return None

    def import_text(self, raw_text: str) -> EmptyInput | NoNewRecords | RecordsExtracted:
        """Extract new records from pasted text and add them. Untouched on failure."""
        with self._lock:
            current = self._repo.load_all()
            result = extract_batch(raw_text, {r.phone for r in current})
            if not isinstance(result, RecordsExtracted):
                return result
            self._repo.replace_all(sort_records([*current, *result.records]))
        logger.info("Imported %d record(s)", len(result.records))
        return result

    def add_record(self, name: str, phone: str) -> RecordSaved | FieldErrors:
        """Add one record typed by hand. Same rules and phone handling as edit."""
        candidate = RecordCandidate(name=name or "", phone=clean_phone(phone or ""))
        with self._lock:
            current = self.list_records()
            errors = validate_edit(candidate, None, current)
            if errors:
                return FieldErrors(errors=errors)
            record = Record(name=candidate.name.strip(), phone=candidate.phone)
            return self._commit([*current, record], record)

    def edit_record(
        self, index: int, name: str, phone: str
    ) -> RecordSaved | FieldErrors | RecordNotFound:
        """Replace name and phone of the record at index, then re-sort.

        The phone field accepts digits only, so separators are dropped before
        validation.
        """
        candidate = RecordCandidate(name=name or "", phone=clean_phone(phone or ""))
        with self._lock:
            current = self.list_records()
            if not 0 <= index < len(current):
                return RecordNotFound(index=index)
            errors = validate_edit(candidate, index, current)
            if errors:
                return FieldErrors(errors=errors)
            record = Record(name=candidate.name.strip(), phone=candidate.phone)
            updated = list(current)
            updated[index] = record
            return self._commit(updated, record)

    def delete_record(self, index: int) -> RecordDeleted | RecordNotFound:
        with self._lock:
            current = self.list_records()
            if not 0 <= index < len(current):
                return RecordNotFound(index=index)
            removed = current[index]
            self._repo.replace_all([r for i, r in enumerate(current) if i != index])
        return RecordDeleted(record=removed)

    def _commit(self, records: list[Record], saved: Record) -> RecordSaved:
        ordered = sort_records(records)
        self._repo.replace_all(ordered)
        return RecordSaved(record=saved, index=ordered.index(saved))
