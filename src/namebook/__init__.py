"""
Namebook core: clean-architecture layout.

- domain: the Record entity. No outer dependencies.
- application: batch extractor, edit validation, ordering, RecordService, ports, DTOs.
- infrastructure: adapters (InMemoryRecordRepository, JsonFileRecordRepository),
  xlsx export and WhatsApp links.
"""

from namebook.application import (
    EmptyInput,
    FieldErrors,
    NoNewRecords,
    RecordCandidate,
    RecordDeleted,
    RecordNotFound,
    RecordRepository,
    RecordSaved,
    RecordService,
    RecordsExtracted,
    extract_batch,
    validate_edit,
)
from namebook.domain import Record
from namebook.infrastructure import InMemoryRecordRepository, JsonFileRecordRepository

__all__ = [
    "EmptyInput",
    "FieldErrors",
    "InMemoryRecordRepository",
    "JsonFileRecordRepository",
    "NoNewRecords",
    "Record",
    "RecordCandidate",
    "RecordDeleted",
    "RecordNotFound",
    "RecordRepository",
    "RecordSaved",
    "RecordService",
    "RecordsExtracted",
    "extract_batch",
    "validate_edit",
]
