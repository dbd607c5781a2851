"""Application layer: extractor, validation, ordering, use cases, ports and DTOs. Depends only on domain."""

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
from namebook.application.extractor import (
    clean_name,
    clean_phone,
    extract_batch,
    find_phone,
    parse_line,
)
from namebook.application.ordering import sort_records
from namebook.application.ports import RecordRepository
from namebook.application.record_service import RecordService
from namebook.application.validation import validate_edit

__all__ = [
    "EmptyInput",
    "FieldErrors",
    "NoNewRecords",
    "RecordCandidate",
    "RecordDeleted",
    "RecordNotFound",
    "RecordRepository",
    "RecordSaved",
    "RecordService",
    "RecordsExtracted",
    "clean_name",
    "clean_phone",
    "extract_batch",
    "find_phone",
    "parse_line",
    "sort_records",
    "validate_edit",
]
