"""Infrastructure layer: storage adapters and the export/messaging collaborators."""

from namebook.infrastructure.export import (
    EXPORT_FILENAME,
    build_workbook,
    export_bytes,
    export_to_file,
)
from namebook.infrastructure.json_repository import JsonFileRecordRepository
from namebook.infrastructure.memory_repository import InMemoryRecordRepository
from namebook.infrastructure.phone import international_digits, whatsapp_link

__all__ = [
    "EXPORT_FILENAME",
    "InMemoryRecordRepository",
    "JsonFileRecordRepository",
    "build_workbook",
    "export_bytes",
    "export_to_file",
    "international_digits",
    "whatsapp_link",
]
