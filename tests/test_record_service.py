"""Unit tests for RecordService. In-memory repo only."""

from namebook.application import (
    EmptyInput,
    FieldErrors,
    NoNewRecords,
    RecordDeleted,
    RecordNotFound,
    RecordSaved,
    RecordService,
    RecordsExtracted,
)
from namebook.domain import Record
from namebook.infrastructure import InMemoryRecordRepository


def _service(*records: Record) -> RecordService:
    return RecordService(repository=InMemoryRecordRepository(list(records)))


def test_import_adds_records_in_canonical_order() -> None:
    service = _service()
    result = service.import_text("محمد عبدالله 0551234567\nفاطمة خالد, 0509876543")
    assert isinstance(result, RecordsExtracted)

    listed = service.list_records()
    assert listed == [
        Record(name="فاطمة خالد", phone="0509876543"),
        Record(name="محمد عبدالله", phone="0551234567"),
    ]


def test_import_merges_with_existing_and_resorts() -> None:
    service = _service(Record(name="يوسف", phone="0500000001"))
    service.import_text("Ben 0500000003\nأحمد 0500000002")
    assert [r.name for r in service.list_records()] == ["أحمد", "يوسف", "Ben"]


def test_import_skips_phones_already_stored() -> None:
    service = _service(Record(name="Ali", phone="0551234567"))
    result = service.import_text("Other Ali 055 123 4567")
    assert isinstance(result, NoNewRecords)
    assert service.list_records() == [Record(name="Ali", phone="0551234567")]


def test_failed_import_leaves_collection_untouched() -> None:
    service = _service(Record(name="Ali", phone="0551234567"))
    assert isinstance(service.import_text("   "), EmptyInput)
    assert isinstance(service.import_text("no numbers here"), NoNewRecords)
    assert service.list_records() == [Record(name="Ali", phone="0551234567")]


def test_add_record_validates_and_stores() -> None:
    service = _service()
    result = service.add_record("  Sara  ", "050-987-6543")
    assert isinstance(result, RecordSaved)
    assert result.record == Record(name="Sara", phone="0509876543")
    assert service.list_records() == [result.record]


def test_add_record_rejects_short_and_duplicate_phones() -> None:
    service = _service(Record(name="Ali", phone="0551234567"))
    short = service.add_record("Sara", "12345")
    assert isinstance(short, FieldErrors)
    assert "phone" in short.errors

    dup = service.add_record("Sara", "0551234567")
    assert isinstance(dup, FieldErrors)
    assert "phone" in dup.errors
    assert len(service.list_records()) == 1


def test_edit_to_phone_of_other_record_is_rejected() -> None:
    service = _service(
        Record(name="أحمد", phone="0551234567"),
        Record(name="يوسف", phone="0509876543"),
    )
    before = service.list_records()
    result = service.edit_record(0, "أحمد", "0509876543")
    assert isinstance(result, FieldErrors)
    assert set(result.errors) == {"phone"}
    assert service.list_records() == before


def test_edit_with_same_phone_is_a_no_op_save() -> None:
    service = _service(Record(name="أحمد", phone="0551234567"))
    result = service.edit_record(0, "أحمد", "0551234567")
    assert isinstance(result, RecordSaved)
    assert service.list_records() == [Record(name="أحمد", phone="0551234567")]


def test_edit_replaces_record_and_resorts() -> None:
    service = _service(
        Record(name="أحمد", phone="0551234567"),
        Record(name="يوسف", phone="0509876543"),
    )
    result = service.edit_record(0, " Zaid ", "055 123 4567")
    assert isinstance(result, RecordSaved)
    assert result.record == Record(name="Zaid", phone="0551234567")
    assert result.index == 1
    assert [r.name for r in service.list_records()] == ["يوسف", "Zaid"]


def test_edit_empty_fields_reports_both() -> None:
    service = _service(Record(name="Ali", phone="0551234567"))
    result = service.edit_record(0, "", "")
    assert isinstance(result, FieldErrors)
    assert set(result.errors) == {"name", "phone"}


def test_edit_unknown_index_returns_not_found() -> None:
    service = _service()
    result = service.edit_record(3, "Ali", "0551234567")
    assert isinstance(result, RecordNotFound)
    assert result.index == 3


def test_delete_removes_one_record() -> None:
    service = _service(
        Record(name="Ali", phone="0551234567"),
        Record(name="Ben", phone="0509876543"),
    )
    result = service.delete_record(0)
    assert isinstance(result, RecordDeleted)
    assert result.record.name == "Ali"
    assert service.list_records() == [Record(name="Ben", phone="0509876543")]
    assert isinstance(service.delete_record(5), RecordNotFound)
    assert isinstance(service.delete_record(-1), RecordNotFound)


def test_find_by_phone() -> None:
    service = _service(Record(name="Ali", phone="0551234567"))
    assert service.find_by_phone("0551234567") == Record(name="Ali", phone="0551234567")
    assert service.find_by_phone("0000000") is None
