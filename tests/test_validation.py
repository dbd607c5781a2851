"""Tests for add/edit field validation."""

from namebook.application import RecordCandidate, validate_edit
from namebook.domain import Record

COLLECTION = [
    Record(name="أحمد", phone="0551234567"),
    Record(name="يوسف", phone="0509876543"),
]


def test_valid_edit_has_no_errors() -> None:
    assert validate_edit(RecordCandidate("أحمد علي", "0551111111"), 0, COLLECTION) == {}


def test_saving_own_phone_is_allowed() -> None:
    assert validate_edit(RecordCandidate("أحمد", "0551234567"), 0, COLLECTION) == {}


def test_phone_of_another_record_is_rejected() -> None:
    errors = validate_edit(RecordCandidate("أحمد", "0509876543"), 0, COLLECTION)
    assert set(errors) == {"phone"}


def test_empty_fields_are_reported_per_field() -> None:
    errors = validate_edit(RecordCandidate("   ", "  "), 0, COLLECTION)
    assert set(errors) == {"name", "phone"}


def test_phone_shorter_than_seven_digits_is_rejected() -> None:
    errors = validate_edit(RecordCandidate("Ben", "123456"), 1, COLLECTION)
    assert set(errors) == {"phone"}
    assert validate_edit(RecordCandidate("Ben", "1234567"), 1, COLLECTION) == {}


def test_phone_is_trimmed_before_checks() -> None:
    assert validate_edit(RecordCandidate(" Ben ", " 1234567 "), 1, COLLECTION) == {}


def test_non_digit_phone_is_rejected() -> None:
    errors = validate_edit(RecordCandidate("Ben", "055-123-4567"), 1, COLLECTION)
    assert set(errors) == {"phone"}


def test_new_record_checks_whole_collection() -> None:
    errors = validate_edit(RecordCandidate("Ben", "0551234567"), None, COLLECTION)
    assert set(errors) == {"phone"}
    assert validate_edit(RecordCandidate("Ben", "0550000000"), None, COLLECTION) == {}
