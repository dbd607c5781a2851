"""Field validation for a single record typed into the add/edit form."""

from collections.abc import Sequence

from namebook.application.dto import (
    MSG_NAME_REQUIRED,
    MSG_PHONE_EXISTS,
    MSG_PHONE_NOT_DIGITS,
    MSG_PHONE_REQUIRED,
    MSG_PHONE_TOO_SHORT,
    RecordCandidate,
)
from namebook.domain import PHONE_MIN_DIGITS, Record, is_digits


def validate_edit(
    candidate: RecordCandidate,
    index_being_edited: int | None,
    collection: Sequence[Record],
) -> dict[str, str]:
    """Return field -> message for every violated rule; empty means the edit is valid.

    The phone may not collide with a record at any other index. Pass None as
    index_being_edited to validate a new record against the whole collection.
    """
    name = (candidate.name or "").strip()
    phone = (candidate.phone or "").strip()
    errors: dict[str, str] = {}

    if not name:
        errors["name"] = MSG_NAME_REQUIRED

    if not phone:
        errors["phone"] = MSG_PHONE_REQUIRED
    elif not is_digits(phone):
        errors["phone"] = MSG_PHONE_NOT_DIGITS
    elif len(phone) < PHONE_MIN_DIGITS:
        errors["phone"] = MSG_PHONE_TOO_SHORT
    elif any(
        r.phone == phone for i, r in enumerate(collection) if i != index_being_edited
    ):
        errors["phone"] = MSG_PHONE_EXISTS

    return errors
