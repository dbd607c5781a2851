"""Result types returned by the application layer. Callers dispatch with isinstance."""

from dataclasses import dataclass, field

from namebook.domain import Record

MSG_EMPTY_INPUT = "الرجاء إدخال نص يحتوي على أسماء وأرقام."
MSG_NO_NEW_RECORDS = "لم يتم العثور على بيانات جديدة أو صالحة في النص المدخل."
MSG_NAME_REQUIRED = "لا يمكن ترك الاسم فارغًا."
MSG_PHONE_REQUIRED = "لا يمكن ترك رقم الهاتف فارغًا."
MSG_PHONE_TOO_SHORT = "رقم الهاتف يجب أن يتكون من 7 أرقام على الأقل."
MSG_PHONE_NOT_DIGITS = "رقم الهاتف يجب أن يحتوي على أرقام فقط."
MSG_PHONE_EXISTS = "رقم الهاتف هذا موجود بالفعل."
MSG_RECORD_NOT_FOUND = "السجل غير موجود."


@dataclass(frozen=True)
class RecordCandidate:
    """Raw name/phone as typed into an add or edit form. Not yet validated."""

    name: str = ""
    phone: str = ""


@dataclass(frozen=True)
class EmptyInput:
    """Batch text was blank; nothing was scanned."""

    reason: str = MSG_EMPTY_INPUT


@dataclass(frozen=True)
class NoNewRecords:
    """Batch text had content but no line produced a new valid record."""

    reason: str = MSG_NO_NEW_RECORDS


@dataclass(frozen=True)
class RecordsExtracted:
    """New records accepted from a batch, in input order."""

    records: tuple[Record, ...]


@dataclass(frozen=True)
class FieldErrors:
    """Add/edit rejected. Maps field name ("name", "phone") to a message."""

    errors: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RecordSaved:
    record: Record
    index: int


@dataclass(frozen=True)
class RecordDeleted:
    record: Record


@dataclass(frozen=True)
class RecordNotFound:
    index: int
    reason: str = MSG_RECORD_NOT_FOUND
