"""Batch extractor: free text with names and phone numbers -> new Records.

Each non-blank line is scanned for the first run of at least 7 digits,
whitespace or hyphens (optionally after a "+"). That run is the phone; what
is left of the line, reduced to Latin/Arabic letters and whitespace, is the
name. Lines without a usable name or phone are skipped, never reported.
"""

import logging
import re
from collections.abc import Iterable

from namebook.application.dto import EmptyInput, NoNewRecords, RecordsExtracted
from namebook.domain import Record

logger = logging.getLogger(__name__)

PHONE_PATTERN = re.compile(r"\+?[0-9\s-]{7,}")
_NON_DIGIT = re.compile(r"[^0-9]")
_NON_NAME_CHAR = re.compile(r"[^a-zA-Z\u0600-\u06FF\s]")


def find_phone(line: str) -> str | None:
    """Return the first raw phone run in the line (separators included), or None."""
    match = PHONE_PATTERN.search(line)
    return match.group(0) if match else None


def clean_phone(raw: str) -> str:
    """Keep ASCII digits only. Idempotent on an already clean number."""
    return _NON_DIGIT.sub("", raw)


def clean_name(raw: str) -> str:
    """Keep Latin letters, Arabic-block characters and whitespace; trim."""
    return _NON_NAME_CHAR.sub("", raw).strip()


def parse_line(line: str) -> Record | None:
    """Extract one record from a line, or None if it has no usable name or phone."""
    phone_raw = find_phone(line)
    if phone_raw is None:
        return None
    phone = clean_phone(phone_raw)
    name = clean_name(line.replace(phone_raw, "", 1))
    if not name or not phone:
        return None
    return Record(name=name, phone=phone)


def extract_batch(
    raw_text: str, existing_phones: Iterable[str] = ()
) -> EmptyInput | NoNewRecords | RecordsExtracted:
    """Parse a pasted block into records whose phones are new.

    Phones already in existing_phones, or seen on an earlier line of the same
    text, are skipped (first occurrence wins). No minimum digit count applies
    here, unlike add/edit.
    """
    if not raw_text or not raw_text.strip():
        return EmptyInput()

    seen = set(existing_phones)
    accepted: list[Record] = []
    for line in raw_text.split("\n"):
        if not line.strip():
            continue
        record = parse_line(line)
        if record is None or record.phone in seen:
            continue
        accepted.append(record)
        seen.add(record.phone)

    if not accepted:
        return NoNewRecords()
    logger.debug("Extracted %d new record(s)", len(accepted))
    return RecordsExtracted(records=tuple(accepted))
