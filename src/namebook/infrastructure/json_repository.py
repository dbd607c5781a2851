"""JSON-file implementation of RecordRepository.

The whole collection lives in one file, <data_dir>/contacts.json, as a list of
{"name", "phone"} objects. Storage problems never reach the caller: an
unreadable file means "start from empty", a failed write is logged and dropped.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from namebook.domain import Record

logger = logging.getLogger(__name__)

STORAGE_NAME = "contacts"


def _record_from_json(item: object) -> Record | None:
    if not isinstance(item, dict):
        return None
    name, phone = item.get("name"), item.get("phone")
    # A phone stored as a JSON number has already lost its leading zeros.
    if not isinstance(name, str) or not isinstance(phone, str):
        return None
    try:
        return Record(name=name, phone=phone)
    except ValueError:
        return None


class JsonFileRecordRepository:
    """Stores the collection as a JSON list in a fixed file under data_dir."""

    def __init__(self, data_dir: str | Path) -> None:
        self._path = Path(data_dir) / f"{STORAGE_NAME}.json"

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[Record]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, starting from empty: %s", self._path, e)
            return []
        if not isinstance(data, list):
            logger.warning("Unexpected content in %s, starting from empty", self._path)
            return []

        out: list[Record] = []
        seen: set[str] = set()
        for item in data:
            record = _record_from_json(item)
            if record is None:
                logger.warning("Skipping invalid stored record: %r", item)
                continue
            if record.phone in seen:
                logger.warning("Skipping stored record with duplicate phone %s", record.phone)
                continue
            seen.add(record.phone)
            out.append(record)
        return out

    def replace_all(self, records: list[Record]) -> None:
        payload = json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2)
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{STORAGE_NAME}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, self._path)
        except OSError as e:
            logger.warning("Could not write %s: %s", self._path, e)
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
