"""Spreadsheet export: the record collection as a two-column .xlsx workbook."""

import io
import logging
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook

from namebook.domain import Record

logger = logging.getLogger(__name__)

SHEET_TITLE = "الأسماء والأرقام"
EXPORT_FILENAME = "الأسماء_والأرقام.xlsx"
HEADER_NAME = "الاسم"
HEADER_PHONE = "رقم التليفون"


def build_workbook(records: Sequence[Record]) -> Workbook:
    """One header row, then one row per record in the given order. Phones stay text."""
    if not records:
        raise ValueError("Nothing to export: the collection is empty.")
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE
    ws.sheet_view.rightToLeft = True
    ws.append([HEADER_NAME, HEADER_PHONE])
    for record in records:
        ws.append([record.name, record.phone])
    for cell in ws["B"][1:]:
        cell.number_format = "@"
    return wb


def export_bytes(records: Sequence[Record]) -> bytes:
    buf = io.BytesIO()
    build_workbook(records).save(buf)
    return buf.getvalue()


def export_to_file(records: Sequence[Record], directory: str | Path) -> Path:
    """Write the workbook under its fixed file name in directory and return the path."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / EXPORT_FILENAME
    build_workbook(records).save(path)
    logger.info("Exported %d record(s) to %s", len(records), path)
    return path
