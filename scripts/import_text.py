#!/usr/bin/env python3
"""Import names and phone numbers from a text file into the record store.
Optionally write the .xlsx export afterwards.

Usage: python scripts/import_text.py contacts.txt [--export OUT_DIR]
Store location: NAMEBOOK_DATA_DIR in .env (default .namebook/).
"""
import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))
load_dotenv(REPO_ROOT / ".env")

from namebook.application import EmptyInput, RecordService, RecordsExtracted  # noqa: E402
from namebook.infrastructure import JsonFileRecordRepository, export_to_file  # noqa: E402

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("file", type=Path)
    parser.add_argument("--export", type=Path, default=None, metavar="OUT_DIR")
    args = parser.parse_args()

    data_dir = (os.environ.get("NAMEBOOK_DATA_DIR") or "").strip() or ".namebook"
    service = RecordService(JsonFileRecordRepository(data_dir))

    try:
        text = args.file.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    result = service.import_text(text)
    if isinstance(result, RecordsExtracted):
        print(f"Added {len(result.records)} record(s).")
    else:
        print(result.reason, file=sys.stderr)
        if isinstance(result, EmptyInput):
            return 1

    if args.export is not None:
        records = service.list_records()
        if not records:
            print("Nothing to export.", file=sys.stderr)
            return 1
        print(f"Exported to {export_to_file(records, args.export)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
