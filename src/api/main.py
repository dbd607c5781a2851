"""
FastAPI backend: REST API over the record collection.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager
from urllib.parse import quote

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from namebook.application import (
    EmptyInput,
    FieldErrors,
    RecordNotFound,
    RecordSaved,
    RecordService,
    RecordsExtracted,
)
from namebook.domain import Record
from namebook.infrastructure import (
    EXPORT_FILENAME,
    JsonFileRecordRepository,
    export_bytes,
    whatsapp_link,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = ".namebook"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _data_dir() -> Path:
    raw = os.environ.get("NAMEBOOK_DATA_DIR", "").strip()
    return Path(raw) if raw else Path.cwd() / DEFAULT_DATA_DIR


def _default_region() -> str | None:
    return os.environ.get("NAMEBOOK_DEFAULT_REGION", "").strip() or None


def get_service(app: FastAPI) -> RecordService:
    if getattr(app.state, "service", None) is None:
        repo = JsonFileRecordRepository(_data_dir())
        logger.info("Record store: %s", repo.path)
        app.state.service = RecordService(repo)
    return app.state.service


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_service(app)
    yield


app = FastAPI(title="Namebook API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: records ---


class ImportBody(BaseModel):
    text: str = ""


class RecordBody(BaseModel):
    name: str = ""
    phone: str = ""


class RecordItem(BaseModel):
    name: str
    phone: str


def _item(record: Record) -> RecordItem:
    return RecordItem(name=record.name, phone=record.phone)


def _record_or_404(service: RecordService, index: int) -> Record:
    record = service.get_record(index)
    if record is None:
        raise HTTPException(status_code=404, detail=RecordNotFound(index=index).reason)
    return record


@app.get("/records")
def list_records(request: Request):
    service = get_service(request.app)
    return [_item(r) for r in service.list_records()]


@app.post("/records/import")
def import_records(body: ImportBody, request: Request):
    service = get_service(request.app)
    result = service.import_text(body.text)
    if isinstance(result, EmptyInput):
        raise HTTPException(status_code=400, detail=result.reason)
    if not isinstance(result, RecordsExtracted):
        raise HTTPException(status_code=422, detail=result.reason)
    return JSONResponse(
        content={
            "added": len(result.records),
            "records": [r.to_dict() for r in service.list_records()],
        },
        status_code=201,
    )


@app.post("/records")
def add_record(body: RecordBody, request: Request):
    service = get_service(request.app)
    result = service.add_record(body.name, body.phone)
    if isinstance(result, FieldErrors):
        raise HTTPException(status_code=400, detail={"errors": result.errors})
    return JSONResponse(
        content={**result.record.to_dict(), "index": result.index},
        status_code=201,
    )


@app.get("/records/export")
def export_records(request: Request):
    service = get_service(request.app)
    records = service.list_records()
    if not records:
        raise HTTPException(status_code=404, detail="No records to export")
    return Response(
        content=export_bytes(records),
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(EXPORT_FILENAME)}"
        },
    )


@app.put("/records/{index}")
def edit_record(index: int, body: RecordBody, request: Request):
    service = get_service(request.app)
    result = service.edit_record(index, body.name, body.phone)
    if isinstance(result, RecordNotFound):
        raise HTTPException(status_code=404, detail=result.reason)
    if isinstance(result, FieldErrors):
        raise HTTPException(status_code=400, detail={"errors": result.errors})
    if not isinstance(result, RecordSaved):
        raise HTTPException(status_code=400, detail="Failed to save record")
    return {**result.record.to_dict(), "index": result.index}


@app.delete("/records/{index}", status_code=204)
def delete_record(index: int, request: Request):
    service = get_service(request.app)
    result = service.delete_record(index)
    if isinstance(result, RecordNotFound):
        raise HTTPException(status_code=404, detail=result.reason)
    return Response(status_code=204)


@app.get("/records/{index}/whatsapp")
def record_whatsapp_link(index: int, request: Request, text: str | None = None):
    service = get_service(request.app)
    record = _record_or_404(service, index)
    return {"url": whatsapp_link(record.phone, _default_region(), text=text)}
