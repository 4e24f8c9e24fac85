"""
Shared plumbing for the bulk and CSV import endpoints of jobs and companies.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Type
from fastapi import HTTPException, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.config import settings
from app.schemas.bulk import BulkUploadResponse, CsvImportResponse
from app.services.csv_import import ParsedRow, upload_in_batches

logger = logging.getLogger(__name__)


def require_rows(rows: Optional[List[Any]], kind: str) -> List[Any]:
    """400 when the bulk request carries no rows."""
    if not rows:
        raise HTTPException(status_code=400, detail=f"No {kind} provided")
    return rows


def build_bulk_response(created: int, errors: List[Dict[str, Any]]) -> BulkUploadResponse:
    return BulkUploadResponse(success=True, created=created, failed=len(errors), errors=errors)


async def read_csv_upload(file: UploadFile) -> str:
    """Read an uploaded .csv file as text (a UTF-8 BOM is dropped)."""
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Please upload a CSV file")

    content = await file.read()
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV file must be UTF-8 encoded")


def import_parsed_rows(
    db: Session,
    parsed: List[ParsedRow],
    row_model: Type[BaseModel],
    bulk_create: Callable,
    created_by_id=None,
) -> CsvImportResponse:
    """
    Run the batched upload of validated CSV rows against the local database.

    Each batch goes through the same bulk-create function as the JSON bulk
    endpoint, so per-row failures are reported the same way.
    """
    if not parsed:
        raise HTTPException(status_code=400, detail="No data rows found in the CSV file")

    def submit(payloads: List[Dict[str, Any]]) -> Dict[str, Any]:
        created, errors = bulk_create(db, [row_model(**p) for p in payloads], created_by_id=created_by_id)
        return build_bulk_response(created, errors).model_dump()

    invalid = [row for row in parsed if not row.is_valid]
    report = upload_in_batches(parsed, submit, batch_size=settings.BULK_BATCH_SIZE)

    return CsvImportResponse(
        total_rows=len(parsed),
        valid=len(parsed) - len(invalid),
        invalid=len(invalid),
        invalid_rows=[{"row": row.row, "label": row.label, "errors": row.errors} for row in invalid],
        uploaded=report["success"],
        failed=report["failed"],
        errors=report["errors"],
    )


def csv_template_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
