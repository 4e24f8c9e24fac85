import logging
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, HTTPException, Depends, File, Query, UploadFile
from sqlalchemy.orm import Session

from app.api.endpoints.bulk import (
    build_bulk_response,
    csv_template_response,
    import_parsed_rows,
    read_csv_upload,
    require_rows,
)
from app.core.config import settings
from app.core.database import get_db
from app.core.deps import PageParams, get_current_admin, get_page_params
from app.crud import job as job_crud
from app.models.admin import Admin
from app.schemas.bulk import BulkJobInput, BulkJobsRequest, BulkUploadResponse, CsvImportResponse
from app.schemas.common import MessageResponse, QueryPagination, QueryResponse
from app.schemas.job import JobCreateRequest, JobResponse, JobUpdateRequest
from app.services import csv_import

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.get("", response_model=QueryResponse[JobResponse])
def list_jobs(
    page: PageParams = Depends(get_page_params),
    job_type_id: Optional[int] = None,
    industry_id: Optional[int] = None,
    currency_id: Optional[int] = None,
    company_id: Optional[UUID] = None,
    source_id: Optional[int] = None,
    country: Optional[str] = None,
    status: Optional[str] = Query(None, description="Status code, e.g. 'published'"),
    is_premium: Optional[bool] = None,
    location: Optional[str] = None,
    search: Optional[str] = None,
    include_stats: bool = False,
    db: Session = Depends(get_db)
):
    """
    List jobs, most recently modified first.

    `location` and `search` match case-insensitive substrings (`search` looks
    at title and description). Set `include_stats` to add per-status counts.
    """
    jobs, total = job_crud.get_multi(
        db,
        offset=page.offset,
        limit=page.limit,
        job_type_id=job_type_id,
        industry_id=industry_id,
        currency_id=currency_id,
        company_id=company_id,
        source_id=source_id,
        country=country,
        status=status,
        is_premium=is_premium,
        location=location,
        search=search,
    )

    return QueryResponse[JobResponse](
        list=jobs,
        pagination=QueryPagination.build(len(jobs), total, page.limit, page.offset),
        stats=job_crud.get_stats(db) if include_stats else None,
    )


@router.get("/featured", response_model=List[JobResponse])
def list_featured_jobs(
    limit: int = Query(settings.FEATURED_LIMIT, ge=1, le=50),
    db: Session = Depends(get_db)
):
    """Newest published jobs for the home page."""
    return job_crud.get_featured(db, limit=limit)


@router.post("/bulk", response_model=BulkUploadResponse)
def bulk_create_jobs(
    request: BulkJobsRequest,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    """
    Create many jobs in one request.

    Rows are inserted one by one; a failing row (missing title, unknown
    company or lookup code, database error) is reported with its 1-based row
    number and does not stop the others.
    """
    rows = require_rows(request.jobs, "jobs")
    created, errors = job_crud.bulk_create(db, rows, created_by_id=admin.id)

    logger.info(f"Bulk job upload by {admin.email}: {created} created, {len(errors)} failed")
    return build_bulk_response(created, errors)


@router.get("/bulk/template")
def download_jobs_template():
    """CSV template (header row plus one sample row) for bulk job import."""
    content = csv_import.template_csv(csv_import.JOB_TEMPLATE_HEADERS, csv_import.JOB_TEMPLATE_SAMPLE)
    return csv_template_response(content, "jobs_template.csv")


@router.post("/bulk/csv", response_model=CsvImportResponse)
async def import_jobs_csv(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    """
    Validate a jobs CSV and upload its valid rows in batches.

    Invalid rows are listed with their errors and never inserted.
    """
    text = await read_csv_upload(file)
    parsed = csv_import.parse_jobs_csv(text)
    result = import_parsed_rows(db, parsed, BulkJobInput, job_crud.bulk_create, created_by_id=admin.id)

    logger.info(f"CSV job import by {admin.email}: {result.uploaded} created, {result.invalid} invalid, {result.failed} failed")
    return result


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: UUID, db: Session = Depends(get_db)):
    """Retrieve a job with its company and lookups."""
    job = job_crud.get_by_id(db, job_id)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.post("", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    """Create a job. Without a status_id it gets the default job status."""
    new_job = job_crud.create(db, request, created_by_id=admin.id)
    logger.info(f"Created job {new_job.id}: {new_job.title}")

    return job_crud.get_by_id(db, new_job.id)


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: UUID,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    """Update the fields present in the body."""
    job = job_crud.update(db, job_id, request)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job_crud.get_by_id(db, job_id)


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: UUID,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    if not job_crud.delete(db, job_id):
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Job {job_id} deleted by {admin.email}")
    return MessageResponse(message="Job deleted successfully")
