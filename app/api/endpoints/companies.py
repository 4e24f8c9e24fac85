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
from app.crud import company as company_crud
from app.crud import job as job_crud
from app.models.admin import Admin
from app.schemas.bulk import BulkCompaniesRequest, BulkCompanyInput, BulkUploadResponse, CsvImportResponse
from app.schemas.common import MessageResponse, QueryPagination, QueryResponse
from app.schemas.company import CompanyCreateRequest, CompanyListItem, CompanyResponse, CompanyUpdateRequest
from app.schemas.job import JobResponse
from app.services import csv_import

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.get("", response_model=QueryResponse[CompanyListItem])
def list_companies(
    page: PageParams = Depends(get_page_params),
    location: Optional[str] = None,
    country: Optional[str] = None,
    status: Optional[str] = Query(None, description="Status code, e.g. 'active'"),
    is_premium: Optional[bool] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List companies by name, each with its number of jobs."""
    companies, total = company_crud.get_multi(
        db,
        offset=page.offset,
        limit=page.limit,
        location=location,
        country=country,
        status=status,
        is_premium=is_premium,
        search=search,
    )
    counts = company_crud.get_job_counts(db, [c.id for c in companies])

    items = [
        CompanyListItem.model_validate(c).model_copy(update={"open_jobs": counts.get(c.id, 0)})
        for c in companies
    ]

    return QueryResponse[CompanyListItem](
        list=items,
        pagination=QueryPagination.build(len(items), total, page.limit, page.offset),
    )


@router.get("/featured", response_model=List[CompanyResponse])
def list_featured_companies(
    limit: int = Query(settings.FEATURED_LIMIT, ge=1, le=50),
    db: Session = Depends(get_db)
):
    return company_crud.get_featured(db, limit=limit)


@router.post("/bulk", response_model=BulkUploadResponse)
def bulk_create_companies(
    request: BulkCompaniesRequest,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    """
    Create many companies in one request.

    A row without a name, or one the database rejects, is reported and
    skipped; the other rows are still inserted.
    """
    rows = require_rows(request.companies, "companies")
    created, errors = company_crud.bulk_create(db, rows, created_by_id=admin.id)

    logger.info(f"Bulk company upload by {admin.email}: {created} created, {len(errors)} failed")
    return build_bulk_response(created, errors)


@router.get("/bulk/template")
def download_companies_template():
    content = csv_import.template_csv(csv_import.COMPANY_TEMPLATE_HEADERS, csv_import.COMPANY_TEMPLATE_SAMPLE)
    return csv_template_response(content, "companies_template.csv")


@router.post("/bulk/csv", response_model=CsvImportResponse)
async def import_companies_csv(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    """Validate a companies CSV and upload its valid rows in batches."""
    text = await read_csv_upload(file)
    parsed = csv_import.parse_companies_csv(text)
    result = import_parsed_rows(db, parsed, BulkCompanyInput, company_crud.bulk_create, created_by_id=admin.id)

    logger.info(f"CSV company import by {admin.email}: {result.uploaded} created, {result.invalid} invalid, {result.failed} failed")
    return result


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: UUID, db: Session = Depends(get_db)):
    company = company_crud.get_by_id(db, company_id)

    if not company:
        raise HTTPException(status_code=404, detail="Company not found")

    return company


@router.get("/{company_id}/jobs", response_model=List[JobResponse])
def list_company_jobs(company_id: UUID, db: Session = Depends(get_db)):
    """All jobs of a company, newest first."""
    if not company_crud.get_by_id(db, company_id):
        raise HTTPException(status_code=404, detail="Company not found")

    return job_crud.get_by_company(db, company_id)


@router.post("", status_code=201, response_model=CompanyResponse)
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    company = company_crud.create(db, request, created_by_id=admin.id)
    logger.info(f"Created company {company.id}: {company.name}")

    return company_crud.get_by_id(db, company.id)


@router.put("/{company_id}", response_model=CompanyResponse)
def update_company(
    company_id: UUID,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    company = company_crud.update(db, company_id, request)

    if not company:
        raise HTTPException(status_code=404, detail="Company not found")

    return company_crud.get_by_id(db, company_id)


@router.delete("/{company_id}", response_model=MessageResponse)
def delete_company(
    company_id: UUID,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    """Delete a company and all of its jobs."""
    if not company_crud.delete(db, company_id):
        raise HTTPException(status_code=404, detail="Company not found")

    return MessageResponse(message="Company deleted successfully")
