"""
Job source management (where listings come from). Admin-only.
"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import PageParams, get_current_admin, get_page_params
from app.crud import job_source as job_source_crud
from app.schemas.common import MessageResponse, QueryPagination, QueryResponse
from app.schemas.job_source import JobSourceCreateRequest, JobSourceResponse, JobSourceUpdateRequest

router = APIRouter(prefix="/jobs-sources", tags=["Job Sources"], dependencies=[Depends(get_current_admin)])
logger = logging.getLogger(__name__)


def _code_taken(db: Session, code: str, source_id: Optional[int] = None) -> bool:
    existing = job_source_crud.get_by_code(db, code)
    return existing is not None and existing.id != source_id


@router.get("", response_model=QueryResponse[JobSourceResponse])
def list_job_sources(
    page: PageParams = Depends(get_page_params),
    is_active: Optional[bool] = None,
    include_stats: bool = False,
    db: Session = Depends(get_db)
):
    sources, total = job_source_crud.get_multi(db, offset=page.offset, limit=page.limit, is_active=is_active)

    return QueryResponse[JobSourceResponse](
        list=sources,
        pagination=QueryPagination.build(len(sources), total, page.limit, page.offset),
        stats=job_source_crud.get_stats(db) if include_stats else None,
    )


@router.get("/{source_id}", response_model=JobSourceResponse)
def get_job_source(source_id: int, db: Session = Depends(get_db)):
    source = job_source_crud.get_by_id(db, source_id)

    if not source:
        raise HTTPException(status_code=404, detail="Job source not found")

    return source


@router.post("", status_code=201, response_model=JobSourceResponse)
def create_job_source(request: JobSourceCreateRequest, db: Session = Depends(get_db)):
    if _code_taken(db, request.code):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Job source with code '{request.code}' already exists"
        )

    source = job_source_crud.create(db, request)
    logger.info(f"Created job source {source.id}: {source.code}")

    return source


@router.put("/{source_id}", response_model=JobSourceResponse)
def update_job_source(source_id: int, request: JobSourceUpdateRequest, db: Session = Depends(get_db)):
    if request.code and _code_taken(db, request.code, source_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Job source with code '{request.code}' already exists"
        )

    source = job_source_crud.update(db, source_id, request)

    if not source:
        raise HTTPException(status_code=404, detail="Job source not found")

    return source


@router.delete("/{source_id}", response_model=MessageResponse)
def delete_job_source(source_id: int, db: Session = Depends(get_db)):
    if not job_source_crud.delete(db, source_id):
        raise HTTPException(status_code=404, detail="Job source not found")

    return MessageResponse(message="Job source deleted successfully")
