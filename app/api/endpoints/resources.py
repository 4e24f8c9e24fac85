import logging
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import PageParams, get_current_admin, get_page_params
from app.crud import resource as resource_crud
from app.models.admin import Admin
from app.schemas.common import MessageResponse, QueryPagination, QueryResponse
from app.schemas.resource import ResourceCreateRequest, ResourceResponse, ResourceUpdateRequest

router = APIRouter(prefix="/resources", tags=["Resources"])
logger = logging.getLogger(__name__)


@router.get("", response_model=QueryResponse[ResourceResponse])
def list_resources(
    page: PageParams = Depends(get_page_params),
    resource_type_id: Optional[int] = None,
    status: Optional[str] = Query(None, description="Status code, e.g. 'active'"),
    is_premium: Optional[bool] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List career resources, newest first."""
    resources, total = resource_crud.get_multi(
        db,
        offset=page.offset,
        limit=page.limit,
        resource_type_id=resource_type_id,
        status=status,
        is_premium=is_premium,
        search=search,
    )

    return QueryResponse[ResourceResponse](
        list=resources,
        pagination=QueryPagination.build(len(resources), total, page.limit, page.offset),
    )


@router.get("/{resource_id}", response_model=ResourceResponse)
def get_resource(resource_id: UUID, db: Session = Depends(get_db)):
    resource = resource_crud.get_by_id(db, resource_id)

    if not resource:
        raise HTTPException(status_code=404, detail="Resource not found")

    return resource


@router.post("", status_code=201, response_model=ResourceResponse)
def create_resource(
    request: ResourceCreateRequest,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    resource = resource_crud.create(db, request, created_by_id=admin.id)
    logger.info(f"Created resource {resource.id}: {resource.title}")

    return resource_crud.get_by_id(db, resource.id)


@router.put("/{resource_id}", response_model=ResourceResponse)
def update_resource(
    resource_id: UUID,
    request: ResourceUpdateRequest,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    resource = resource_crud.update(db, resource_id, request)

    if not resource:
        raise HTTPException(status_code=404, detail="Resource not found")

    return resource_crud.get_by_id(db, resource_id)


@router.delete("/{resource_id}", response_model=MessageResponse)
def delete_resource(
    resource_id: UUID,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    if not resource_crud.delete(db, resource_id):
        raise HTTPException(status_code=404, detail="Resource not found")

    return MessageResponse(message="Resource deleted successfully")
