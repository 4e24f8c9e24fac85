"""
CRUD operations for Resource model.
"""

from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.crud import lookup as lookup_crud
from app.crud.utils import apply_updates, column_values, paginate
from app.models.lookup import Status
from app.models.resource import Resource
from app.schemas.resource import ResourceCreateRequest, ResourceUpdateRequest


def _with_relations(query):
    return query.options(joinedload(Resource.resource_type), joinedload(Resource.status))


def create(db: Session, resource_data: ResourceCreateRequest, created_by_id: Optional[UUID] = None) -> Resource:
    values = column_values(resource_data.model_dump())
    if values.get("status_id") is None:
        values["status_id"] = lookup_crud.get_status_id(db, settings.DEFAULT_RESOURCE_STATUS)

    resource = Resource(**values, created_by_id=created_by_id)

    db.add(resource)
    db.commit()
    db.refresh(resource)

    return resource


def get_by_id(db: Session, resource_id: UUID) -> Optional[Resource]:
    return _with_relations(db.query(Resource)).filter(Resource.id == resource_id).first()


def get_multi(
    db: Session,
    offset: int = 0,
    limit: int = 10,
    resource_type_id: Optional[int] = None,
    status: Optional[str] = None,
    is_premium: Optional[bool] = None,
    search: Optional[str] = None,
) -> Tuple[List[Resource], int]:
    """
    Retrieve one page of resources, newest first.

    Returns:
        (resources on this page, total matching resources)
    """
    query = db.query(Resource)

    if resource_type_id is not None:
        query = query.filter(Resource.resource_type_id == resource_type_id)
    if status:
        query = query.filter(Resource.status.has(Status.code == status))
    if is_premium is not None:
        query = query.filter(Resource.is_premium == is_premium)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Resource.title.ilike(pattern), Resource.description.ilike(pattern)))

    query = _with_relations(query).order_by(Resource.created_at.desc(), Resource.id)
    return paginate(query, limit, offset)


def update(db: Session, resource_id: UUID, resource_data: ResourceUpdateRequest) -> Optional[Resource]:
    resource = get_by_id(db, resource_id)
    if not resource:
        return None

    apply_updates(resource, resource_data.model_dump(exclude_unset=True))

    db.commit()
    db.refresh(resource)

    return resource


def delete(db: Session, resource_id: UUID) -> bool:
    resource = db.query(Resource).filter(Resource.id == resource_id).first()
    if not resource:
        return False

    db.delete(resource)
    db.commit()

    return True
