"""
Admin-only management of public site members.
"""

import logging
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import PageParams, get_current_admin, get_page_params
from app.crud import user as user_crud
from app.models.admin import Admin
from app.schemas.common import MessageResponse, QueryPagination, QueryResponse
from app.schemas.user import UserCreateRequest, UserResponse, UserStatusUpdateRequest, UserUpdateRequest

router = APIRouter(prefix="/users", tags=["Users"], dependencies=[Depends(get_current_admin)])
logger = logging.getLogger(__name__)


@router.get("", response_model=QueryResponse[UserResponse])
def list_users(
    page: PageParams = Depends(get_page_params),
    status_code: Optional[str] = Query(None, alias="status", description="Status code, e.g. 'verified'"),
    search: Optional[str] = None,
    include_stats: bool = False,
    db: Session = Depends(get_db)
):
    """
    List users, newest first.

    `search` matches first name, last name or email. `include_stats` adds
    total/verified/unverified/disabled counts.
    """
    users, total = user_crud.get_multi(
        db, offset=page.offset, limit=page.limit, status=status_code, search=search
    )

    return QueryResponse[UserResponse](
        list=users,
        pagination=QueryPagination.build(len(users), total, page.limit, page.offset),
        stats=user_crud.get_stats(db) if include_stats else None,
    )


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UUID, db: Session = Depends(get_db)):
    user = user_crud.get_by_id(db, user_id)

    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return user


@router.post("", status_code=201, response_model=UserResponse)
def create_user(request: UserCreateRequest, db: Session = Depends(get_db)):
    if user_crud.get_by_email(db, request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    user = user_crud.create(db, request)
    logger.info(f"Created user {user.id}: {user.email}")

    return user_crud.get_by_id(db, user.id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: UUID, request: UserUpdateRequest, db: Session = Depends(get_db)):
    user = user_crud.update(db, user_id, request)

    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return user_crud.get_by_id(db, user_id)


@router.patch("/{user_id}/status", response_model=UserResponse)
def update_user_status(user_id: UUID, request: UserStatusUpdateRequest, db: Session = Depends(get_db)):
    """Verify, disable or otherwise change a user's status."""
    user = user_crud.update_status(db, user_id, request.status_id)

    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    logger.info(f"User {user_id} status set to {request.status_id}")
    return user_crud.get_by_id(db, user_id)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    if not user_crud.delete(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")

    return MessageResponse(message="User deleted successfully")
