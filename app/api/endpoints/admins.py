"""
Admin account management (admin-only).
"""

import logging
from uuid import UUID
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import PageParams, get_current_admin, get_page_params
from app.crud import admin as admin_crud
from app.models.admin import Admin, AdminRole
from app.schemas.admin import AdminCreateRequest, AdminResponse, AdminUpdateRequest
from app.schemas.common import MessageResponse, QueryPagination, QueryResponse

router = APIRouter(prefix="/admins", tags=["Admins"])
logger = logging.getLogger(__name__)


def _require_super_admin(current_admin: Admin, action: str):
    if current_admin.role != AdminRole.SUPER_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Only super admins can {action}"
        )


@router.get("", response_model=QueryResponse[AdminResponse])
def list_admins(
    page: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    admins, total = admin_crud.get_multi(db, offset=page.offset, limit=page.limit)

    return QueryResponse[AdminResponse](
        list=admins,
        pagination=QueryPagination.build(len(admins), total, page.limit, page.offset),
    )


@router.get("/{admin_id}", response_model=AdminResponse)
def get_admin(
    admin_id: UUID,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    admin = admin_crud.get_by_id(db, admin_id)

    if not admin:
        raise HTTPException(status_code=404, detail="Admin not found")

    return admin


@router.post("", status_code=201, response_model=AdminResponse)
def create_admin(
    request: AdminCreateRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    """Create an admin account. Only super admins may grant a role other than admin."""
    if request.role != AdminRole.ADMIN:
        _require_super_admin(current_admin, "assign admin roles")

    if admin_crud.get_by_email(db, request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    admin = admin_crud.create(db, request)
    logger.info(f"Admin {admin.email} created by {current_admin.email}")

    return admin


@router.put("/{admin_id}", response_model=AdminResponse)
def update_admin(
    admin_id: UUID,
    request: AdminUpdateRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    """Update an admin account. Role changes and edits to super admins need a super admin."""
    admin = admin_crud.get_by_id(db, admin_id)

    if not admin:
        raise HTTPException(status_code=404, detail="Admin not found")

    if admin.role == AdminRole.SUPER_ADMIN:
        _require_super_admin(current_admin, "modify super admin accounts")
    if request.role is not None and request.role != admin.role:
        _require_super_admin(current_admin, "assign admin roles")

    return admin_crud.update(db, admin_id, request)


@router.delete("/{admin_id}", response_model=MessageResponse)
def delete_admin(
    admin_id: UUID,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    """Delete an admin account. Admins cannot delete themselves."""
    if admin_id == current_admin.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot delete your own account"
        )

    admin = admin_crud.get_by_id(db, admin_id)

    if not admin:
        raise HTTPException(status_code=404, detail="Admin not found")

    if admin.role == AdminRole.SUPER_ADMIN:
        _require_super_admin(current_admin, "delete super admin accounts")

    admin_crud.delete(db, admin_id)

    logger.info(f"Admin {admin_id} deleted by {current_admin.email}")
    return MessageResponse(message="Admin deleted successfully")
