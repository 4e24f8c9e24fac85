"""
Admin back-office endpoints: sign-in and the overview dashboard.

- POST /admin/auth/login: Exchange email + password for a bearer token
- GET /admin/auth/me: Profile of the signed-in admin
- GET /admin/stats: Counts for the overview page
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_admin
from app.core.security import create_access_token
from app.crud import admin as admin_crud
from app.crud import job as job_crud
from app.crud import job_source as job_source_crud
from app.crud import user as user_crud
from app.models.admin import Admin
from app.models.company import Company
from app.models.resource import Resource
from app.schemas.admin import AdminLoginRequest, AdminResponse, TokenResponse

router = APIRouter(prefix="/admin", tags=["Admin"])
logger = logging.getLogger(__name__)


@router.post("/auth/login", response_model=TokenResponse)
def login(request: AdminLoginRequest, db: Session = Depends(get_db)):
    """
    Authenticate an admin and return a JWT access token.

    Updates last_login_at on success.
    """
    admin = admin_crud.authenticate(db, request.email, request.password)
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not admin.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin account is inactive"
        )

    logger.info(f"Admin logged in: {admin.email}")

    access_token = create_access_token(data={"sub": str(admin.id), "role": admin.role.value})
    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        admin=AdminResponse.model_validate(admin)
    )


@router.get("/auth/me", response_model=AdminResponse)
def read_current_admin(admin: Admin = Depends(get_current_admin)):
    return admin


@router.get("/stats")
def get_overview_stats(
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    """Job, user and source statistics plus company/resource totals."""
    return {
        "jobs": job_crud.get_stats(db),
        "users": user_crud.get_stats(db),
        "sources": job_source_crud.get_stats(db),
        "total_companies": db.query(func.count(Company.id)).scalar() or 0,
        "total_resources": db.query(func.count(Resource.id)).scalar() or 0,
    }
