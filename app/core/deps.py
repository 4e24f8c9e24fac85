"""
FastAPI dependencies for admin authentication and list pagination.

These dependencies are used to protect endpoints and extract request context.
"""

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from pydantic import BaseModel
from sqlalchemy.orm import Session
from uuid import UUID

from app.core.config import settings
from app.core.database import get_db
from app.core.security import decode_token
from app.models.admin import Admin

# HTTP Bearer token scheme (Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> Admin:
    """
    Extract and validate the current admin from JWT token.

    This dependency:
    1. Extracts the Bearer token from Authorization header
    2. Decodes and validates the JWT
    3. Fetches the admin from the database
    4. Ensures the admin is active

    Raises:
        HTTPException 401: If token is missing, invalid or admin not found
        HTTPException 403: If the admin account is inactive
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    try:
        payload = decode_token(credentials.credentials)
        admin_id: str = payload.get("sub")
        if admin_id is None:
            raise credentials_exception
        admin_uuid = UUID(admin_id)
    except (JWTError, ValueError):
        raise credentials_exception

    admin = db.query(Admin).filter(Admin.id == admin_uuid).first()
    if admin is None:
        raise credentials_exception

    if not admin.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin account is inactive"
        )

    return admin


class PageParams(BaseModel):
    limit: int
    offset: int


def get_page_params(
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, description="Page size (capped at MAX_PAGE_SIZE)"),
    offset: int = Query(0, ge=0),
) -> PageParams:
    """Limit/offset query parameters, with the limit capped."""
    return PageParams(limit=min(limit, settings.MAX_PAGE_SIZE), offset=offset)
