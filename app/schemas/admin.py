"""
Pydantic schemas for admin accounts and admin authentication.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import ClassVar, Optional, Tuple
from datetime import datetime
from uuid import UUID

from app.models.admin import AdminRole
from app.schemas.common import PartialUpdate


class AdminCreateRequest(BaseModel):
    email: EmailStr
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,  # bcrypt limit
    )
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: Optional[str] = None
    role: AdminRole = AdminRole.ADMIN
    status_id: Optional[int] = None


class AdminUpdateRequest(PartialUpdate):
    non_nullable: ClassVar[Tuple[str, ...]] = ("first_name", "role")

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = None
    role: Optional[AdminRole] = None
    status_id: Optional[int] = None


class AdminLoginRequest(BaseModel):
    email: EmailStr
    password: str


class AdminResponse(BaseModel):
    """Admin profile (no credentials)"""
    id: UUID
    email: str
    first_name: str
    last_name: Optional[str] = None
    role: AdminRole
    status_id: Optional[int] = None
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    """JWT token response."""
    access_token: str
    token_type: str = "bearer"
    admin: AdminResponse
