"""
Pydantic schemas for job board members (users).
"""

from pydantic import BaseModel, EmailStr, Field
from typing import ClassVar, Optional, Tuple
from datetime import datetime
from uuid import UUID

from app.models.user import UserRole
from app.schemas.common import LookupResponse, PartialUpdate


class UserCreateRequest(BaseModel):
    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    role: UserRole = UserRole.USER
    status_id: Optional[int] = None


class UserUpdateRequest(PartialUpdate):
    non_nullable: ClassVar[Tuple[str, ...]] = ("first_name",)

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    status_id: Optional[int] = None


class UserStatusUpdateRequest(BaseModel):
    status_id: int


class UserResponse(BaseModel):
    """User profile with its joined status"""
    id: UUID
    email: str
    first_name: str
    last_name: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    role: UserRole
    status_id: Optional[int] = None
    status: Optional[LookupResponse] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    class Config:
        from_attributes = True
