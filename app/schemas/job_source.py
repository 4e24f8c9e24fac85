from pydantic import BaseModel, Field
from typing import ClassVar, Optional, Tuple
from datetime import datetime

from app.schemas.common import PartialUpdate


class JobSourceCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    code: str = Field(..., min_length=1, max_length=100)
    base_url: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: bool = True


class JobSourceUpdateRequest(PartialUpdate):
    non_nullable: ClassVar[Tuple[str, ...]] = ("name", "code", "is_active")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    code: Optional[str] = Field(None, min_length=1, max_length=100)
    base_url: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: Optional[bool] = None


class JobSourceResponse(BaseModel):
    id: int
    name: str
    code: str
    base_url: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    class Config:
        from_attributes = True
