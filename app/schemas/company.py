from pydantic import AliasChoices, BaseModel, Field
from typing import Any, ClassVar, Dict, List, Optional, Tuple
from datetime import datetime
from uuid import UUID

from app.schemas.common import LookupResponse, PartialUpdate


class CompanyBase(BaseModel):
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    contact: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    rank: Optional[int] = None
    status_id: Optional[int] = None


class CompanyCreateRequest(CompanyBase):
    name: str = Field(..., min_length=1, max_length=200)
    is_premium: bool = False


class CompanyUpdateRequest(CompanyBase, PartialUpdate):
    non_nullable: ClassVar[Tuple[str, ...]] = ("name", "is_premium")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    is_premium: Optional[bool] = None


class CompanyResponse(BaseModel):
    id: UUID
    name: str
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = Field(None, validation_alias=AliasChoices("metadata_", "metadata"))
    contact: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    rank: Optional[int] = None
    is_premium: bool = False
    status_id: Optional[int] = None
    status: Optional[LookupResponse] = None
    created_by_id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CompanyListItem(CompanyResponse):
    """Company row in listings, with its number of open jobs"""
    open_jobs: int = 0
