from pydantic import AliasChoices, BaseModel, Field
from typing import Any, ClassVar, Dict, List, Optional, Tuple
from datetime import datetime
from uuid import UUID

from app.schemas.common import LookupResponse, PartialUpdate


class ResourceCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    url: str = Field(..., min_length=1)
    description: Optional[str] = None
    resource_type_id: Optional[int] = None
    status_id: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    rank: Optional[int] = None
    is_premium: bool = False


class ResourceUpdateRequest(PartialUpdate):
    non_nullable: ClassVar[Tuple[str, ...]] = ("title", "url", "is_premium")

    title: Optional[str] = Field(None, min_length=1, max_length=300)
    url: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    resource_type_id: Optional[int] = None
    status_id: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    rank: Optional[int] = None
    is_premium: Optional[bool] = None


class ResourceResponse(BaseModel):
    id: UUID
    title: str
    url: str
    description: Optional[str] = None
    resource_type_id: Optional[int] = None
    status_id: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = Field(None, validation_alias=AliasChoices("metadata_", "metadata"))
    tags: Optional[List[str]] = None
    rank: Optional[int] = None
    is_premium: bool = False
    resource_type: Optional[LookupResponse] = None
    status: Optional[LookupResponse] = None
    created_by_id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    class Config:
        from_attributes = True
