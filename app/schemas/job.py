from pydantic import AliasChoices, BaseModel, Field
from typing import Any, ClassVar, Dict, List, Optional, Tuple
from datetime import datetime
from uuid import UUID

from app.models.job import SalaryFrequency
from app.schemas.common import CompanyOption, CurrencyResponse, LookupResponse, PartialUpdate


class JobBase(BaseModel):
    description: Optional[str] = None
    company_id: Optional[UUID] = None
    job_type_id: Optional[int] = None
    industry_id: Optional[int] = None
    currency_id: Optional[int] = None
    status_id: Optional[int] = None
    source_id: Optional[int] = None
    location: Optional[str] = None
    country: Optional[str] = None
    salary_min: Optional[float] = Field(None, ge=0)
    salary_max: Optional[float] = Field(None, ge=0)
    salary_frequency: Optional[SalaryFrequency] = None
    apply_url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    rank: Optional[int] = None


class JobCreateRequest(JobBase):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1, max_length=200)
    is_premium: bool = False


class JobUpdateRequest(JobBase, PartialUpdate):
    """Partial update: only fields present in the request body are written"""
    non_nullable: ClassVar[Tuple[str, ...]] = ("title", "is_premium")

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    is_premium: Optional[bool] = None


class JobResponse(BaseModel):
    """Job with its joined lookups"""
    id: UUID
    title: str
    description: Optional[str] = None
    company_id: Optional[UUID] = None
    job_type_id: Optional[int] = None
    industry_id: Optional[int] = None
    currency_id: Optional[int] = None
    status_id: Optional[int] = None
    source_id: Optional[int] = None
    location: Optional[str] = None
    country: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    salary_frequency: Optional[SalaryFrequency] = None
    apply_url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = Field(None, validation_alias=AliasChoices("metadata_", "metadata"))
    tags: Optional[List[str]] = None
    rank: Optional[int] = None
    is_premium: bool = False
    created_by_id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    company: Optional[CompanyOption] = None
    job_type: Optional[LookupResponse] = None
    industry: Optional[LookupResponse] = None
    currency: Optional[CurrencyResponse] = None
    status: Optional[LookupResponse] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models
