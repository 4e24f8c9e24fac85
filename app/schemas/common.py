"""
Shared response schemas: pagination envelope and lookup rows.
"""

import math
from typing import ClassVar, Dict, Generic, List, Optional, Tuple, TypeVar
from uuid import UUID
from pydantic import BaseModel, model_validator

T = TypeVar("T")


class PartialUpdate(BaseModel):
    """
    Base for PUT bodies where omitted fields are left untouched.

    Fields listed in `non_nullable` may be omitted but not sent as null.
    """
    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for field in self.non_nullable:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class QueryPagination(BaseModel):
    """Pagination block returned with every list."""
    count: int
    current_page: int
    total_count: int
    total_pages: int

    @classmethod
    def build(cls, count: int, total_count: int, limit: int, offset: int) -> "QueryPagination":
        return cls(
            count=count,
            current_page=offset // limit + 1,
            total_count=total_count,
            total_pages=math.ceil(total_count / limit) if total_count else 0,
        )


class QueryResponse(BaseModel, Generic[T]):
    """List envelope: {"list": [...], "pagination": {...}, "stats": {...}}"""
    list: List[T]
    pagination: QueryPagination
    stats: Optional[Dict[str, int]] = None


class LookupResponse(BaseModel):
    """A lookup row (status, job type, industry, resource type)."""
    id: int
    name: str
    code: str

    class Config:
        from_attributes = True


class CurrencyResponse(LookupResponse):
    symbol: Optional[str] = None


class CompanyOption(BaseModel):
    """Minimal company reference used in dropdowns and nested job reads."""
    id: UUID
    name: str
    logo_url: Optional[str] = None
    location: Optional[str] = None

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str
