"""
Schemas for bulk job/company import.

Row fields are all optional on purpose: a row missing its title or name is
reported in the upload's error list instead of rejecting the whole request.
"""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from app.models.job import SalaryFrequency


class BulkJobInput(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    company_name: Optional[str] = None
    job_type_code: Optional[str] = None
    industry_code: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    salary_frequency: Optional[SalaryFrequency] = None
    currency_code: Optional[str] = None
    apply_url: Optional[str] = None


class BulkJobsRequest(BaseModel):
    jobs: Optional[List[BulkJobInput]] = None


class BulkCompanyInput(BaseModel):
    name: Optional[str] = None
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    contact: Optional[Dict[str, Any]] = None


class BulkCompaniesRequest(BaseModel):
    companies: Optional[List[BulkCompanyInput]] = None


class BulkRowError(BaseModel):
    """One failed row. `label` is the job title or company name."""
    row: int
    label: str
    error: str


class BulkUploadResponse(BaseModel):
    success: bool = True
    created: int
    failed: int
    errors: List[BulkRowError]


class CsvRowIssue(BaseModel):
    """A CSV row rejected by validation (never submitted)."""
    row: int
    label: str
    errors: List[str]


class CsvImportResponse(BaseModel):
    total_rows: int
    valid: int
    invalid: int
    invalid_rows: List[CsvRowIssue]
    uploaded: int
    failed: int
    errors: List[BulkRowError]
