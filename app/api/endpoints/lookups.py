"""
Lookup lists for filters and admin forms.

GET /lookups?type=<kind> returns one list; type=all returns every lookup
table at once.
"""

import logging
from typing import Any, Callable, Dict
from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.crud import lookup as lookup_crud
from app.schemas.common import CompanyOption, CurrencyResponse, LookupResponse
from app.schemas.job_source import JobSourceResponse

router = APIRouter(prefix="/lookups", tags=["Lookups"])
logger = logging.getLogger(__name__)


def _dump(schema, rows):
    return [schema.model_validate(row).model_dump(mode="json") for row in rows]


LOOKUP_LOADERS: Dict[str, Callable[[Session], Any]] = {
    "statuses": lambda db: _dump(LookupResponse, lookup_crud.get_statuses(db)),
    "job-types": lambda db: _dump(LookupResponse, lookup_crud.get_job_types(db)),
    "industries": lambda db: _dump(LookupResponse, lookup_crud.get_industries(db)),
    "resource-types": lambda db: _dump(LookupResponse, lookup_crud.get_resource_types(db)),
    "currencies": lambda db: _dump(CurrencyResponse, lookup_crud.get_currencies(db)),
    "job-locations": lookup_crud.get_job_locations,
    "company-locations": lookup_crud.get_company_locations,
    "sources": lambda db: _dump(JobSourceResponse, lookup_crud.get_job_sources(db)),
    "companies": lambda db: _dump(CompanyOption, lookup_crud.get_companies(db)),
}

ALL_SCHEMAS = {
    "statuses": LookupResponse,
    "job_types": LookupResponse,
    "industries": LookupResponse,
    "resource_types": LookupResponse,
    "currencies": CurrencyResponse,
    "sources": JobSourceResponse,
}


@router.get("")
def get_lookups(
    lookup_type: str = Query(..., alias="type", description="One of: " + ", ".join([*LOOKUP_LOADERS, "all"])),
    db: Session = Depends(get_db)
):
    """Return the requested lookup list (400 for an unknown type)."""
    if lookup_type == "all":
        return {
            key: _dump(ALL_SCHEMAS[key], rows)
            for key, rows in lookup_crud.get_all(db).items()
        }

    loader = LOOKUP_LOADERS.get(lookup_type)
    if loader is None:
        raise HTTPException(status_code=400, detail=f"Invalid lookup type: {lookup_type}")

    return loader(db)
