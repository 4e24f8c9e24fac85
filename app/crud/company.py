"""
CRUD operations for Company model.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.crud import lookup as lookup_crud
from app.crud.utils import apply_updates, column_values, paginate
from app.models.company import Company
from app.models.job import Job
from app.models.lookup import Status
from app.schemas.bulk import BulkCompanyInput
from app.schemas.company import CompanyCreateRequest, CompanyUpdateRequest

logger = logging.getLogger(__name__)


def create(db: Session, company_data: CompanyCreateRequest, created_by_id: Optional[UUID] = None) -> Company:
    """
    Create a new company.

    Args:
        db: Database session
        company_data: Validated company data
        created_by_id: Admin creating the company, if any

    Returns:
        Created Company instance
    """
    values = column_values(company_data.model_dump())
    if values.get("status_id") is None:
        values["status_id"] = lookup_crud.get_status_id(db, settings.DEFAULT_COMPANY_STATUS)

    company = Company(**values, created_by_id=created_by_id)

    db.add(company)
    db.commit()
    db.refresh(company)

    return company


def get_by_id(db: Session, company_id: UUID) -> Optional[Company]:
    return (
        db.query(Company)
        .options(joinedload(Company.status))
        .filter(Company.id == company_id)
        .first()
    )


def get_multi(
    db: Session,
    offset: int = 0,
    limit: int = 10,
    location: Optional[str] = None,
    country: Optional[str] = None,
    status: Optional[str] = None,
    is_premium: Optional[bool] = None,
    search: Optional[str] = None,
) -> Tuple[List[Company], int]:
    """
    Retrieve one page of companies ordered by name.

    Args:
        location: Case-insensitive substring of the company location
        status: Status code (e.g. "active")
        search: Case-insensitive substring of name or descriptions

    Returns:
        (companies on this page, total matching companies)
    """
    query = db.query(Company)

    if location:
        query = query.filter(Company.location.ilike(f"%{location}%"))
    if country:
        query = query.filter(Company.country == country)
    if status:
        query = query.filter(Company.status.has(Status.code == status))
    if is_premium is not None:
        query = query.filter(Company.is_premium == is_premium)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            Company.name.ilike(pattern),
            Company.short_description.ilike(pattern),
            Company.long_description.ilike(pattern),
        ))

    query = query.options(joinedload(Company.status)).order_by(Company.name.asc(), Company.id)
    return paginate(query, limit, offset)


def get_featured(db: Session, limit: int = 6) -> List[Company]:
    """Newest companies."""
    return (
        db.query(Company)
        .options(joinedload(Company.status))
        .order_by(Company.created_at.desc(), Company.id)
        .limit(limit)
        .all()
    )


def get_job_count(db: Session, company_id: UUID) -> int:
    return db.query(func.count(Job.id)).filter(Job.company_id == company_id).scalar() or 0


def get_job_counts(db: Session, company_ids: List[UUID]) -> Dict[UUID, int]:
    """Job count per company for a page of companies, in one query."""
    if not company_ids:
        return {}

    rows = (
        db.query(Job.company_id, func.count(Job.id))
        .filter(Job.company_id.in_(company_ids))
        .group_by(Job.company_id)
        .all()
    )
    return {company_id: count for company_id, count in rows}


def update(db: Session, company_id: UUID, company_data: CompanyUpdateRequest) -> Optional[Company]:
    company = get_by_id(db, company_id)
    if not company:
        return None

    apply_updates(company, company_data.model_dump(exclude_unset=True))

    db.commit()
    db.refresh(company)

    return company


def delete(db: Session, company_id: UUID) -> bool:
    """
    Delete a company and, through the relationship cascade, its jobs.

    Returns:
        True if deleted, False if not found
    """
    company = db.query(Company).filter(Company.id == company_id).first()
    if not company:
        return False

    db.delete(company)
    db.commit()

    logger.info(f"Deleted company {company_id}")
    return True


def bulk_create(
    db: Session,
    rows: List[BulkCompanyInput],
    created_by_id: Optional[UUID] = None,
) -> Tuple[int, List[Dict[str, Any]]]:
    """
    Insert companies one row at a time; failed rows are rolled back and recorded.

    Returns:
        (number created, list of {"row", "label", "error"} with 1-based rows)
    """
    created = 0
    errors = []
    default_status_id = lookup_crud.get_status_id(db, settings.DEFAULT_COMPANY_STATUS)

    for index, row in enumerate(rows, start=1):
        label = row.name or "Unnamed"
        try:
            if not row.name or not row.name.strip():
                raise ValueError("Name is required")

            values = column_values(row.model_dump())
            values["name"] = row.name.strip()
            company = Company(**values, status_id=default_status_id, created_by_id=created_by_id)
            db.add(company)
            db.commit()
            created += 1
        except Exception as e:
            db.rollback()
            logger.warning(f"Bulk company row {index} failed: {e}")
            errors.append({"row": index, "label": label, "error": str(e)})

    return created, errors
