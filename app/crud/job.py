"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
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
from app.models.lookup import Status, JobType, Industry, Currency
from app.schemas.bulk import BulkJobInput
from app.schemas.job import JobCreateRequest, JobUpdateRequest

logger = logging.getLogger(__name__)

STAT_STATUSES = ("published", "unpublished", "pending", "archived")


def _with_relations(query):
    return query.options(
        joinedload(Job.company),
        joinedload(Job.job_type),
        joinedload(Job.industry),
        joinedload(Job.currency),
        joinedload(Job.status),
    )


def create(db: Session, job_data: JobCreateRequest, created_by_id: Optional[UUID] = None) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data
        created_by_id: Admin creating the job, if any

    Returns:
        Created Job instance with id
    """
    values = column_values(job_data.model_dump())
    if values.get("status_id") is None:
        values["status_id"] = lookup_crud.get_status_id(db, settings.DEFAULT_JOB_STATUS)

    db_job = Job(**values, created_by_id=created_by_id)

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: UUID) -> Optional[Job]:
    """
    Retrieve a job by its ID, with its company and lookups joined.

    Args:
        db: Database session
        job_id: Job ID to retrieve

    Returns:
        Job instance if found, None otherwise
    """
    return _with_relations(db.query(Job)).filter(Job.id == job_id).first()


def get_multi(
    db: Session,
    offset: int = 0,
    limit: int = 10,
    job_type_id: Optional[int] = None,
    industry_id: Optional[int] = None,
    currency_id: Optional[int] = None,
    company_id: Optional[UUID] = None,
    source_id: Optional[int] = None,
    country: Optional[str] = None,
    status: Optional[str] = None,
    is_premium: Optional[bool] = None,
    location: Optional[str] = None,
    search: Optional[str] = None,
) -> Tuple[List[Job], int]:
    """
    Retrieve one page of jobs with optional filtering.

    Args:
        db: Database session
        offset: Number of records to skip
        limit: Maximum number of records to return
        status: Status code (e.g. "published")
        location: Case-insensitive substring of the job location
        search: Case-insensitive substring of title or description

    Returns:
        (jobs on this page, total matching jobs)
    """
    query = db.query(Job)

    if job_type_id is not None:
        query = query.filter(Job.job_type_id == job_type_id)
    if industry_id is not None:
        query = query.filter(Job.industry_id == industry_id)
    if currency_id is not None:
        query = query.filter(Job.currency_id == currency_id)
    if company_id is not None:
        query = query.filter(Job.company_id == company_id)
    if source_id is not None:
        query = query.filter(Job.source_id == source_id)
    if country:
        query = query.filter(Job.country == country)
    if status:
        query = query.filter(Job.status.has(Status.code == status))
    if is_premium is not None:
        query = query.filter(Job.is_premium == is_premium)
    if location:
        query = query.filter(Job.location.ilike(f"%{location}%"))
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Job.title.ilike(pattern), Job.description.ilike(pattern)))

    query = _with_relations(query).order_by(Job.modified_at.desc(), Job.id)
    return paginate(query, limit, offset)


def get_by_company(db: Session, company_id: UUID) -> List[Job]:
    """All jobs of a company, newest first."""
    return (
        _with_relations(db.query(Job))
        .filter(Job.company_id == company_id)
        .order_by(Job.created_at.desc(), Job.id)
        .all()
    )


def get_featured(db: Session, limit: int = 6) -> List[Job]:
    """Newest published jobs."""
    return (
        _with_relations(db.query(Job))
        .filter(Job.status.has(Status.code == "published"))
        .order_by(Job.created_at.desc(), Job.id)
        .limit(limit)
        .all()
    )


def update(db: Session, job_id: UUID, job_data: JobUpdateRequest) -> Optional[Job]:
    """
    Update the fields present in the request.

    Returns:
        Updated Job instance if found, None otherwise
    """
    job = get_by_id(db, job_id)
    if not job:
        return None

    apply_updates(job, job_data.model_dump(exclude_unset=True))

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job_id: UUID) -> bool:
    """
    Delete a job.

    Returns:
        True if deleted, False if not found
    """
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True


def get_stats(db: Session) -> Dict[str, int]:
    """Total job count plus one count per tracked status code."""
    stats = {"total": db.query(func.count(Job.id)).scalar() or 0}

    rows = (
        db.query(Status.code, func.count(Job.id))
        .join(Job, Job.status_id == Status.id)
        .filter(Status.code.in_(STAT_STATUSES))
        .group_by(Status.code)
        .all()
    )
    for code, count in rows:
        stats[code] = count

    return stats


def _resolve(db: Session, model, column, value: Optional[str], label: str) -> Optional[Any]:
    if not value:
        return None
    row = db.query(model).filter(func.lower(column) == value.strip().lower()).first()
    if not row:
        raise ValueError(f"Unknown {label}: {value}")
    return row.id


def bulk_create(
    db: Session,
    rows: List[BulkJobInput],
    created_by_id: Optional[UUID] = None,
) -> Tuple[int, List[Dict[str, Any]]]:
    """
    Insert jobs one row at a time.

    Company name and lookup codes are resolved case-insensitively. A row that
    fails is rolled back and recorded; the remaining rows are still processed.

    Returns:
        (number created, list of {"row", "label", "error"} with 1-based rows)
    """
    created = 0
    errors = []
    default_status_id = lookup_crud.get_status_id(db, settings.DEFAULT_JOB_STATUS)

    for index, row in enumerate(rows, start=1):
        label = row.title or "Untitled"
        try:
            if not row.title or not row.title.strip():
                raise ValueError("Title is required")

            job = Job(
                title=row.title.strip(),
                description=row.description,
                company_id=_resolve(db, Company, Company.name, row.company_name, "company"),
                job_type_id=_resolve(db, JobType, JobType.code, row.job_type_code, "job type"),
                industry_id=_resolve(db, Industry, Industry.code, row.industry_code, "industry"),
                currency_id=_resolve(db, Currency, Currency.code, row.currency_code, "currency"),
                status_id=default_status_id,
                location=row.location,
                country=row.country,
                salary_min=row.salary_min,
                salary_max=row.salary_max,
                salary_frequency=row.salary_frequency,
                apply_url=row.apply_url,
                created_by_id=created_by_id,
            )
            db.add(job)
            db.commit()
            created += 1
        except Exception as e:
            db.rollback()
            logger.warning(f"Bulk job row {index} failed: {e}")
            errors.append({"row": index, "label": label, "error": str(e)})

    return created, errors
