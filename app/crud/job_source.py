"""
CRUD operations for JobSource model.

Codes are unique; callers check `get_by_code` before writing so a clash is
reported as a client error rather than an integrity failure.
"""

from typing import Dict, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.crud.utils import apply_updates, paginate
from app.models.job_source import JobSource
from app.schemas.job_source import JobSourceCreateRequest, JobSourceUpdateRequest


def create(db: Session, source_data: JobSourceCreateRequest) -> JobSource:
    source = JobSource(**source_data.model_dump())

    db.add(source)
    db.commit()
    db.refresh(source)

    return source


def get_by_id(db: Session, source_id: int) -> Optional[JobSource]:
    return db.query(JobSource).filter(JobSource.id == source_id).first()


def get_by_code(db: Session, code: str) -> Optional[JobSource]:
    return db.query(JobSource).filter(JobSource.code == code).first()


def get_multi(
    db: Session,
    offset: int = 0,
    limit: int = 10,
    is_active: Optional[bool] = None,
) -> Tuple[List[JobSource], int]:
    query = db.query(JobSource)
    if is_active is not None:
        query = query.filter(JobSource.is_active == is_active)

    query = query.order_by(JobSource.name.asc(), JobSource.id)
    return paginate(query, limit, offset)


def update(db: Session, source_id: int, source_data: JobSourceUpdateRequest) -> Optional[JobSource]:
    source = get_by_id(db, source_id)
    if not source:
        return None

    apply_updates(source, source_data.model_dump(exclude_unset=True))

    db.commit()
    db.refresh(source)

    return source


def delete(db: Session, source_id: int) -> bool:
    source = get_by_id(db, source_id)
    if not source:
        return False

    db.delete(source)
    db.commit()

    return True


def get_stats(db: Session) -> Dict[str, int]:
    total = db.query(func.count(JobSource.id)).scalar() or 0
    active = db.query(func.count(JobSource.id)).filter(JobSource.is_active.is_(True)).scalar() or 0
    return {"total": total, "active": active, "inactive": total - active}
