"""
CRUD operations for lookup tables (statuses, job types, industries,
resource types, currencies) and the derived dropdown lists.

By-code getters return None for unknown codes; a missing lookup is not an
error for callers.
"""

import logging
from typing import Dict, List, Optional, Type
from sqlalchemy.orm import Session

from app.models.company import Company
from app.models.job import Job
from app.models.job_source import JobSource
from app.models.lookup import Status, JobType, Industry, ResourceType, Currency

logger = logging.getLogger(__name__)


DEFAULT_STATUSES = [
    ("active", "Active"),
    ("inactive", "Inactive"),
    ("pending", "Pending"),
    ("published", "Published"),
    ("unpublished", "Unpublished"),
    ("archived", "Archived"),
    ("enabled", "Enabled"),
    ("disabled", "Disabled"),
    ("verified", "Verified"),
    ("unverified", "Unverified"),
    ("deleted", "Deleted"),
]

DEFAULT_JOB_TYPES = [
    ("full-time", "Full Time"),
    ("part-time", "Part Time"),
    ("contract", "Contract"),
    ("internship", "Internship"),
    ("freelance", "Freelance"),
]

DEFAULT_INDUSTRIES = [
    ("it", "Information Technology"),
    ("energy", "Energy"),
    ("hospitality", "Hospitality"),
    ("healthcare", "Healthcare"),
    ("finance", "Finance"),
    ("education", "Education"),
    ("manufacturing", "Manufacturing"),
    ("retail", "Retail"),
    ("construction", "Construction"),
    ("transportation", "Transportation"),
    ("real-estate", "Real Estate"),
    ("media-entertainment", "Media & Entertainment"),
    ("telecommunications", "Telecommunications"),
    ("agriculture", "Agriculture"),
    ("other", "Other"),
]

DEFAULT_RESOURCE_TYPES = [
    ("blog", "Blog"),
    ("course", "Course"),
    ("tool", "Tool"),
    ("video", "Video"),
    ("podcast", "Podcast"),
    ("ebook", "E-Book"),
    ("other", "Other"),
]

# (code, name, symbol)
DEFAULT_CURRENCIES = [
    ("AED", "UAE Dirham", "د.إ"),
    ("SAR", "Saudi Riyal", "﷼"),
    ("QAR", "Qatari Riyal", "ر.ق"),
    ("KWD", "Kuwaiti Dinar", "د.ك"),
    ("BHD", "Bahraini Dinar", ".د.ب"),
    ("OMR", "Omani Rial", "ر.ع."),
    ("USD", "US Dollar", "$"),
    ("EUR", "Euro", "€"),
]


def _by_code(db: Session, model: Type, code: str):
    return db.query(model).filter(model.code == code).first()


# Statuses
def get_statuses(db: Session) -> List[Status]:
    return db.query(Status).order_by(Status.name.asc()).all()


def get_status_by_code(db: Session, code: str) -> Optional[Status]:
    return _by_code(db, Status, code)


def get_status_id(db: Session, code: str) -> Optional[int]:
    """Resolve a status code to its id (None if the code is not seeded)."""
    status = get_status_by_code(db, code)
    return status.id if status else None


# Job types
def get_job_types(db: Session) -> List[JobType]:
    return db.query(JobType).order_by(JobType.name.asc()).all()


def get_job_type_by_code(db: Session, code: str) -> Optional[JobType]:
    return _by_code(db, JobType, code)


# Industries
def get_industries(db: Session) -> List[Industry]:
    return db.query(Industry).order_by(Industry.name.asc()).all()


def get_industry_by_code(db: Session, code: str) -> Optional[Industry]:
    return _by_code(db, Industry, code)


# Resource types
def get_resource_types(db: Session) -> List[ResourceType]:
    return db.query(ResourceType).order_by(ResourceType.name.asc()).all()


def get_resource_type_by_code(db: Session, code: str) -> Optional[ResourceType]:
    return _by_code(db, ResourceType, code)


# Currencies
def get_currencies(db: Session) -> List[Currency]:
    return db.query(Currency).order_by(Currency.code.asc()).all()


def get_currency_by_code(db: Session, code: str) -> Optional[Currency]:
    return _by_code(db, Currency, code)


# Derived lists
def get_job_locations(db: Session) -> List[str]:
    """Sorted distinct non-empty job locations."""
    rows = db.query(Job.location).filter(Job.location.isnot(None)).distinct().all()
    return sorted({location for (location,) in rows if location})


def get_company_locations(db: Session) -> List[str]:
    """Sorted distinct non-empty company locations."""
    rows = db.query(Company.location).filter(Company.location.isnot(None)).distinct().all()
    return sorted({location for (location,) in rows if location})


def get_job_sources(db: Session) -> List[JobSource]:
    return db.query(JobSource).order_by(JobSource.name.asc()).all()


def get_companies(db: Session) -> List[Company]:
    return db.query(Company).order_by(Company.name.asc()).all()


def get_all(db: Session) -> Dict[str, list]:
    """Every lookup list at once (used to populate admin forms)."""
    return {
        "statuses": get_statuses(db),
        "job_types": get_job_types(db),
        "industries": get_industries(db),
        "resource_types": get_resource_types(db),
        "currencies": get_currencies(db),
        "sources": get_job_sources(db),
    }


def seed_defaults(db: Session) -> Dict[str, int]:
    """
    Insert the default lookup rows that are missing.

    Idempotent: existing codes are left untouched.

    Returns:
        Number of rows inserted per table
    """
    inserted = {}

    for model, defaults in (
        (Status, DEFAULT_STATUSES),
        (JobType, DEFAULT_JOB_TYPES),
        (Industry, DEFAULT_INDUSTRIES),
        (ResourceType, DEFAULT_RESOURCE_TYPES),
    ):
        existing = {code for (code,) in db.query(model.code).all()}
        rows = [model(code=code, name=name) for code, name in defaults if code not in existing]
        db.add_all(rows)
        inserted[model.__tablename__] = len(rows)

    existing = {code for (code,) in db.query(Currency.code).all()}
    rows = [
        Currency(code=code, name=name, symbol=symbol)
        for code, name, symbol in DEFAULT_CURRENCIES
        if code not in existing
    ]
    db.add_all(rows)
    inserted[Currency.__tablename__] = len(rows)

    db.commit()
    logger.info(f"Seeded lookup tables: {inserted}")
    return inserted
