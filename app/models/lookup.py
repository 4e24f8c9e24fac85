"""
Lookup (reference) tables joined into entity queries.

Each lookup row has an integer id, a display name and a unique code.
"""

from sqlalchemy import Column, Integer, String, DateTime, func
from app.core.database import Base


class LookupMixin:
    """Columns shared by every lookup table."""
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    code = Column(String, nullable=False, unique=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    modified_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, code='{self.code}')>"


class Status(LookupMixin, Base):
    __tablename__ = "statuses"


class JobType(LookupMixin, Base):
    __tablename__ = "job_types"


class Industry(LookupMixin, Base):
    __tablename__ = "industries"


class ResourceType(LookupMixin, Base):
    __tablename__ = "resource_types"


class Currency(LookupMixin, Base):
    __tablename__ = "currencies"

    symbol = Column(String, nullable=True)
