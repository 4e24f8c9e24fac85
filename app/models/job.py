import enum
import uuid
from sqlalchemy import Column, Integer, Float, String, Text, Boolean, DateTime, Enum, ForeignKey, JSON, func
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship
from app.core.database import Base


class SalaryFrequency(str, enum.Enum):
    """How often the advertised salary range is paid."""
    MONTHLY = "monthly"
    ANNUALLY = "annually"


class Job(Base):
    """
    A job listing.

    Lookup references (type, industry, currency, status) are plain foreign
    keys; reads join them in as nested objects.
    """
    __tablename__ = "jobs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)

    company_id = Column(UUID(as_uuid=True), ForeignKey("companies.id", ondelete="CASCADE"), nullable=True, index=True)
    job_type_id = Column(Integer, ForeignKey("job_types.id"), nullable=True, index=True)
    industry_id = Column(Integer, ForeignKey("industries.id"), nullable=True, index=True)
    currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=True)
    status_id = Column(Integer, ForeignKey("statuses.id"), nullable=True, index=True)
    source_id = Column(Integer, ForeignKey("jobs_sources.id", ondelete="SET NULL"), nullable=True)

    location = Column(String, nullable=True, index=True)
    country = Column(String, nullable=True)
    salary_min = Column(Float, nullable=True)
    salary_max = Column(Float, nullable=True)
    salary_frequency = Column(Enum(SalaryFrequency, values_callable=lambda x: [e.value for e in x]), nullable=True)
    apply_url = Column(String, nullable=True)

    metadata_ = Column("metadata", JSON().with_variant(JSONB(), "postgresql"), nullable=True)
    tags = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)
    rank = Column(Integer, nullable=True)
    is_premium = Column(Boolean, default=False, nullable=False)

    created_by_id = Column(UUID(as_uuid=True), ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    modified_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), index=True)

    # Relationships
    company = relationship("Company", back_populates="jobs")
    job_type = relationship("JobType")
    industry = relationship("Industry")
    currency = relationship("Currency")
    status = relationship("Status")
    source = relationship("JobSource")

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}')>"
