import uuid
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, JSON, func
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship
from app.core.database import Base


class Company(Base):
    """
    An employer listed on the board.

    `metadata` holds free-form company facts (address, industry, social links)
    and `contact` the contact person; both are JSON objects.
    """
    __tablename__ = "companies"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String, nullable=False, index=True)
    short_description = Column(String, nullable=True)
    long_description = Column(Text, nullable=True)
    website_url = Column(String, nullable=True)
    logo_url = Column(String, nullable=True)
    location = Column(String, nullable=True, index=True)
    country = Column(String, nullable=True)

    # "metadata" is reserved on declarative classes
    metadata_ = Column("metadata", JSON().with_variant(JSONB(), "postgresql"), nullable=True)
    contact = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)
    tags = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)
    rank = Column(Integer, nullable=True)
    is_premium = Column(Boolean, default=False, nullable=False)

    status_id = Column(Integer, ForeignKey("statuses.id"), nullable=True, index=True)
    created_by_id = Column(UUID(as_uuid=True), ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    modified_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    status = relationship("Status")
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Company(id={self.id}, name='{self.name}')>"
