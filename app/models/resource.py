import uuid
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, JSON, func
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship
from app.core.database import Base


class Resource(Base):
    """A career-content link (article, course, tool, video...)."""
    __tablename__ = "resources"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    url = Column(String, nullable=False)

    resource_type_id = Column(Integer, ForeignKey("resource_types.id"), nullable=True, index=True)
    status_id = Column(Integer, ForeignKey("statuses.id"), nullable=True, index=True)

    metadata_ = Column("metadata", JSON().with_variant(JSONB(), "postgresql"), nullable=True)
    tags = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)
    rank = Column(Integer, nullable=True)
    is_premium = Column(Boolean, default=False, nullable=False)

    created_by_id = Column(UUID(as_uuid=True), ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    modified_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    resource_type = relationship("ResourceType")
    status = relationship("Status")

    def __repr__(self):
        return f"<Resource(id={self.id}, title='{self.title}')>"
