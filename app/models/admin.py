"""
Admin model for back-office accounts.

Admins authenticate with email + password and receive a JWT used on every
write endpoint.
"""

import enum
import uuid
from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class AdminRole(str, enum.Enum):
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"
    MEMBER = "member"


class Admin(Base):
    __tablename__ = "admins"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Authentication credentials
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)

    # Profile
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=True)
    role = Column(Enum(AdminRole, values_callable=lambda x: [e.value for e in x]), default=AdminRole.ADMIN, nullable=False)

    status_id = Column(Integer, ForeignKey("statuses.id"), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    modified_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    status = relationship("Status")

    @property
    def is_active(self) -> bool:
        """Admins without a status, or with an active/enabled one, may sign in."""
        return self.status is None or self.status.code in ("active", "enabled")

    def __repr__(self):
        return f"<Admin(id={self.id}, email='{self.email}', role={self.role.value})>"
