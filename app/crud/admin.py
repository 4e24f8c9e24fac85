"""
CRUD operations for Admin model, including credential checks.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.core.security import get_password_hash, verify_password
from app.crud import lookup as lookup_crud
from app.crud.utils import apply_updates, paginate
from app.models.admin import Admin
from app.schemas.admin import AdminCreateRequest, AdminUpdateRequest

logger = logging.getLogger(__name__)


def create(db: Session, admin_data: AdminCreateRequest) -> Admin:
    """
    Create a new admin with a bcrypt-hashed password.

    Args:
        db: Database session
        admin_data: Validated admin data (plain password)

    Returns:
        Created Admin instance
    """
    status_id = admin_data.status_id
    if status_id is None:
        status_id = lookup_crud.get_status_id(db, settings.DEFAULT_ADMIN_STATUS)

    admin = Admin(
        email=admin_data.email.lower(),
        hashed_password=get_password_hash(admin_data.password),
        first_name=admin_data.first_name,
        last_name=admin_data.last_name,
        role=admin_data.role,
        status_id=status_id,
    )

    db.add(admin)
    db.commit()
    db.refresh(admin)

    logger.info(f"Admin created: {admin.email} ({admin.role.value})")
    return admin


def get_by_id(db: Session, admin_id: UUID) -> Optional[Admin]:
    return db.query(Admin).options(joinedload(Admin.status)).filter(Admin.id == admin_id).first()


def get_by_email(db: Session, email: str) -> Optional[Admin]:
    return db.query(Admin).filter(Admin.email == email.lower()).first()


def get_multi(db: Session, offset: int = 0, limit: int = 10) -> Tuple[List[Admin], int]:
    query = db.query(Admin).order_by(Admin.created_at.desc(), Admin.id)
    return paginate(query, limit, offset)


def update(db: Session, admin_id: UUID, admin_data: AdminUpdateRequest) -> Optional[Admin]:
    admin = get_by_id(db, admin_id)
    if not admin:
        return None

    apply_updates(admin, admin_data.model_dump(exclude_unset=True))

    db.commit()
    db.refresh(admin)

    return admin


def delete(db: Session, admin_id: UUID) -> bool:
    admin = db.query(Admin).filter(Admin.id == admin_id).first()
    if not admin:
        return False

    db.delete(admin)
    db.commit()

    return True


def authenticate(db: Session, email: str, password: str) -> Optional[Admin]:
    """
    Check an admin's credentials and stamp last_login_at.

    Returns:
        The Admin if email and password match, None otherwise
    """
    admin = get_by_email(db, email)
    if not admin or not verify_password(password, admin.hashed_password):
        return None

    admin.last_login_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(admin)

    return admin
