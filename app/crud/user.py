"""
CRUD operations for User model (public site members).
"""

from typing import Dict, List, Optional, Tuple
from uuid import UUID
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.crud import lookup as lookup_crud
from app.crud.utils import apply_updates, paginate
from app.models.lookup import Status
from app.models.user import User
from app.schemas.user import UserCreateRequest, UserUpdateRequest

STAT_STATUSES = ("verified", "unverified", "disabled")


def create(db: Session, user_data: UserCreateRequest) -> User:
    """
    Create a new user.

    The email is stored lower-cased; uniqueness is enforced by the database.
    """
    values = user_data.model_dump()
    values["email"] = values["email"].lower()
    if values.get("status_id") is None:
        values["status_id"] = lookup_crud.get_status_id(db, settings.DEFAULT_USER_STATUS)

    user = User(**values)

    db.add(user)
    db.commit()
    db.refresh(user)

    return user


def get_by_id(db: Session, user_id: UUID) -> Optional[User]:
    return db.query(User).options(joinedload(User.status)).filter(User.id == user_id).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()


def get_multi(
    db: Session,
    offset: int = 0,
    limit: int = 10,
    status: Optional[str] = None,
    search: Optional[str] = None,
) -> Tuple[List[User], int]:
    """
    Retrieve one page of users, newest first.

    Args:
        status: Status code (e.g. "verified")
        search: Case-insensitive substring of first name, last name or email

    Returns:
        (users on this page, total matching users)
    """
    query = db.query(User)

    if status:
        query = query.filter(User.status.has(Status.code == status))
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            User.first_name.ilike(pattern),
            User.last_name.ilike(pattern),
            User.email.ilike(pattern),
        ))

    query = query.options(joinedload(User.status)).order_by(User.created_at.desc(), User.id)
    return paginate(query, limit, offset)


def update(db: Session, user_id: UUID, user_data: UserUpdateRequest) -> Optional[User]:
    user = get_by_id(db, user_id)
    if not user:
        return None

    apply_updates(user, user_data.model_dump(exclude_unset=True))

    db.commit()
    db.refresh(user)

    return user


def update_status(db: Session, user_id: UUID, status_id: int) -> Optional[User]:
    """
    Change a user's status (verify, disable...).

    Returns:
        Updated User instance if found, None otherwise
    """
    user = get_by_id(db, user_id)
    if not user:
        return None

    user.status_id = status_id

    db.commit()
    db.refresh(user)

    return user


def delete(db: Session, user_id: UUID) -> bool:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        return False

    db.delete(user)
    db.commit()

    return True


def get_stats(db: Session) -> Dict[str, int]:
    """Total users plus counts for verified, unverified and disabled."""
    stats = {"total": db.query(func.count(User.id)).scalar() or 0}
    stats.update({code: 0 for code in STAT_STATUSES})

    rows = (
        db.query(Status.code, func.count(User.id))
        .join(User, User.status_id == Status.id)
        .filter(Status.code.in_(STAT_STATUSES))
        .group_by(Status.code)
        .all()
    )
    for code, count in rows:
        stats[code] = count

    return stats
