"""User profiles."""
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from foundershub.db.models import User, Update
from foundershub.core.config import settings
from foundershub.core.exceptions import NotFoundError


def get_user(db: Session, user_id: int) -> Optional[User]:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def get_current_profile(db: Session, user_id: int) -> User:
    """Profile of the authenticated user."""
    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def get_user_profile(db: Session, user_id: int, limit: Optional[int] = None) -> Tuple[User, List[Update]]:
    """
    Public profile of any user with their most recent updates.

    Returns:
        (user, recent_updates) with updates newest first
    """
    limit = limit or settings.PROFILE_RECENT_UPDATES

    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    recent = (
        db.query(Update)
        .filter(Update.user_id == user_id)
        .order_by(Update.created_at.desc(), Update.id.desc())
        .limit(limit)
        .all()
    )
    return user, recent
