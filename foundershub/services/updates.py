"""Text updates."""
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session, joinedload

from foundershub.db.models import Update
from foundershub.core.config import settings
from foundershub.core.logging_config import get_logger
from foundershub.core.utils import page_offset

logger = get_logger(__name__)


def list_updates(db: Session, page: int = 1, page_size: Optional[int] = None) -> Tuple[List[Update], bool]:
    """
    Get one page of updates, newest first.

    Fetches one row past the page to learn whether another page exists.

    Returns:
        (updates, has_more)
    """
    page_size = page_size or settings.PAGE_SIZE
    skip = page_offset(page, page_size)

    rows = (
        db.query(Update)
        .options(joinedload(Update.user))
        .order_by(Update.created_at.desc(), Update.id.desc())
        .offset(skip)
        .limit(page_size + 1)
        .all()
    )

    has_more = len(rows) > page_size
    return rows[:page_size], has_more


def create_update(db: Session, user_id: int, content: str) -> Update:
    """Post a new update."""
    if not content or not content.strip():
        raise ValueError("Content is required")

    update = Update(user_id=user_id, content=content)
    db.add(update)
    db.commit()
    db.refresh(update)

    logger.info("update_posted", update_id=update.id, user_id=user_id)

    return update
