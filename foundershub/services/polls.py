"""Poll creation and listing."""
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session, joinedload, selectinload

from foundershub.db.models import Poll, PollOption
from foundershub.core.config import settings
from foundershub.core.constants import MAX_POLL_OPTIONS, MIN_POLL_OPTIONS
from foundershub.core.logging_config import get_logger
from foundershub.core.utils import page_offset

logger = get_logger(__name__)


def _poll_query(db: Session):
    return db.query(Poll).options(
        joinedload(Poll.user),
        selectinload(Poll.options),
    )


def get_poll(db: Session, poll_id: int) -> Optional[Poll]:
    """Get a poll with its options and author."""
    return _poll_query(db).filter(Poll.id == poll_id).first()


def create_poll(db: Session, user_id: int, question: str, options: List[str]) -> Poll:
    """Create a poll; every option starts with zero votes."""
    if not question or not question.strip():
        raise ValueError("Question is required")

    options = [text for text in options if text and text.strip()]
    if len(options) < MIN_POLL_OPTIONS:
        raise ValueError(f"Please add at least {MIN_POLL_OPTIONS} poll options")
    if len(options) > MAX_POLL_OPTIONS:
        raise ValueError(f"A poll can have at most {MAX_POLL_OPTIONS} options")

    poll = Poll(
        user_id=user_id,
        question=question,
        options=[PollOption(text=text, votes=0) for text in options],
    )
    db.add(poll)
    db.commit()

    logger.info("poll_created", poll_id=poll.id, user_id=user_id, options=len(options))
    return get_poll(db, poll.id)


def list_polls(db: Session, page: int = 1, page_size: Optional[int] = None) -> Tuple[List[Poll], bool]:
    """
    Get one page of polls, newest first.

    Returns:
        (polls, has_more) where has_more comes from a total count
    """
    page_size = page_size or settings.PAGE_SIZE
    skip = page_offset(page, page_size)

    polls = (
        _poll_query(db)
        .order_by(Poll.created_at.desc(), Poll.id.desc())
        .offset(skip)
        .limit(page_size)
        .all()
    )
    total = db.query(Poll).count()

    return polls, skip + page_size < total
