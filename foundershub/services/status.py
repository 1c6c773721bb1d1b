"""Office status board."""
from typing import List
from sqlalchemy.orm import Session, joinedload

from foundershub.db.models import User, Status
from foundershub.core.constants import STATUS_VALUES
from foundershub.core.logging_config import get_logger
from foundershub.core.utils import utcnow

logger = get_logger(__name__)


def list_statuses(db: Session) -> List[User]:
    """All users ordered by name, with their status loaded."""
    return (
        db.query(User)
        .options(joinedload(User.status))
        .order_by(User.name.asc())
        .all()
    )


def set_status(db: Session, user_id: int, status: str) -> Status:
    """
    Set a user's office status and stamp the change time.

    Creates the status row if the user somehow lacks one, so each user
    still ends up with exactly one.

    Raises:
        ValueError: If status is not one of the allowed values
    """
    if not status or status not in STATUS_VALUES:
        raise ValueError("Invalid status")

    record = db.query(Status).filter(Status.user_id == user_id).first()
    if record is None:
        record = Status(user_id=user_id)
        db.add(record)

    record.status = status
    record.updated_at = utcnow()
    db.commit()
    db.refresh(record)

    logger.info("status_changed", user_id=user_id, status=status)
    return record
