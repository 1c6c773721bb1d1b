"""Vote business logic."""
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from foundershub.db.models import Poll, PollOption, poll_option_voters
from foundershub.core.exceptions import AlreadyVotedError, NotFoundError
from foundershub.core.logging_config import get_logger
from foundershub.services.polls import get_poll

logger = get_logger(__name__)


def has_voted(db: Session, poll_id: int, user_id: int) -> bool:
    """Whether the user is already among the voters of any option of the poll."""
    existing = db.query(PollOption).filter(
        PollOption.poll_id == poll_id,
        PollOption.voters.any(id=user_id),
    ).first()
    return existing is not None


def vote_in_poll(db: Session, poll_id: int, user_id: int, option_id: int) -> Poll:
    """
    Cast a user's vote for one option of a poll.

    The option's counter and its voters set change in the same transaction.
    The (poll_id, user_id) unique constraint catches a concurrent duplicate
    that slips past the pre-check.

    Returns:
        The refreshed poll with options and author loaded
    """
    poll = db.query(Poll).filter(Poll.id == poll_id).first()
    if not poll:
        raise NotFoundError("Poll not found")

    if has_voted(db, poll_id, user_id):
        logger.info("vote_rejected", poll_id=poll_id, user_id=user_id, reason="already_voted")
        raise AlreadyVotedError()

    option = db.query(PollOption).filter(
        PollOption.id == option_id,
        PollOption.poll_id == poll_id
    ).first()
    if not option:
        raise ValueError("Invalid option")

    try:
        db.query(PollOption).filter(PollOption.id == option_id).update(
            {PollOption.votes: PollOption.votes + 1},
            synchronize_session=False,
        )
        db.execute(
            poll_option_voters.insert().values(
                poll_option_id=option_id,
                user_id=user_id,
                poll_id=poll_id,
            )
        )
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # Handle race condition: duplicate vote due to concurrent requests
        if "uq_poll_voter" in str(e) or "unique constraint" in str(e).lower():
            logger.info("vote_rejected", poll_id=poll_id, user_id=user_id, reason="concurrent_duplicate")
            raise AlreadyVotedError()
        raise

    logger.info("vote_recorded", poll_id=poll_id, option_id=option_id, user_id=user_id)

    db.expire_all()
    return get_poll(db, poll_id)
