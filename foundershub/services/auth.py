"""Account registration and login."""
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from foundershub.db.models import User, Status
from foundershub.core.constants import DEFAULT_STATUS
from foundershub.core.exceptions import ConflictError
from foundershub.core.logging_config import get_logger
from foundershub.core.security import get_password_hash, verify_password

logger = get_logger(__name__)


class InvalidCredentialsError(ValueError):
    """Email/password pair does not match an account (HTTP 401)."""


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Look up a user by (already normalized) email."""
    return db.query(User).filter(User.email == email).first()


def register_user(
    db: Session,
    name: Optional[str],
    email: Optional[str],
    password: Optional[str],
    startup_name: Optional[str],
    startup_url: Optional[str] = None,
) -> User:
    """
    Create an account and its default "Out of Office" status.

    Raises:
        ValueError: If a required field is missing
        ConflictError: If the email is already registered
    """
    if not name or not email or not password or not startup_name:
        raise ValueError("Missing required fields")

    if get_user_by_email(db, email):
        raise ConflictError("User with this email already exists")

    user = User(
        name=name,
        email=email,
        password_hash=get_password_hash(password),
        startup_name=startup_name,
        startup_url=startup_url or None,
    )
    user.status = Status(status=DEFAULT_STATUS)

    try:
        db.add(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        # Lost a race with a concurrent registration for the same email
        raise ConflictError("User with this email already exists")

    db.refresh(user)
    logger.info("user_registered", user_id=user.id)
    return user


def authenticate_user(db: Session, email: Optional[str], password: Optional[str]) -> User:
    """
    Return the user matching the credentials.

    Raises:
        ValueError: If either field is missing
        InvalidCredentialsError: If no account matches
    """
    if not email or not password:
        raise ValueError("Email and password are required")

    user = get_user_by_email(db, email.strip().lower())

    if not user or not verify_password(password, user.password_hash):
        logger.info("login_failed")
        raise InvalidCredentialsError("Invalid email or password")

    return user
