"""Shared API dependencies."""
from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from foundershub.db import get_db, get_db_context
from foundershub.db.models import User
from foundershub.core.security import verify_user_token


def get_current_user_id(user_id: int = Depends(verify_user_token)) -> int:
    """Id of the caller, taken from a verified bearer token."""
    return user_id


def get_current_user(
    user_id: int = Depends(verify_user_token),
    db: Session = Depends(get_db),
) -> User:
    """Load the caller's account; the token may outlive it."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def get_page(page: int = Query(1, description="1-based page number")) -> int:
    """Validated page query parameter."""
    if page < 1:
        raise HTTPException(status_code=400, detail="Page must be a positive integer")
    return page


__all__ = ["get_db", "get_db_context", "get_current_user", "get_current_user_id", "get_page"]
