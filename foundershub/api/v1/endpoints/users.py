"""User profile endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from foundershub.api.deps import get_db, get_current_user_id
from foundershub.schemas import (
    ProfileUpdate,
    UserOut,
    UserProfile,
    UserProfileResponse,
    UserResponse,
)
from foundershub.services.users import get_current_profile, get_user_profile
from foundershub.core.exceptions import status_code_for

router = APIRouter()


@router.get("/user/profile", response_model=UserResponse)
async def get_own_profile(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """The caller's own account details."""
    try:
        user = get_current_profile(db, user_id)
    except ValueError as e:
        raise HTTPException(status_code=status_code_for(e), detail=str(e))

    return UserResponse(user=UserOut.model_validate(user))


@router.get("/users/{user_id}", response_model=UserProfileResponse)
async def get_profile(
    user_id: str,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """
    Any founder's profile with their ten most recent updates.

    Raises:
        HTTPException: 400 if user_id is not an integer
        HTTPException: 404 if the user does not exist
    """
    try:
        target_id = int(user_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid user ID")

    try:
        user, recent = get_user_profile(db, target_id)
    except ValueError as e:
        raise HTTPException(status_code=status_code_for(e), detail=str(e))

    profile = UserProfile(
        **UserOut.model_validate(user).model_dump(),
        updates=[ProfileUpdate.model_validate(update) for update in recent],
    )
    return UserProfileResponse(user=profile)
