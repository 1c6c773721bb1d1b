"""Office status endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from foundershub.api.deps import get_db, get_current_user
from foundershub.db.models import User
from foundershub.schemas import (
    StatusBoardEntry,
    StatusBoardResponse,
    StatusOut,
    StatusUpdateRequest,
    StatusUpdateResponse,
)
from foundershub.services.status import list_statuses, set_status

router = APIRouter()


@router.get("", response_model=StatusBoardResponse)
async def get_statuses(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Everyone's office status, ordered by name."""
    users = list_statuses(db)
    return StatusBoardResponse(users=[StatusBoardEntry.model_validate(user) for user in users])


@router.put("/update", response_model=StatusUpdateResponse)
async def update_status(
    payload: StatusUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Set the caller's status to "In Office" or "Out of Office".

    Raises:
        HTTPException: 400 if the value is anything else
    """
    try:
        record = set_status(db, current_user.id, payload.status)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return StatusUpdateResponse(status=StatusOut.model_validate(record))
