"""Update endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from foundershub.api.deps import get_db, get_current_user, get_page
from foundershub.db.models import User
from foundershub.schemas import UpdateCreate, UpdateOut, UpdatesPage, UpdateResponse
from foundershub.services.updates import list_updates, create_update
from foundershub.core.rate_limit import limiter, RATE_LIMITS

router = APIRouter()


@router.get("", response_model=UpdatesPage)
async def get_updates(
    page: int = Depends(get_page),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """One page of updates, newest first."""
    updates, has_more = list_updates(db, page)
    return UpdatesPage(
        updates=[UpdateOut.model_validate(update) for update in updates],
        has_more=has_more,
    )


@router.post("", response_model=UpdateResponse, status_code=201)
@limiter.limit(RATE_LIMITS["write"])
async def post_update(
    request: Request,
    payload: UpdateCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Post a text update as the caller.

    Raises:
        HTTPException: 400 if content is empty after trimming
    """
    try:
        update = create_update(db, current_user.id, payload.content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return UpdateResponse(update=UpdateOut.model_validate(update))
