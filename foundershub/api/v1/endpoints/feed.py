"""Feed endpoint."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from foundershub.api.deps import get_db, get_current_user, get_page
from foundershub.db.models import Poll, User
from foundershub.schemas import FeedPage, PollOut, UpdateOut
from foundershub.services.feed import get_feed

router = APIRouter()


@router.get("", response_model=FeedPage)
async def get_feed_endpoint(
    page: int = Depends(get_page),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Updates and polls merged newest first.

    Each item carries ``type`` ("update" or "poll"). ``hasMore`` is true
    while either source has further pages.
    """
    entries, has_more = get_feed(db, page)
    items = [
        PollOut.model_validate(entry) if isinstance(entry, Poll) else UpdateOut.model_validate(entry)
        for entry in entries
    ]
    return FeedPage(items=items, has_more=has_more)
