"""Feed aggregation.

The feed interleaves two independently paginated sources. Page N of the feed
is page N of updates plus page N of polls, merged newest first, so a page can
hold up to twice the page size and items are not globally re-paginated.
"""
from typing import List, Optional, Tuple, Union
from sqlalchemy.orm import Session

from foundershub.db.models import Poll, Update
from foundershub.core.config import settings
from foundershub.core.utils import to_utc
from foundershub.services.polls import list_polls
from foundershub.services.updates import list_updates

FeedEntry = Union[Update, Poll]


def merge_feed(updates: List[Update], polls: List[Poll]) -> List[FeedEntry]:
    """Concatenate updates and polls and order them newest first.

    The sort is stable, so on equal timestamps updates stay ahead of polls.
    """
    combined: List[FeedEntry] = [*updates, *polls]
    return sorted(combined, key=lambda item: to_utc(item.created_at), reverse=True)


def get_feed(db: Session, page: int = 1, page_size: Optional[int] = None) -> Tuple[List[FeedEntry], bool]:
    """
    Get one page of the combined feed.

    Returns:
        (items, has_more) where has_more is true if either source has more
    """
    page_size = page_size or settings.PAGE_SIZE

    updates, updates_more = list_updates(db, page, page_size)
    polls, polls_more = list_polls(db, page, page_size)

    return merge_feed(updates, polls), updates_more or polls_more
