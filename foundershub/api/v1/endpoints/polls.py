"""Poll endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from foundershub.api.deps import get_db, get_current_user, get_page
from foundershub.db.models import User
from foundershub.schemas import PollCreate, PollOut, PollsPage, PollResponse, VoteRequest
from foundershub.services.polls import create_poll, list_polls
from foundershub.services.vote import vote_in_poll
from foundershub.core.exceptions import status_code_for
from foundershub.core.rate_limit import limiter, RATE_LIMITS

router = APIRouter()


@router.post("", response_model=PollResponse)
@limiter.limit(RATE_LIMITS["write"])
async def create_poll_endpoint(
    request: Request,
    payload: PollCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a poll owned by the caller.

    Blank options are dropped; at least two must remain.

    Example:
        Request:
            POST /api/polls
            Authorization: Bearer eyJhbGc...
            {
                "question": "Pizza or tacos for demo day?",
                "options": ["Pizza", "Tacos"]
            }

        Response (200):
            {
                "poll": {
                    "id": 7,
                    "question": "Pizza or tacos for demo day?",
                    "createdAt": "2025-11-03T15:00:00Z",
                    "userId": 1,
                    "options": [
                        {"id": 13, "pollId": 7, "text": "Pizza", "votes": 0},
                        {"id": 14, "pollId": 7, "text": "Tacos", "votes": 0}
                    ],
                    "user": {"id": 1, "name": "Ada", "startupName": "Engines"},
                    "type": "poll"
                }
            }
    """
    try:
        poll = create_poll(db, current_user.id, payload.question, payload.options)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return PollResponse(poll=PollOut.model_validate(poll))


@router.get("", response_model=PollsPage)
async def get_polls(
    page: int = Depends(get_page),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """One page of polls, newest first."""
    polls, has_more = list_polls(db, page)
    return PollsPage(polls=[PollOut.model_validate(poll) for poll in polls], has_more=has_more)


@router.post("/{poll_id}/vote", response_model=PollResponse)
@limiter.limit(RATE_LIMITS["vote"])
async def vote_endpoint(
    request: Request,
    poll_id: int,
    vote_request: VoteRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Vote for one option of a poll.

    Each user gets one vote per poll; votes cannot be changed.

    Raises:
        HTTPException: 404 if the poll does not exist
        HTTPException: 400 if the option is not part of the poll
        HTTPException: 400 if the caller already voted on this poll

    Response (400):
        {
            "error": "You have already voted on this poll"
        }
    """
    try:
        poll = vote_in_poll(db, poll_id, current_user.id, vote_request.option_id)
    except ValueError as e:
        raise HTTPException(status_code=status_code_for(e), detail=str(e))

    return PollResponse(poll=PollOut.model_validate(poll))
