"""Main API router."""
from fastapi import APIRouter

from foundershub.api.v1.endpoints import auth, status, updates, polls, feed, users
from foundershub.schemas import ErrorResponse

# Documented on every route; main.py reshapes all errors to this body
ERROR_RESPONSES = {
    code: {"model": ErrorResponse, "description": description}
    for code, description in [
        (400, "Invalid input"),
        (401, "Missing, invalid or expired token"),
        (404, "Resource not found"),
        (429, "Rate limit exceeded"),
    ]
}

api_router = APIRouter(prefix="/api", responses=ERROR_RESPONSES)

# Include all endpoint routers
api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(status.router, prefix="/status", tags=["Status"])
api_router.include_router(updates.router, prefix="/updates", tags=["Updates"])
api_router.include_router(polls.router, prefix="/polls", tags=["Polls"])
api_router.include_router(feed.router, prefix="/feed", tags=["Feed"])
api_router.include_router(users.router, tags=["Users"])
