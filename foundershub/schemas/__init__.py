"""Pydantic schemas for request/response validation."""
from foundershub.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from foundershub.schemas.user import (
    UserOut,
    AuthorOut,
    ProfileUpdate,
    UserProfile,
    UserResponse,
    UserProfileResponse,
)
from foundershub.schemas.status import (
    StatusInfo,
    StatusOut,
    StatusBoardEntry,
    StatusBoardResponse,
    StatusUpdateRequest,
    StatusUpdateResponse,
)
from foundershub.schemas.update import UpdateCreate, UpdateOut, UpdatesPage, UpdateResponse
from foundershub.schemas.poll import PollCreate, PollOptionOut, PollOut, PollsPage, PollResponse
from foundershub.schemas.vote import VoteRequest
from foundershub.schemas.feed import FeedItem, FeedPage
from foundershub.schemas.common import CamelModel, ErrorResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserOut",
    "AuthorOut",
    "ProfileUpdate",
    "UserProfile",
    "UserResponse",
    "UserProfileResponse",
    "StatusInfo",
    "StatusOut",
    "StatusBoardEntry",
    "StatusBoardResponse",
    "StatusUpdateRequest",
    "StatusUpdateResponse",
    "UpdateCreate",
    "UpdateOut",
    "UpdatesPage",
    "UpdateResponse",
    "PollCreate",
    "PollOptionOut",
    "PollOut",
    "PollsPage",
    "PollResponse",
    "VoteRequest",
    "FeedItem",
    "FeedPage",
    "CamelModel",
    "ErrorResponse",
]
