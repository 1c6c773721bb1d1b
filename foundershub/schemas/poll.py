"""Poll schemas."""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field, field_validator

from foundershub.core.constants import MIN_POLL_OPTIONS, MAX_POLL_OPTIONS
from foundershub.core.sanitization import sanitize_poll_question, sanitize_option_text
from foundershub.schemas.common import CamelModel
from foundershub.schemas.user import AuthorOut


class PollCreate(CamelModel):
    question: Optional[str] = Field(None, validate_default=True)
    options: List[str] = Field(default_factory=list, validate_default=True)

    @field_validator('question')
    @classmethod
    def sanitize_question_field(cls, v: Optional[str]) -> str:
        """Sanitize and require the poll question."""
        if v is None:
            raise ValueError("Question is required")
        return sanitize_poll_question(v)

    @field_validator('options')
    @classmethod
    def sanitize_options_field(cls, v: List[str]) -> List[str]:
        """Drop blank options and enforce the option count."""
        options = [text for text in (sanitize_option_text(option) for option in v) if text]

        if len(options) < MIN_POLL_OPTIONS:
            raise ValueError(f"Please add at least {MIN_POLL_OPTIONS} poll options")
        if len(options) > MAX_POLL_OPTIONS:
            raise ValueError(f"A poll can have at most {MAX_POLL_OPTIONS} options")

        return options


class PollOptionOut(CamelModel):
    id: int
    poll_id: int
    text: str
    votes: int


class PollOut(CamelModel):
    id: int
    question: str
    created_at: datetime
    user_id: int
    options: List[PollOptionOut]
    user: AuthorOut
    type: Literal["poll"] = "poll"


class PollsPage(CamelModel):
    polls: List[PollOut]
    has_more: bool


class PollResponse(CamelModel):
    poll: PollOut
