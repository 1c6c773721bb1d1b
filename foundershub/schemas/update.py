"""Update schemas."""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field, field_validator

from foundershub.core.sanitization import sanitize_update_content
from foundershub.schemas.common import CamelModel
from foundershub.schemas.user import AuthorOut


class UpdateCreate(CamelModel):
    content: Optional[str] = Field(None, validate_default=True)

    @field_validator('content')
    @classmethod
    def sanitize_content_field(cls, v: Optional[str]) -> str:
        """Sanitize and require update content."""
        if v is None:
            raise ValueError("Content is required")
        return sanitize_update_content(v)


class UpdateOut(CamelModel):
    id: int
    content: str
    created_at: datetime
    user_id: int
    user: AuthorOut
    type: Literal["update"] = "update"


class UpdatesPage(CamelModel):
    updates: List[UpdateOut]
    has_more: bool


class UpdateResponse(CamelModel):
    update: UpdateOut
