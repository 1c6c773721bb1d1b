"""Vote schemas."""
from pydantic import Field

from foundershub.schemas.common import CamelModel


class VoteRequest(CamelModel):
    option_id: int = Field(..., ge=1)
