"""Status schemas."""
from datetime import datetime
from typing import List, Optional

from foundershub.schemas.common import CamelModel


class StatusInfo(CamelModel):
    status: str
    updated_at: datetime


class StatusOut(StatusInfo):
    id: int
    user_id: int


class StatusBoardEntry(CamelModel):
    id: int
    name: str
    startup_name: str
    status: Optional[StatusInfo] = None


class StatusBoardResponse(CamelModel):
    users: List[StatusBoardEntry]


class StatusUpdateRequest(CamelModel):
    # Validated against the allowed values by the status service
    status: Optional[str] = None


class StatusUpdateResponse(CamelModel):
    status: StatusOut
