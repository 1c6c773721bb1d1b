"""User schemas."""
from datetime import datetime
from typing import List, Optional

from foundershub.schemas.common import CamelModel


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    startup_name: str
    startup_url: Optional[str] = None


class AuthorOut(CamelModel):
    id: int
    name: str
    startup_name: str


class ProfileUpdate(CamelModel):
    id: int
    content: str
    created_at: datetime


class UserProfile(UserOut):
    updates: List[ProfileUpdate] = []


class UserResponse(CamelModel):
    user: UserOut


class UserProfileResponse(CamelModel):
    user: UserProfile
