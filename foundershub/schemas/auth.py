"""Authentication schemas."""
from typing import Optional
from pydantic import Field, field_validator

from foundershub.core.sanitization import (
    normalize_email,
    sanitize_text,
    MAX_NAME_LENGTH,
    MAX_STARTUP_NAME_LENGTH,
    MAX_URL_LENGTH,
)
from foundershub.schemas.common import CamelModel
from foundershub.schemas.user import UserOut


class LoginRequest(CamelModel):
    # Presence is checked by the auth service so both fields report one message
    email: Optional[str] = Field(None, max_length=254)
    password: Optional[str] = Field(None, max_length=128)


class LoginResponse(CamelModel):
    user: UserOut
    token: str


class RegisterRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = Field(None, max_length=128)
    startup_name: Optional[str] = None
    startup_url: Optional[str] = None

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: Optional[str]) -> Optional[str]:
        """Sanitize display name."""
        if v is None:
            return v
        return sanitize_text(v, max_length=MAX_NAME_LENGTH)

    @field_validator('email')
    @classmethod
    def normalize_email_field(cls, v: Optional[str]) -> Optional[str]:
        """Lowercase and validate email."""
        if v is None:
            return v
        return normalize_email(v)

    @field_validator('startup_name')
    @classmethod
    def sanitize_startup_name_field(cls, v: Optional[str]) -> Optional[str]:
        """Sanitize startup name."""
        if v is None:
            return v
        return sanitize_text(v, max_length=MAX_STARTUP_NAME_LENGTH)

    @field_validator('startup_url')
    @classmethod
    def sanitize_startup_url_field(cls, v: Optional[str]) -> Optional[str]:
        """Blank URLs are stored as null."""
        if v is None:
            return v
        v = sanitize_text(v, max_length=MAX_URL_LENGTH)
        return v or None


class RegisterResponse(CamelModel):
    user: UserOut
