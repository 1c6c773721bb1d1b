"""Application configuration, read from the environment and ``.env``."""
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from foundershub.core.constants import (
    ACCESS_TOKEN_EXPIRE_MINUTES as DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES,
    PAGE_SIZE as DEFAULT_PAGE_SIZE,
    PROFILE_RECENT_UPDATES as DEFAULT_PROFILE_RECENT_UPDATES,
)

DEFAULT_SECRET_KEY = "your-secret-key-change-in-production"
DEV_DATABASE_URL = "sqlite:///./foundershub.db"
MIN_SECRET_KEY_LENGTH = 32


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    APP_TITLE: str = "Founders Hub"
    APP_DESCRIPTION: str = "Status board, updates and polls for startup founders"
    APP_VERSION: str = "1.0.0"

    # Either a full URL or the POSTGRES_* parts
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # JWT signing
    SECRET_KEY: str = DEFAULT_SECRET_KEY
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES

    CORS_ORIGINS: Union[List[str], str] = ["*"]
    FRONTEND_BUILD_PATH: str = "./frontend/build"

    PAGE_SIZE: int = DEFAULT_PAGE_SIZE
    PROFILE_RECENT_UPDATES: int = DEFAULT_PROFILE_RECENT_UPDATES

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def split_cors_origins(cls, v):
        """Accept ``"https://a, https://b"`` as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    def get_database_url(self) -> str:
        """
        Resolve the database URL.

        DATABASE_URL wins, then the POSTGRES_* parts. Only development
        falls back to a local SQLite file.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL

        parts = (self.POSTGRES_USER, self.POSTGRES_PASSWORD, self.POSTGRES_HOST, self.POSTGRES_DB)
        if all(parts):
            user, password, host, name = parts
            return f"postgresql://{user}:{password}@{host}:{self.POSTGRES_PORT or '5432'}/{name}"

        if self.ENVIRONMENT == "development":
            return DEV_DATABASE_URL

        raise ValueError(
            "Database configuration missing. Set DATABASE_URL or "
            "POSTGRES_USER, POSTGRES_PASSWORD, POSTGRES_HOST and POSTGRES_DB"
        )

    def validate_production_config(self) -> None:
        """Refuse to run production with development-grade secrets or CORS."""
        if self.ENVIRONMENT != "production":
            return

        problems = []
        if self.SECRET_KEY == DEFAULT_SECRET_KEY:
            problems.append("SECRET_KEY must be changed from default value")
        if len(self.SECRET_KEY) < MIN_SECRET_KEY_LENGTH:
            problems.append(f"SECRET_KEY should be at least {MIN_SECRET_KEY_LENGTH} characters long")
        if "*" in self.CORS_ORIGINS:
            problems.append("CORS_ORIGINS should list the frontend origins, not '*'")

        if problems:
            raise ValueError(
                "Production configuration errors:\n" + "\n".join(f"  - {p}" for p in problems)
            )


settings = Settings()
