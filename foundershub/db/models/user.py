"""User model."""
from datetime import datetime, timezone as tz
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from foundershub.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(254), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    startup_name = Column(String(200), nullable=False)
    startup_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    status = relationship("Status", back_populates="user", uselist=False, cascade="all, delete-orphan")
    updates = relationship("Update", back_populates="user", cascade="all, delete-orphan")
    polls = relationship("Poll", back_populates="user", cascade="all, delete-orphan")
