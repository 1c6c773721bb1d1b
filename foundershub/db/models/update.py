"""Update model."""
from datetime import datetime, timezone as tz
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from foundershub.db.base import Base


class Update(Base):
    __tablename__ = "updates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    user = relationship("User", back_populates="updates")

    __table_args__ = (
        Index("idx_updates_created", "created_at"),
        Index("idx_updates_user", "user_id"),
    )
