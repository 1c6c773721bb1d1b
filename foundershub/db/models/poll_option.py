"""PollOption model and its voters association table."""
from sqlalchemy import Column, Integer, String, ForeignKey, Index, Table, UniqueConstraint
from sqlalchemy.orm import relationship

from foundershub.db.base import Base


# poll_id is denormalized here so the database can enforce one vote per
# user per poll, not just per option.
poll_option_voters = Table(
    "poll_option_voters",
    Base.metadata,
    Column("poll_option_id", Integer, ForeignKey("poll_options.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("poll_id", Integer, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("poll_id", "user_id", name="uq_poll_voter"),
)


class PollOption(Base):
    __tablename__ = "poll_options"

    id = Column(Integer, primary_key=True, autoincrement=True)
    poll_id = Column(Integer, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False)
    text = Column(String(200), nullable=False)
    votes = Column(Integer, nullable=False, default=0)

    # Relationships
    poll = relationship("Poll", back_populates="options")
    voters = relationship("User", secondary=poll_option_voters, viewonly=True)

    __table_args__ = (Index("idx_poll_options_poll", "poll_id"),)
