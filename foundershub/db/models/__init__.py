"""Database models."""
from foundershub.db.models.user import User
from foundershub.db.models.status import Status
from foundershub.db.models.update import Update
from foundershub.db.models.poll import Poll
from foundershub.db.models.poll_option import PollOption, poll_option_voters

__all__ = ["User", "Status", "Update", "Poll", "PollOption", "poll_option_voters"]
