"""Database base class and model imports."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models here for Alembic to detect them
from foundershub.db.models.user import User  # noqa: F401, E402
from foundershub.db.models.status import Status  # noqa: F401, E402
from foundershub.db.models.update import Update  # noqa: F401, E402
from foundershub.db.models.poll import Poll  # noqa: F401, E402
from foundershub.db.models.poll_option import PollOption, poll_option_voters  # noqa: F401, E402
