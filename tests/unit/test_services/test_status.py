"""Unit tests for the status service."""
from datetime import datetime, timezone, timedelta

import pytest

from foundershub.core.utils import to_utc
from foundershub.db.models import Status
from foundershub.services.status import list_statuses, set_status


@pytest.mark.unit
class TestSetStatus:
    """Test status changes."""

    def test_set_status_in_office(self, db_session, user):
        record = set_status(db_session, user.id, "In Office")
        assert record.status == "In Office"
        assert db_session.query(Status).filter(Status.user_id == user.id).count() == 1

    def test_set_status_bumps_updated_at(self, db_session, user):
        old = datetime.now(timezone.utc) - timedelta(days=1)
        user.status.updated_at = old
        db_session.commit()

        record = set_status(db_session, user.id, "In Office")
        assert to_utc(record.updated_at) > old

    @pytest.mark.parametrize("value", ["", None, "Working from home", "in office"])
    def test_set_status_invalid(self, db_session, user, value):
        with pytest.raises(ValueError, match="Invalid status"):
            set_status(db_session, user.id, value)
        db_session.refresh(user.status)
        assert user.status.status == "Out of Office"

    def test_set_status_creates_missing_row(self, db_session, user):
        db_session.delete(user.status)
        db_session.commit()

        set_status(db_session, user.id, "In Office")
        rows = db_session.query(Status).filter(Status.user_id == user.id).all()
        assert len(rows) == 1
        assert rows[0].status == "In Office"


@pytest.mark.unit
class TestListStatuses:
    """Test the status board listing."""

    def test_ordered_by_name(self, db_session, make_user):
        make_user(name="Zed")
        make_user(name="Amy")
        make_user(name="Mo")

        names = [u.name for u in list_statuses(db_session)]
        assert names == ["Amy", "Mo", "Zed"]

    def test_includes_status(self, db_session, user):
        set_status(db_session, user.id, "In Office")
        [entry] = list_statuses(db_session)
        assert entry.status.status == "In Office"
