"""Unit tests for the users service."""
from datetime import datetime, timezone, timedelta

import pytest

from foundershub.core.exceptions import NotFoundError
from foundershub.db.models import Update
from foundershub.services.users import get_current_profile, get_user_profile


@pytest.mark.unit
class TestProfiles:
    """Test profile lookups."""

    def test_current_profile(self, db_session, user):
        assert get_current_profile(db_session, user.id).email == "ada@example.com"

    def test_current_profile_missing(self, db_session):
        with pytest.raises(NotFoundError, match="User not found"):
            get_current_profile(db_session, 12345)

    def test_user_profile_limits_recent_updates(self, db_session, user):
        base = datetime(2025, 1, 1, tzinfo=timezone.utc)
        for i in range(12):
            db_session.add(Update(user_id=user.id, content=f"u{i}", created_at=base + timedelta(hours=i)))
        db_session.commit()

        profile_user, recent = get_user_profile(db_session, user.id)

        assert profile_user.id == user.id
        assert len(recent) == 10
        assert recent[0].content == "u11"
        assert recent[-1].content == "u2"

    def test_user_profile_only_own_updates(self, db_session, user, make_user):
        other = make_user()
        db_session.add(Update(user_id=other.id, content="not mine"))
        db_session.add(Update(user_id=user.id, content="mine"))
        db_session.commit()

        _, recent = get_user_profile(db_session, user.id)
        assert [u.content for u in recent] == ["mine"]

    def test_user_profile_missing(self, db_session):
        with pytest.raises(NotFoundError):
            get_user_profile(db_session, 999)
