"""Unit tests for the updates service."""
from datetime import datetime, timezone, timedelta

import pytest

from foundershub.db.models import Update
from foundershub.services.updates import create_update, list_updates


def _add_updates(db_session, user, count):
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for i in range(count):
        db_session.add(Update(user_id=user.id, content=f"update {i}", created_at=base + timedelta(minutes=i)))
    db_session.commit()


@pytest.mark.unit
class TestCreateUpdate:
    """Test posting updates."""

    def test_create_update(self, db_session, user):
        update = create_update(db_session, user.id, "Closed our seed round")
        assert update.id is not None
        assert update.user.name == user.name

    @pytest.mark.parametrize("content", ["", "   ", None])
    def test_create_update_requires_content(self, db_session, user, content):
        with pytest.raises(ValueError, match="Content is required"):
            create_update(db_session, user.id, content)


@pytest.mark.unit
class TestListUpdates:
    """Test update pagination."""

    def test_newest_first(self, db_session, user):
        _add_updates(db_session, user, 3)
        updates, has_more = list_updates(db_session, page=1, page_size=10)
        assert [u.content for u in updates] == ["update 2", "update 1", "update 0"]
        assert has_more is False

    def test_has_more_uses_lookahead_row(self, db_session, user):
        _add_updates(db_session, user, 11)

        first, more = list_updates(db_session, page=1, page_size=10)
        assert len(first) == 10
        assert more is True

        second, more = list_updates(db_session, page=2, page_size=10)
        assert [u.content for u in second] == ["update 0"]
        assert more is False

    def test_exact_page_has_no_more(self, db_session, user):
        _add_updates(db_session, user, 10)
        _, more = list_updates(db_session, page=1, page_size=10)
        assert more is False

    def test_invalid_page(self, db_session):
        with pytest.raises(ValueError, match="positive integer"):
            list_updates(db_session, page=0)
