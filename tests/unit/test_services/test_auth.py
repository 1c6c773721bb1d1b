"""Unit tests for the auth service."""
import pytest

from foundershub.core.exceptions import ConflictError
from foundershub.db.models import User, Status
from foundershub.services.auth import authenticate_user, register_user, InvalidCredentialsError


@pytest.mark.unit
class TestRegisterUser:
    """Test account registration."""

    def test_register_creates_user_and_default_status(self, db_session):
        user = register_user(
            db_session,
            name="Grace",
            email="grace@example.com",
            password="cobol4ever",
            startup_name="Compilers Inc",
        )

        assert user.id is not None
        assert user.startup_url is None
        statuses = db_session.query(Status).filter(Status.user_id == user.id).all()
        assert len(statuses) == 1
        assert statuses[0].status == "Out of Office"

    def test_register_stores_hash_not_password(self, db_session):
        user = register_user(db_session, "Grace", "grace@example.com", "cobol4ever", "Compilers Inc")
        assert user.password_hash != "cobol4ever"

    @pytest.mark.parametrize("missing", ["name", "email", "password", "startup_name"])
    def test_register_missing_field(self, db_session, missing):
        fields = {
            "name": "Grace",
            "email": "grace@example.com",
            "password": "cobol4ever",
            "startup_name": "Compilers Inc",
        }
        fields[missing] = ""

        with pytest.raises(ValueError, match="Missing required fields"):
            register_user(db_session, **fields)
        assert db_session.query(User).count() == 0

    def test_register_duplicate_email(self, db_session, make_user):
        make_user(email="dup@example.com")

        with pytest.raises(ConflictError, match="already exists"):
            register_user(db_session, "Other", "dup@example.com", "pw123456", "Other Co")


@pytest.mark.unit
class TestAuthenticateUser:
    """Test login credential checks."""

    def test_authenticate_success(self, db_session, make_user):
        created = make_user(email="ada@example.com", password="engine")
        user = authenticate_user(db_session, "ada@example.com", "engine")
        assert user.id == created.id

    def test_authenticate_email_case_insensitive(self, db_session, make_user):
        make_user(email="ada@example.com", password="engine")
        assert authenticate_user(db_session, " ADA@example.com", "engine") is not None

    def test_authenticate_wrong_password(self, db_session, make_user):
        make_user(email="ada@example.com", password="engine")
        with pytest.raises(InvalidCredentialsError, match="Invalid email or password"):
            authenticate_user(db_session, "ada@example.com", "nope")

    def test_authenticate_unknown_email(self, db_session):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(db_session, "ghost@example.com", "whatever")

    def test_authenticate_missing_fields(self, db_session):
        with pytest.raises(ValueError, match="Email and password are required"):
            authenticate_user(db_session, "ada@example.com", None)
