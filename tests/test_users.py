"""Tests for signup, login and user lookup."""
import pytest

from coachmarket.errors import Conflict, RoleMismatch
from coachmarket.models import User
from coachmarket.security import verify_password
from coachmarket.services import get_user_by_id, login, signup


class TestSignup:

    def test_creates_user_with_zero_coins(self, session):
        user = signup(session, "runner_jo", "jo@example.com", "hunter22", "athlete")

        assert user.id is not None
        assert user.username == "runner_jo"
        assert user.role == "athlete"
        assert user.coins == 0
        assert user.created_at is not None

    def test_password_digest_verifies_but_differs(self, session):
        user = signup(session, "coach_kim", "kim@example.com", "hunter22", "coach")

        assert user.password_hash != "hunter22"
        assert verify_password("hunter22", user.password_hash)
        assert not verify_password("hunter23", user.password_hash)

    def test_email_stored_as_given(self, session):
        user = signup(session, "runner_jo", "Jo@Example.com", "hunter22", "athlete")

        assert user.email == "Jo@Example.com"

    def test_emails_differing_in_case_are_distinct(self, session):
        first = signup(session, "runner_jo", "jo@example.com", "hunter22", "athlete")
        second = signup(session, "runner_al", "Jo@example.com", "hunter22", "athlete")

        assert first.id != second.id
        assert session.query(User).count() == 2

    def test_duplicate_username_conflicts(self, session):
        signup(session, "runner_jo", "jo@example.com", "hunter22", "athlete")

        with pytest.raises(Conflict, match="Username"):
            signup(session, "runner_jo", "other@example.com", "hunter22", "coach")
        assert session.query(User).count() == 1

    def test_duplicate_email_conflicts(self, session):
        signup(session, "runner_jo", "jo@example.com", "hunter22", "athlete")

        with pytest.raises(Conflict, match="Email"):
            signup(session, "runner_al", "jo@example.com", "hunter22", "athlete")
        assert session.query(User).count() == 1

    def test_unknown_role_rejected(self, session):
        with pytest.raises(RoleMismatch):
            signup(session, "runner_jo", "jo@example.com", "hunter22", "admin")
        assert session.query(User).count() == 0


class TestLogin:

    def test_valid_credentials_return_user(self, session):
        created = signup(session, "runner_jo", "jo@example.com", "hunter22", "athlete")

        user = login(session, "jo@example.com", "hunter22")

        assert user is not None
        assert user.id == created.id
        # the digest stays on the returned user
        assert user.password_hash == created.password_hash

    def test_unknown_email_returns_none(self, session):
        assert login(session, "nobody@example.com", "hunter22") is None

    def test_email_must_match_exactly(self, session):
        signup(session, "runner_jo", "Jo@example.com", "hunter22", "athlete")

        assert login(session, "Jo@example.com", "hunter22") is not None
        assert login(session, "jo@example.com", "hunter22") is None

    def test_wrong_password_returns_none(self, session):
        signup(session, "runner_jo", "jo@example.com", "hunter22", "athlete")

        assert login(session, "jo@example.com", "wrong-password") is None


class TestGetUserById:

    def test_found(self, session, athlete):
        user = get_user_by_id(session, athlete.id)

        assert user.username == athlete.username
        assert user.coins == 100

    def test_missing_returns_none(self, session):
        assert get_user_by_id(session, 9999) is None
