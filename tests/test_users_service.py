"""Tests for app.services.users: signup roles, duplicates and login."""

from unittest.mock import MagicMock

from pydantic import SecretStr

from app.core.security import AUTHORIZATION_KEY, get_user_info_from_token, strip_bearer
from app.models import UserRole
from app.schemas.auth import LoginRequest, SignupRequest
from app.services.errors import (
    AdminTokenMismatchError,
    DuplicateUserError,
    InvalidCredentialsError,
)
from app.services.users import login, signup
from support import PASSWORD, DatabaseTestCase


def _settings(admin_token: str = "secret-admin") -> MagicMock:
    settings = MagicMock()
    settings.ADMIN_TOKEN = SecretStr(admin_token)
    return settings


def _signup(username: str = "alice", **kwargs: object) -> SignupRequest:
    data = {"username": username, "password": PASSWORD, "email": f"{username}@example.com"}
    data.update(kwargs)
    return SignupRequest.model_validate(data)


class TestSignup(DatabaseTestCase):
    def test_plain_signup_is_user(self) -> None:
        user = signup(self.db, _signup(), _settings())
        self.assertEqual(user.role, UserRole.USER)
        self.assertNotEqual(user.password_hash, PASSWORD)

    def test_admin_with_matching_token(self) -> None:
        user = signup(self.db, _signup(admin=True, adminToken="secret-admin"), _settings())
        self.assertEqual(user.role, UserRole.ADMIN)

    def test_admin_with_wrong_token(self) -> None:
        with self.assertRaises(AdminTokenMismatchError):
            signup(self.db, _signup(admin=True, adminToken="guess"), _settings())

    def test_duplicate_username(self) -> None:
        self.make_user("alice")
        with self.assertRaises(DuplicateUserError):
            signup(self.db, _signup(email="other@example.com"), _settings())

    def test_duplicate_email(self) -> None:
        self.make_user("alice")
        with self.assertRaises(DuplicateUserError) as ctx:
            signup(self.db, _signup(username="carol", email="alice@example.com"), _settings())
        self.assertIn("Email", ctx.exception.message)


class TestLogin(DatabaseTestCase):
    def test_returns_bearer_token_with_role(self) -> None:
        self.make_user("admin", role=UserRole.ADMIN)
        token = login(self.db, LoginRequest(username="admin", password=PASSWORD))
        claims = get_user_info_from_token(strip_bearer(token))
        self.assertEqual(claims["sub"], "admin")
        self.assertEqual(claims[AUTHORIZATION_KEY], "ADMIN")

    def test_wrong_password_and_unknown_user_look_the_same(self) -> None:
        self.make_user("alice")
        with self.assertRaises(InvalidCredentialsError) as wrong:
            login(self.db, LoginRequest(username="alice", password="wrong-password"))
        with self.assertRaises(InvalidCredentialsError) as unknown:
            login(self.db, LoginRequest(username="nobody", password=PASSWORD))
        self.assertEqual(wrong.exception.message, unknown.exception.message)
