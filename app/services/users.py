"""User directory: signup, login and lookup by username."""

import hmac
import logging
from typing import TYPE_CHECKING

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.security import create_token, hash_password, verify_password
from app.models.user import User, UserRole
from app.schemas.auth import LoginRequest, SignupRequest
from app.services.errors import (
    AdminTokenMismatchError,
    DuplicateUserError,
    InvalidCredentialsError,
)

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def signup(db: Session, body: SignupRequest, settings: "Settings") -> User:
    """
    Create a user. The ADMIN role is granted only when admin is set and
    admin_token matches ADMIN_TOKEN.

    Raises DuplicateUserError if the username or email is taken and
    AdminTokenMismatchError on a wrong admin token.
    """
    existing = (
        db.query(User)
        .filter(or_(User.username == body.username, User.email == body.email))
        .first()
    )
    if existing is not None:
        if existing.username == body.username:
            raise DuplicateUserError("Username is already taken.")
        raise DuplicateUserError("Email is already registered.")

    role = UserRole.USER
    if body.admin:
        expected = settings.ADMIN_TOKEN.get_secret_value()
        if not hmac.compare_digest(body.admin_token.encode("utf-8"), expected.encode("utf-8")):
            raise AdminTokenMismatchError("Admin token does not match.")
        role = UserRole.ADMIN

    user = User(
        username=body.username,
        password_hash=hash_password(body.password),
        email=body.email,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User signed up: username=%s role=%s", user.username, user.role.value)
    return user


def login(db: Session, body: LoginRequest) -> str:
    """Check credentials and return a bearer-prefixed token. Raises InvalidCredentialsError."""
    user = get_user_by_username(db, body.username)
    if user is None or not verify_password(body.password, user.password_hash):
        raise InvalidCredentialsError("Invalid username or password.")
    return create_token(user.username, user.role.value)


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()
