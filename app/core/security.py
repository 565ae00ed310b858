"""Password hashing and bearer-token (JWT) creation, extraction and validation."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from starlette.requests import Request

from app.core.config import settings

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
# Claim key holding the user's role inside the token payload.
AUTHORIZATION_KEY = "auth"
BEARER_PREFIX = "Bearer "

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

USERNAME_MIN_LEN = 4
USERNAME_MAX_LEN = 64
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_token(username: str, role: str) -> str:
    """
    Create a signed JWT for username with the role claim, valid for JWT_EXPIRE_MINUTES.

    The returned value already carries the "Bearer " prefix so it can be placed
    in the Authorization header as is.
    """
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": username,
        AUTHORIZATION_KEY: role,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return BEARER_PREFIX + jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)


def strip_bearer(value: str | None) -> str | None:
    """Return the token part of a "Bearer <token>" header value, or None if it is not one."""
    if not value or not value.strip():
        return None
    if not value.startswith(BEARER_PREFIX):
        return None
    token = value[len(BEARER_PREFIX):].strip()
    return token or None


def resolve_token(request: Request) -> str | None:
    """Read the Authorization header of request and return the bare token, or None."""
    return strip_bearer(request.headers.get(AUTHORIZATION_HEADER))


def validate_token(token: str) -> bool:
    """
    Verify signature and expiry of token.

    Every failure collapses to False; the category is only logged.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.JWT_ALGORITHM])
    except jwt.InvalidSignatureError:
        logger.info("Invalid JWT signature.")
        return False
    except jwt.ExpiredSignatureError:
        logger.info("Expired JWT token.")
        return False
    except jwt.InvalidAlgorithmError:
        logger.info("Unsupported JWT token.")
        return False
    except jwt.DecodeError:
        logger.info("Malformed JWT token.")
        return False
    except jwt.PyJWTError as e:
        logger.info("Invalid JWT token: %s", e)
        return False
    if not payload.get("sub"):
        logger.info("JWT claims are empty.")
        return False
    return True


def get_user_info_from_token(token: str) -> dict[str, Any]:
    """
    Decode a token already accepted by validate_token and return its claims
    (sub, auth, iat, exp).

    Raises jwt.PyJWTError when called on an invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(token, secret, algorithms=[settings.JWT_ALGORITHM])
