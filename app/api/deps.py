"""Auth dependencies: resolve the bearer token to the acting user (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_user_info_from_token, resolve_token, validate_token
from app.schemas.auth import CurrentUser
from app.services.users import get_user_by_username

# Declares the bearer scheme in OpenAPI; the header itself is parsed by resolve_token.
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    _credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    token = resolve_token(request)
    if token is None:
        raise _unauthorized("Not authenticated")
    if not validate_token(token):
        raise _unauthorized("Invalid or expired token")
    claims = get_user_info_from_token(token)
    user = get_user_by_username(db, claims["sub"])
    if user is None:
        raise _unauthorized("User not found")
    return CurrentUser.model_validate(user)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role ADMIN. Raises 403 for non-admin."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
