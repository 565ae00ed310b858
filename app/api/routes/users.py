"""Signup, login and caller info endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.core.config import get_settings
from app.core.database import get_db
from app.core.security import AUTHORIZATION_HEADER
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    SignupRequest,
    UserInfoResponse,
    UserListItem,
    UsersListResponse,
)
from app.services import users as user_service
from app.services.errors import (
    AdminTokenMismatchError,
    DuplicateUserError,
    InvalidCredentialsError,
)

router = APIRouter()


@router.get("/user/signup")
def signup_page() -> dict[str, str]:
    """Signup page placeholder; the form is served by the frontend."""
    return {"message": "POST username, password, email (and admin, adminToken) to this URL."}


@router.get("/user/login")
def login_page() -> dict[str, str]:
    """Login page placeholder; the form is served by the frontend."""
    return {"message": "POST username and password to this URL."}


@router.post("/user/signup", status_code=status.HTTP_303_SEE_OTHER)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RedirectResponse:
    """Create an account and redirect to the login page."""
    settings = get_settings()
    try:
        user_service.signup(db, body, settings)
    except DuplicateUserError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except AdminTokenMismatchError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message) from e
    return RedirectResponse(
        url=f"{settings.API_PREFIX}/user/login",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.post("/user/login")
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
) -> str:
    """
    Authenticate with username and password.

    On success the token is returned in the Authorization response header as
    "Bearer <token>"; send it back unchanged on later requests.
    """
    try:
        token = user_service.login(db, body)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    response.headers[AUTHORIZATION_HEADER] = token
    return "success"


@router.get("/user-info", response_model=UserInfoResponse)
def get_user_info(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> UserInfoResponse:
    return UserInfoResponse(username=current_user.username, is_admin=current_user.is_admin)


@router.get("/user/users", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    """List all users (admin only)."""
    return UsersListResponse(
        users=[UserListItem.model_validate(u) for u in user_service.list_users(db)]
    )
