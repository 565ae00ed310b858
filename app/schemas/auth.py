"""Request/response schemas for signup, login and the authenticated user."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.models.user import UserRole


class SignupRequest(BaseModel):
    """Signup form. admin + admin_token request the ADMIN role."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        pattern=r"^[a-z0-9]+$",
        description="Lowercase letters and digits",
    )
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    admin: bool = False
    admin_token: str = Field(default="", alias="adminToken")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class CurrentUser(BaseModel):
    """Authenticated user (id, username, role) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class UserInfoResponse(BaseModel):
    """Name and admin flag of the caller."""

    username: str
    is_admin: bool = Field(
        validation_alias=AliasChoices("is_admin", "isAdmin"),
        serialization_alias="isAdmin",
    )


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: UserRole


class UsersListResponse(BaseModel):
    """Response for GET /user/users (admin only)."""

    users: list[UserListItem]
