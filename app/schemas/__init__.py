"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    SignupRequest,
    UserInfoResponse,
    UserListItem,
    UsersListResponse,
)
from app.schemas.folder import FolderRequest, FolderResponse, UserFolderResponse
from app.schemas.health import HealthResponse
from app.schemas.product import (
    ProductMypriceRequest,
    ProductPage,
    ProductRequest,
    ProductResponse,
)
from app.schemas.search import ItemDto

__all__ = [
    "CurrentUser",
    "FolderRequest",
    "FolderResponse",
    "HealthResponse",
    "ItemDto",
    "LoginRequest",
    "ProductMypriceRequest",
    "ProductPage",
    "ProductRequest",
    "ProductResponse",
    "SignupRequest",
    "UserFolderResponse",
    "UserInfoResponse",
    "UserListItem",
    "UsersListResponse",
]
