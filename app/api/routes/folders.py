"""Folder endpoints: create, list, products per folder, and the main page data."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.api.routes.products import MAX_PAGE, MAX_PAGE_SIZE
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.folder import FolderRequest, FolderResponse, UserFolderResponse
from app.schemas.product import ProductPage
from app.services import folders as folder_service
from app.services.errors import InvalidSortFieldError, UserNotFoundError

router = APIRouter()


@router.post("/folders", response_model=list[FolderResponse])
def add_folders(
    body: FolderRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[FolderResponse]:
    """Create folders; names the caller already has are skipped. Returns the created folders."""
    try:
        folders = folder_service.add_folders(db, body.folder_names, current_user.username)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return [FolderResponse.model_validate(f) for f in folders]


@router.get("/folders", response_model=list[FolderResponse])
def get_folders(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[FolderResponse]:
    return [FolderResponse.model_validate(f) for f in folder_service.get_folders(db, current_user)]


@router.get("/folders/{folder_id}/products", response_model=ProductPage)
def get_products_in_folder(
    folder_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    page: Annotated[int, Query(ge=1, le=MAX_PAGE, description="1-indexed page number")] = 1,
    size: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = 10,
    sort_by: Annotated[str, Query(alias="sortBy")] = "id",
    is_asc: Annotated[bool, Query(alias="isAsc")] = False,
) -> ProductPage:
    """List the caller's products in a folder. A folder of another user gives an empty page."""
    try:
        return folder_service.get_products_in_folder(
            db, folder_id, page - 1, size, sort_by, is_asc, current_user
        )
    except InvalidSortFieldError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message) from e


@router.get("/user-folder", response_model=UserFolderResponse)
def get_user_folder(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> UserFolderResponse:
    """Caller's name and folders for the main page."""
    folders = folder_service.get_folders(db, current_user)
    return UserFolderResponse(
        username=current_user.username,
        folders=[FolderResponse.model_validate(f) for f in folders],
    )
