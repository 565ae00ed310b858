"""Interest product endpoints: register, list (role-scoped), set target price, link folders."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.product import (
    ProductMypriceRequest,
    ProductPage,
    ProductRequest,
    ProductResponse,
)
from app.services import products as product_service
from app.services.errors import (
    FolderNotFoundError,
    InvalidSortFieldError,
    ProductNotFoundError,
)

router = APIRouter()

MAX_PAGE_SIZE = 100
# Keeps page * size far inside the database's 64-bit OFFSET range.
MAX_PAGE = 1_000_000


@router.post("", response_model=ProductResponse)
def create_product(
    body: ProductRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ProductResponse:
    """Register a search result as an interest product of the caller. myprice starts at 0."""
    return product_service.create_product(db, body, current_user)


@router.get("", response_model=ProductPage)
def get_products(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    page: Annotated[int, Query(ge=1, le=MAX_PAGE, description="1-indexed page number")] = 1,
    size: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = 10,
    sort_by: Annotated[str, Query(alias="sortBy")] = "id",
    is_asc: Annotated[bool, Query(alias="isAsc")] = False,
) -> ProductPage:
    """
    List products page by page.

    Users see their own products; admins see every product.
    """
    try:
        return product_service.get_products(db, current_user, page - 1, size, sort_by, is_asc)
    except InvalidSortFieldError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message) from e


@router.put("/{product_id}")
def update_product(
    product_id: int,
    body: ProductMypriceRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> int:
    """Set the caller's target price; returns the product id."""
    try:
        return product_service.update_product(db, product_id, body, current_user)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.post("/{product_id}/folder")
def add_folder(
    product_id: int,
    folder_id: Annotated[int, Query(alias="folderId")],
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> int:
    """Put one of the caller's products into one of the caller's folders; returns the product id."""
    try:
        product = product_service.add_folder(db, product_id, folder_id, current_user)
    except (ProductNotFoundError, FolderNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return product.id
