"""Interest products: creation, role-scoped listing, target price and folder links."""

import logging
import math

from sqlalchemy.orm import Query, Session

from app.models import Folder, Product, UserRole
from app.schemas.auth import CurrentUser
from app.schemas.product import (
    ProductMypriceRequest,
    ProductPage,
    ProductRequest,
    ProductResponse,
)
from app.schemas.search import ItemDto
from app.services.errors import (
    FolderNotFoundError,
    InvalidSortFieldError,
    ProductNotFoundError,
)

logger = logging.getLogger(__name__)

# Client-facing sort keys -> columns. Anything else is rejected.
SORTABLE_FIELDS = {
    "id": Product.id,
    "title": Product.title,
    "lprice": Product.lprice,
    "myprice": Product.myprice,
    "createdAt": Product.created_at,
    "created_at": Product.created_at,
    "modifiedAt": Product.modified_at,
    "modified_at": Product.modified_at,
}

PRODUCT_NOT_FOUND = "Product not found."
FOLDER_NOT_FOUND = "Folder not found."


def _order_by(sort_by: str, is_asc: bool) -> list:
    column = SORTABLE_FIELDS.get(sort_by)
    if column is None:
        raise InvalidSortFieldError(
            f"sortBy must be one of {sorted(SORTABLE_FIELDS)}, got {sort_by!r}"
        )
    primary = column.asc() if is_asc else column.desc()
    # id breaks ties so pages never overlap.
    if column is Product.id:
        return [primary]
    return [primary, Product.id.asc()]


def paginate(query: Query, page: int, size: int, sort_by: str, is_asc: bool) -> ProductPage:
    """Apply sort and 0-indexed page/size to a product query and wrap the result."""
    order = _order_by(sort_by, is_asc)
    total = query.order_by(None).count()
    rows = query.order_by(*order).offset(page * size).limit(size).all()
    return ProductPage(
        content=[ProductResponse.model_validate(p) for p in rows],
        total_elements=total,
        total_pages=math.ceil(total / size) if size else 0,
        number=page,
        size=size,
    )


def create_product(db: Session, body: ProductRequest, user: CurrentUser) -> ProductResponse:
    """Persist a product owned by user; myprice starts at 0."""
    product = Product(
        title=body.title,
        link=body.link,
        image=body.image,
        lprice=body.lprice,
        myprice=0,
        user_id=user.id,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Product created: id=%s user_id=%s", product.id, user.id)
    return ProductResponse.model_validate(product)


def get_products(
    db: Session,
    user: CurrentUser,
    page: int,
    size: int,
    sort_by: str,
    is_asc: bool,
) -> ProductPage:
    """
    Return one page of products visible to user.

    USER sees only rows it owns; ADMIN sees every row. page is 0-indexed.
    Raises InvalidSortFieldError for an unknown sort_by.
    """
    query = db.query(Product)
    if user.role == UserRole.USER:
        query = query.filter(Product.user_id == user.id)
    return paginate(query, page, size, sort_by, is_asc)


def update_product(
    db: Session,
    product_id: int,
    body: ProductMypriceRequest,
    user: CurrentUser,
) -> int:
    """
    Set the target price of a product owned by user and return its id.

    A missing product and one owned by someone else raise the same ProductNotFoundError.
    """
    product = (
        db.query(Product)
        .filter(Product.id == product_id, Product.user_id == user.id)
        .first()
    )
    if product is None:
        raise ProductNotFoundError(PRODUCT_NOT_FOUND)
    product.myprice = body.myprice
    db.commit()
    return product.id


def add_folder(db: Session, product_id: int, folder_id: int, user: CurrentUser) -> Product:
    """
    Link folder_id to product_id when both belong to user.

    Missing and foreign ids raise the same not-found error so callers cannot
    probe other users' ids. Linking an already linked folder is a no-op.
    """
    product = db.get(Product, product_id)
    if product is None or product.user_id != user.id:
        raise ProductNotFoundError(PRODUCT_NOT_FOUND)
    folder = db.get(Folder, folder_id)
    if folder is None or folder.user_id != user.id:
        raise FolderNotFoundError(FOLDER_NOT_FOUND)

    product.add_folder(folder)
    db.commit()
    return product


def update_by_search(db: Session, product_id: int, item: ItemDto) -> Product:
    """Copy the latest lowest price from a search result. Trusted job path: no owner check."""
    product = db.get(Product, product_id)
    if product is None:
        raise ProductNotFoundError(PRODUCT_NOT_FOUND)
    product.lprice = item.lprice
    db.commit()
    return product
