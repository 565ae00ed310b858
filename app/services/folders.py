"""Folders: per-user creation without duplicate names, listing, and products per folder."""

import logging

from sqlalchemy.orm import Session

from app.models import Folder, Product, product_folder
from app.schemas.auth import CurrentUser
from app.schemas.product import ProductPage
from app.services.errors import UserNotFoundError
from app.services.products import paginate
from app.services.users import get_user_by_username

logger = logging.getLogger(__name__)


def add_folders(db: Session, names: list[str], username: str) -> list[Folder]:
    """
    Create the folders in names that username does not already have.

    Only stored folders are checked; repeated names inside one request are all
    created. The check and the insert are not atomic.
    """
    user = get_user_by_username(db, username)
    if user is None:
        raise UserNotFoundError("User not found.")

    existing = {
        f.name
        for f in db.query(Folder)
        .filter(Folder.user_id == user.id, Folder.name.in_(names))
        .all()
    }
    new_folders = [Folder(name=name, user_id=user.id) for name in names if name not in existing]
    if new_folders:
        db.add_all(new_folders)
        db.commit()
        for folder in new_folders:
            db.refresh(folder)
    logger.info(
        "Folders added: user_id=%s created=%s skipped=%s",
        user.id,
        len(new_folders),
        len(names) - len(new_folders),
    )
    return new_folders


def get_folders(db: Session, user: CurrentUser) -> list[Folder]:
    return db.query(Folder).filter(Folder.user_id == user.id).order_by(Folder.id).all()


def get_products_in_folder(
    db: Session,
    folder_id: int,
    page: int,
    size: int,
    sort_by: str,
    is_asc: bool,
    user: CurrentUser,
) -> ProductPage:
    """
    Page through user's products linked to folder_id.

    Filtering on the owner and the folder in one query means a folder id of
    another user yields an empty page.
    """
    query = (
        db.query(Product)
        .join(product_folder, product_folder.c.product_id == Product.id)
        .filter(Product.user_id == user.id, product_folder.c.folder_id == folder_id)
    )
    return paginate(query, page, size, sort_by, is_asc)
