"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.folder import Folder
from app.models.product import Product, product_folder
from app.models.user import User, UserRole

__all__ = ["Base", "Folder", "Product", "User", "UserRole", "product_folder"]
