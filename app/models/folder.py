"""ORM model for user-owned product folders."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base
from app.models.product import product_folder


class Folder(Base):
    """
    Named group of products owned by one user.

    Names are unique per user only through the check in add_folders; there is
    no database constraint.
    """

    __tablename__ = "folders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    user = relationship("User", back_populates="folders")
    products = relationship(
        "Product",
        secondary=product_folder,
        back_populates="folders",
    )
