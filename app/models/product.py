"""ORM models for interest products and their folder association."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, func
from sqlalchemy.orm import relationship

from app.models.base import Base

# Many-to-many link between products and folders; both ends belong to the same user.
product_folder = Table(
    "product_folder",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("folder_id", Integer, ForeignKey("folders.id", ondelete="CASCADE"), primary_key=True),
)


class Product(Base):
    """
    A shopping item a user registered interest in.

    lprice is the lowest price seen by the search provider; myprice is the
    owner's target price. user_id is set once at creation.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(512), nullable=False)
    link = Column(String(2048), nullable=False, default="")
    image = Column(String(2048), nullable=False, default="")
    lprice = Column(Integer, nullable=False, default=0)
    myprice = Column(Integer, nullable=False, default=0)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    modified_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    folders = relationship(
        "Folder",
        secondary=product_folder,
        back_populates="products",
        order_by="Folder.id",
    )

    def add_folder(self, folder) -> None:
        if folder not in self.folders:
            self.folders.append(folder)
