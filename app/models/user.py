"""ORM model for application users (auth and RBAC)."""

import enum

from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class UserRole(str, enum.Enum):
    """Closed set of roles; ADMIN sees every user's products."""

    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    """User account for JWT authentication and role-based access control."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    role = Column(
        Enum(UserRole, name="user_role", native_enum=False, length=16),
        nullable=False,
        default=UserRole.USER,
    )

    folders = relationship("Folder", back_populates="user", order_by="Folder.id")
