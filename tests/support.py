"""Shared test cases: a fresh in-memory database per test and an API client bound to it."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.core.security import create_token, hash_password
from app.main import app
from app.models import Base, Folder, Product, User, UserRole
from app.schemas.auth import CurrentUser

PASSWORD = "password123"
# One bcrypt run for the whole session; users created directly share this hash.
PASSWORD_HASH = hash_password(PASSWORD)


class DatabaseTestCase(unittest.TestCase):
    """Gives each test an empty schema in a private in-memory SQLite database."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)
        self.db: Session = self.SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def make_user(self, username: str, role: UserRole = UserRole.USER) -> User:
        user = User(
            username=username,
            password_hash=PASSWORD_HASH,
            email=f"{username}@example.com",
            role=role,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def make_product(self, owner: User, title: str = "item", lprice: int = 1000, myprice: int = 0) -> Product:
        product = Product(
            title=title,
            link=f"https://shop.example.com/{title}",
            image=f"https://img.example.com/{title}.jpg",
            lprice=lprice,
            myprice=myprice,
            user_id=owner.id,
        )
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def make_folder(self, owner: User, name: str) -> Folder:
        folder = Folder(name=name, user_id=owner.id)
        self.db.add(folder)
        self.db.commit()
        self.db.refresh(folder)
        return folder

    @staticmethod
    def current(user: User) -> CurrentUser:
        return CurrentUser.model_validate(user)


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db yields sessions on the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    @staticmethod
    def auth(user: User) -> dict[str, str]:
        return {"Authorization": create_token(user.username, user.role.value)}
