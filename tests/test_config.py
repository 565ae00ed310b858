"""Tests for app.core.config validators."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


class TestSettingsValidation(unittest.TestCase):
    def test_sqlite_and_postgres_urls_accepted(self) -> None:
        self.assertEqual(Settings(DATABASE_URL="sqlite://").DATABASE_URL, "sqlite://")
        self.assertTrue(
            Settings(DATABASE_URL="postgresql://u:p@db:5432/shop").DATABASE_URL.startswith("postgresql://")
        )

    def test_other_database_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://u:p@db/shop")

    def test_log_level_normalized(self) -> None:
        self.assertEqual(Settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            Settings(LOG_LEVEL="chatty")

    def test_api_prefix_trailing_slash_removed(self) -> None:
        self.assertEqual(Settings(API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            Settings(API_PREFIX="api")

    def test_jwt_expiry_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_EXPIRE_MINUTES=0)

    def test_blank_admin_token_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(ADMIN_TOKEN="  ")
