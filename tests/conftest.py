"""Test environment: in-memory SQLite instead of Postgres, no .env surprises."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("ADMIN_TOKEN", "test-admin-token")
