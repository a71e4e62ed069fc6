"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or listen on the production port
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
