"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch the real data/resources.sqlite store
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
