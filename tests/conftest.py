"""Shared fixtures: a throwaway SQLite database configured before import."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "orisai_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from orisai.config import reset_settings_cache  # noqa: E402

reset_settings_cache()


@pytest.fixture()
def db_session():
    """Yield a session bound to a freshly created schema."""

    from orisai.infrastructure.database import (
        Base,
        SessionLocal,
        engine,
        initialize_database,
    )

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
