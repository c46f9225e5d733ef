"""
Pytest configuration and shared fixtures.

The application reads its settings at import time, so the test database is
selected here before anything from the project is imported: every test runs
against a fresh in-memory SQLite database.
"""

import os
import sys
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOCALE"] = "en"
os.environ["DB_INIT_ATTEMPTS"] = "1"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from domain.models import Base, SessionLocal, engine
from api.dependencies import get_db
from main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Database session on a freshly created schema.

    Tables are dropped again after the test so no rows leak between tests.
    """
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """TestClient whose requests share the test's database session"""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
