"""
API dependencies for dependency injection
"""

from typing import Generator
from sqlalchemy.orm import Session
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    One database session per request, closed when the response is sent.

    Tests replace this dependency to share their own session with the app.
    """
    yield from get_db_session()
