"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
    get_db_session,
)
from domain.models.expense import Expense, AMOUNT_MAX_DIGITS, AMOUNT_DECIMAL_PLACES
from domain.models.meal import Meal
from domain.models.journal import Journal, JOURNAL_MAX_LENGTH

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    "get_db_session",
    # Records
    "Expense",
    "AMOUNT_MAX_DIGITS",
    "AMOUNT_DECIMAL_PLACES",
    "Meal",
    "Journal",
    "JOURNAL_MAX_LENGTH",
]
