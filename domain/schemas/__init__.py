"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.expense_schemas import (
    ExpenseItem,
    ExpenseCreate,
    ExpenseResponse,
)
from domain.schemas.meal_schemas import MealCreate, MealResponse
from domain.schemas.journal_schemas import (
    JournalCreate,
    JournalResponse,
    JournalLookupResponse,
)

__all__ = [
    # Expense schemas
    "ExpenseItem",
    "ExpenseCreate",
    "ExpenseResponse",
    # Meal schemas
    "MealCreate",
    "MealResponse",
    # Journal schemas
    "JournalCreate",
    "JournalResponse",
    "JournalLookupResponse",
]
