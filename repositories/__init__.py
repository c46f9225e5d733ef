"""
Repositories package - Data access layer.
"""

from repositories.upsert_repository import UpsertRepository
from repositories.expense_repository import ExpenseRepository
from repositories.meal_repository import MealRepository
from repositories.journal_repository import JournalRepository

__all__ = [
    "UpsertRepository",
    "ExpenseRepository",
    "MealRepository",
    "JournalRepository",
]
