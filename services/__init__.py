"""Services package - Business logic layer"""

from services.results import SaveResult, status_message
from services.expense_service import ExpenseService
from services.meal_service import MealService
from services.journal_service import JournalService

__all__ = [
    "SaveResult",
    "status_message",
    "ExpenseService",
    "MealService",
    "JournalService",
]
