"""
Forms package - input state and validation for each record type.
"""

from forms.base import BaseForm, call_handler
from forms.expense_form import ExpenseForm
from forms.meal_form import MealForm
from forms.journal_form import JournalForm

__all__ = [
    "BaseForm",
    "call_handler",
    "ExpenseForm",
    "MealForm",
    "JournalForm",
]
