"""Meal form: date, meal type, content and calories"""

from domain.schemas.meal_schemas import MealCreate
from forms.base import BaseForm


class MealForm(BaseForm[MealCreate]):
    """No defaults; every field must be filled in before submit."""

    schema = MealCreate
