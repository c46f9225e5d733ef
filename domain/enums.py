"""
Domain enums for DailyLog application.
Contains all enumeration types used across the domain models.
"""

import enum


class MealType(str, enum.Enum):
    """Meal slot within a day; part of the meal natural key"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class UpsertAction(str, enum.Enum):
    """Outcome of an upsert by natural key"""

    CREATED = "created"
    UPDATED = "updated"
