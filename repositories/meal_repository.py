"""
Meal Repository - Data access layer for meal records
"""

import datetime as dt
from typing import Optional

from sqlalchemy.orm import Session

from repositories.upsert_repository import UpsertRepository
from domain.enums import MealType
from domain.models import Meal


class MealRepository(UpsertRepository[Meal]):
    """Repository for meal records, one per (date, type)"""

    key_columns = ("date", "type")
    mutable_columns = ("content", "calories")

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_by_date_and_type(self, day: dt.date, meal_type: MealType) -> Optional[Meal]:
        """Get the meal record for a date and meal type"""
        return self.find_by_key(date=day, type=MealType(meal_type).value)
