import datetime as dt
import logging
from typing import Optional

from sqlalchemy.orm import Session

from domain.enums import MealType
from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate
from repositories import MealRepository
from services.results import SaveResult, status_message

logger = logging.getLogger("dailylog.meals")


class MealService:
    @staticmethod
    def get_meal(db: Session, day: dt.date, meal_type: MealType) -> Optional[Meal]:
        """Return the meal recorded for ``day`` and ``meal_type`` or None."""
        meal = MealRepository(db).get_by_date_and_type(day, meal_type)
        if meal:
            logger.info(f"meal_fetched date={day} type={meal.type} id={meal.id}")
        else:
            logger.info(f"meal_not_found date={day} type={MealType(meal_type).value}")
        return meal

    @staticmethod
    def save_meal(db: Session, meal_data: MealCreate) -> SaveResult:
        """
        Save one meal. A second save for the same date and meal type replaces
        content and calories of the first instead of adding a row.

        Raises:
            StoreError: If the lookup or the write fails
        """
        repo = MealRepository(db)

        meal, action = repo.upsert(
            {"date": meal_data.date, "type": meal_data.type.value},
            {"content": meal_data.content, "calories": meal_data.calories},
        )

        logger.info(
            f"meal_saved date={meal_data.date} type={meal_data.type.value} "
            f"id={meal.id} action={action.value} calories={meal_data.calories}"
        )
        return SaveResult(meal, action, status_message(action))
