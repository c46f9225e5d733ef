"""Meal routes"""

import datetime as dt
import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES, UpsertResponse, upsert_response
from app.exceptions import NotFoundError
from app.messages import translate
from domain.enums import MealType
from domain.schemas.meal_schemas import MealCreate, MealResponse
from services import MealService

router = APIRouter(prefix="/meals", tags=["Meals"], responses=ERROR_RESPONSES)
logger = logging.getLogger("dailylog.api.meals")


@router.get("/{day}/{meal_type}", response_model=MealResponse)
def get_meal(day: dt.date, meal_type: MealType, db: Session = Depends(get_db)):
    """Get the meal recorded for a date and meal type."""
    meal = MealService.get_meal(db, day, meal_type)
    if not meal:
        raise NotFoundError(
            translate("not_found", key=f"{day.isoformat()} {meal_type.value}")
        )
    return MealResponse.model_validate(meal)


@router.post("", response_model=UpsertResponse[MealResponse])
def save_meal(meal_data: MealCreate, response: Response, db: Session = Depends(get_db)):
    """
    Save one meal. (date, type) identifies the record: 201 when it is new,
    200 when an earlier meal of that type on that date was replaced.
    """
    result = MealService.save_meal(db, meal_data)
    if result.created:
        response.status_code = status.HTTP_201_CREATED
        response.headers["Location"] = (
            f"/meals/{meal_data.date.isoformat()}/{meal_data.type.value}"
        )
    return upsert_response(
        MealResponse.model_validate(result.record), result.action, result.message
    )
