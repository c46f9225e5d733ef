"""Schemas for meal records"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from domain.enums import MealType


class MealCreate(BaseModel):
    """Schema for saving one meal; (date, type) identifies the record"""

    date: dt.date = Field(..., description="Day of the meal")
    type: MealType = Field(..., description="breakfast, lunch, dinner or snack")
    content: str = Field(..., min_length=1, description="What was eaten")
    calories: int = Field(..., description="Calorie count (whole number)")


class MealResponse(BaseModel):
    """Schema for a stored meal record"""

    id: int
    date: dt.date
    type: MealType
    content: str
    calories: int
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}
