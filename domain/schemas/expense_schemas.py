"""Schemas for expense records"""

import datetime as dt
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_core import PydanticCustomError

from domain.models.expense import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS

# Largest total the column can hold
_TOTAL_LIMIT = Decimal(10) ** (AMOUNT_MAX_DIGITS - AMOUNT_DECIMAL_PLACES)


class ExpenseItem(BaseModel):
    """A single line item of a day's expenses"""

    name: str = Field(..., min_length=1, description="What the money was spent on")
    amount: Decimal = Field(
        ...,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        allow_inf_nan=False,
        description=f"Amount spent (non-negative, at most {AMOUNT_DECIMAL_PLACES} decimal places)",
    )

    model_config = {"from_attributes": True}


class ExpenseCreate(BaseModel):
    """
    Schema for saving the expenses of one date.

    ``total`` is derived from ``items`` every time the model is built; any
    total sent by a client is ignored.
    """

    date: dt.date = Field(..., description="Day the expenses belong to")
    items: List[ExpenseItem] = Field(
        ..., min_length=1, description="Line items, at least one"
    )

    @field_validator("items")
    @classmethod
    def check_total_fits(cls, items: List[ExpenseItem]) -> List[ExpenseItem]:
        if sum((item.amount for item in items), Decimal("0")) >= _TOTAL_LIMIT:
            raise PydanticCustomError(
                "total_too_large",
                "Total must be less than {limit}",
                {"limit": str(_TOTAL_LIMIT)},
            )
        return items

    @computed_field
    @property
    def total(self) -> Decimal:
        return sum((item.amount for item in self.items), Decimal("0"))

    def items_payload(self) -> List[dict]:
        """Items as JSON-safe dicts for the ``items`` column"""
        return [
            {"name": item.name, "amount": _json_number(item.amount)}
            for item in self.items
        ]


class ExpenseResponse(BaseModel):
    """Schema for a stored expense record"""

    id: int
    date: dt.date
    items: List[ExpenseItem]
    total: Decimal
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}


def _json_number(value: Decimal):
    """Whole amounts stay ints so stored JSON reads naturally (1200, not 1200.0)"""
    if value == value.to_integral_value():
        return int(value)
    return float(value)
