"""Expense routes"""

import datetime as dt
import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES, UpsertResponse, upsert_response
from app.exceptions import NotFoundError
from app.messages import translate
from domain.schemas.expense_schemas import ExpenseCreate, ExpenseResponse
from services import ExpenseService

router = APIRouter(prefix="/expenses", tags=["Expenses"], responses=ERROR_RESPONSES)
logger = logging.getLogger("dailylog.api.expenses")


@router.get("/{day}", response_model=ExpenseResponse)
def get_expense(day: dt.date, db: Session = Depends(get_db)):
    """Get the expenses recorded for a date."""
    expense = ExpenseService.get_expense(db, day)
    if not expense:
        raise NotFoundError(translate("not_found", key=day.isoformat()))
    return ExpenseResponse.model_validate(expense)


@router.post("", response_model=UpsertResponse[ExpenseResponse])
def save_expense(
    expense_data: ExpenseCreate, response: Response, db: Session = Depends(get_db)
):
    """
    Save the expenses of one date.

    The first save for a date creates the record (201); later saves replace
    its items and total (200). The total is always the sum of the submitted
    item amounts.
    """
    result = ExpenseService.save_expense(db, expense_data)
    if result.created:
        response.status_code = status.HTTP_201_CREATED
        response.headers["Location"] = f"/expenses/{expense_data.date.isoformat()}"
    return upsert_response(
        ExpenseResponse.model_validate(result.record), result.action, result.message
    )
