import datetime as dt
import logging
from typing import Optional

from sqlalchemy.orm import Session

from domain.models import Expense
from domain.schemas.expense_schemas import ExpenseCreate
from repositories import ExpenseRepository
from services.results import SaveResult, status_message

logger = logging.getLogger("dailylog.expenses")


class ExpenseService:
    @staticmethod
    def get_expense(db: Session, day: dt.date) -> Optional[Expense]:
        """Return the expense record for ``day`` or None."""
        expense = ExpenseRepository(db).get_by_date(day)
        if expense:
            logger.info(f"expense_fetched date={day} id={expense.id}")
        else:
            logger.info(f"expense_not_found date={day}")
        return expense

    @staticmethod
    def save_expense(db: Session, expense_data: ExpenseCreate) -> SaveResult:
        """
        Save the expenses of one date.

        The stored record is replaced wholesale: its item list becomes the
        submitted one and its total is recomputed from those items, whatever
        total was stored before.

        Args:
            db: Database session
            expense_data: Validated date and line items

        Returns:
            SaveResult with the stored record, whether it was created or
            updated, and the status message for the user

        Raises:
            StoreError: If the lookup or the write fails
        """
        repo = ExpenseRepository(db)
        total = expense_data.total

        expense, action = repo.upsert(
            {"date": expense_data.date},
            {"items": expense_data.items_payload(), "total": total},
        )

        logger.info(
            f"expense_saved date={expense_data.date} id={expense.id} "
            f"action={action.value} items={len(expense_data.items)} total={total}"
        )
        return SaveResult(expense, action, status_message(action))
