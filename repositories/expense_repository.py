"""
Expense Repository - Data access layer for daily expense records
"""

import datetime as dt
from typing import Optional

from sqlalchemy.orm import Session

from repositories.upsert_repository import UpsertRepository
from domain.models import Expense


class ExpenseRepository(UpsertRepository[Expense]):
    """Repository for expense records, one per date"""

    key_columns = ("date",)
    mutable_columns = ("items", "total")

    def __init__(self, db: Session):
        super().__init__(db, Expense)

    def get_by_date(self, day: dt.date) -> Optional[Expense]:
        """Get the expense record for a date"""
        return self.find_by_key(date=day)
