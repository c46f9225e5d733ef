"""
Journal Repository - Data access layer for journal entries
"""

import datetime as dt
from typing import Optional

from sqlalchemy.orm import Session

from repositories.upsert_repository import UpsertRepository
from domain.models import Journal


class JournalRepository(UpsertRepository[Journal]):
    """Repository for journal entries, one per date"""

    key_columns = ("date",)
    mutable_columns = ("content",)

    def __init__(self, db: Session):
        super().__init__(db, Journal)

    def get_by_date(self, day: dt.date) -> Optional[Journal]:
        """Get the journal entry for a date"""
        return self.find_by_key(date=day)
