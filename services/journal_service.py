import datetime as dt
import logging
from typing import Optional

from sqlalchemy.orm import Session

from domain.models import Journal
from domain.schemas.journal_schemas import JournalCreate, JournalLookupResponse
from repositories import JournalRepository
from services.results import SaveResult, status_message

logger = logging.getLogger("dailylog.journals")


class JournalService:
    @staticmethod
    def get_journal(db: Session, day: dt.date) -> Optional[Journal]:
        """Return the journal entry for ``day`` or None."""
        return JournalRepository(db).get_by_date(day)

    @staticmethod
    def lookup(db: Session, day: dt.date) -> JournalLookupResponse:
        """
        Pre-fill data for the journal form.

        Returns the stored content and ``exists=True`` when there is an entry
        for ``day``, otherwise empty content and ``exists=False``.
        """
        journal = JournalService.get_journal(db, day)
        logger.info(f"journal_lookup date={day} exists={journal is not None}")
        if journal is None:
            return JournalLookupResponse(date=day, content="", exists=False)
        return JournalLookupResponse(date=day, content=journal.content, exists=True)

    @staticmethod
    def save_journal(
        db: Session, journal_data: JournalCreate, exists: Optional[bool] = None
    ) -> SaveResult:
        """
        Save the journal entry of one date.

        Args:
            db: Database session
            journal_data: Validated date and content
            exists: What the form's last lookup for this date found. When given,
                the save goes straight to update or insert without looking the
                date up again; a stale hint is corrected by the repository.

        Raises:
            StoreError: If the lookup or the write fails
        """
        repo = JournalRepository(db)

        journal, action = repo.upsert(
            {"date": journal_data.date},
            {"content": journal_data.content},
            exists=exists,
        )

        logger.info(
            f"journal_saved date={journal_data.date} id={journal.id} "
            f"action={action.value} hint={exists} length={len(journal_data.content)}"
        )
        return SaveResult(journal, action, status_message(action))
