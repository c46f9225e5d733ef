"""Journal routes"""

import datetime as dt
import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES, UpsertResponse, upsert_response
from domain.schemas.journal_schemas import (
    JournalCreate,
    JournalResponse,
    JournalLookupResponse,
)
from services import JournalService

router = APIRouter(prefix="/journals", tags=["Journals"], responses=ERROR_RESPONSES)
logger = logging.getLogger("dailylog.api.journals")


@router.get("/{day}", response_model=JournalLookupResponse)
def get_journal(day: dt.date, db: Session = Depends(get_db)):
    """
    Pre-fill data for the journal form.

    Always 200: ``exists`` tells whether an entry is stored for the date and
    ``content`` is its text, or empty.
    """
    return JournalService.lookup(db, day)


@router.post("", response_model=UpsertResponse[JournalResponse])
def save_journal(
    journal_data: JournalCreate, response: Response, db: Session = Depends(get_db)
):
    """Save the journal entry of one date: 201 when new, 200 when replaced."""
    result = JournalService.save_journal(db, journal_data)
    if result.created:
        response.status_code = status.HTTP_201_CREATED
        response.headers["Location"] = f"/journals/{journal_data.date.isoformat()}"
    return upsert_response(
        JournalResponse.model_validate(result.record), result.action, result.message
    )
