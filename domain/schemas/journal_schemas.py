"""Schemas for journal entries"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from domain.models.journal import JOURNAL_MAX_LENGTH


class JournalCreate(BaseModel):
    """Schema for saving the journal entry of one date"""

    date: dt.date = Field(..., description="Day of the entry")
    content: str = Field(
        ...,
        min_length=1,
        max_length=JOURNAL_MAX_LENGTH,
        description=f"Entry text, at most {JOURNAL_MAX_LENGTH} characters",
    )


class JournalResponse(BaseModel):
    """Schema for a stored journal entry"""

    id: int
    date: dt.date
    content: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}


class JournalLookupResponse(BaseModel):
    """Pre-fill data for the journal form: existing content, if any"""

    date: dt.date
    content: str = ""
    exists: bool = False
