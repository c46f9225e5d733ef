"""
Journal form with pre-fill.

Choosing a date loads that day's entry into the form. Loads run as asyncio
tasks: picking another date cancels the load in flight, and a load that
finishes for a date that is no longer selected is discarded, so quick
successive date changes always end on the content of the last date chosen.
"""

import asyncio
import datetime as dt
import logging
from typing import Any, Callable, Dict, Optional

from pydantic import TypeAdapter, ValidationError

from app.exceptions import StoreError
from domain.schemas.journal_schemas import JournalCreate
from forms.base import BaseForm, call_handler

logger = logging.getLogger("dailylog.forms.journal")

_date_adapter = TypeAdapter(dt.date)


class JournalForm(BaseForm[JournalCreate]):
    """
    Args:
        loader: called with a ``date``; returns the stored entry (anything
            with ``content``, optionally ``exists``) or None. May be async.
    """

    schema = JournalCreate

    def __init__(self, loader: Callable[[dt.date], Any], locale: Optional[str] = None, **initial: Any):
        super().__init__(locale=locale, **initial)
        self.loader = loader
        self.exists = False
        self._generation = 0
        self._load_task: Optional[asyncio.Task] = None

    def default_values(self) -> Dict[str, Any]:
        return {"date": dt.date.today().isoformat(), "content": ""}

    async def load(self) -> None:
        """Load the entry for the currently selected date."""
        await self.change_date(self.values.get("date"))

    async def change_date(self, value: Any) -> None:
        """
        Select ``value`` and re-run the lookup for it.

        Clears the status message, cancels an unfinished earlier load, then
        waits for this load. Returns once the form reflects ``value`` or a
        newer date change has taken over.
        """
        self.set("date", value)
        self.message = None
        self._generation += 1

        if self._load_task is not None and not self._load_task.done():
            self._load_task.cancel()

        task = asyncio.get_running_loop().create_task(
            self._load(value, self._generation)
        )
        self._load_task = task
        await asyncio.wait({task})

        if not task.cancelled() and task.exception() is not None:
            raise task.exception()

    async def _load(self, value: Any, generation: int) -> None:
        try:
            day = _date_adapter.validate_python(value)
        except ValidationError:
            logger.debug(f"journal_prefill_skipped date={value!r}")
            return

        try:
            found = await call_handler(self.loader, day)
        except StoreError as e:
            logger.error(f"journal_prefill_failed date={day} error={e.cause or e}")
            return

        if generation != self._generation:
            logger.debug(f"journal_prefill_stale date={day}")
            return

        exists = found is not None and bool(getattr(found, "exists", True))
        self.values["content"] = found.content if exists else ""
        self.exists = exists
        self._clear_errors("content")
        logger.debug(f"journal_prefilled date={day} exists={exists}")

    def handler_args(self, payload: JournalCreate) -> tuple:
        return (payload, self.exists)

    def after_submit(self, payload: JournalCreate, result: Any) -> None:
        self.exists = True
