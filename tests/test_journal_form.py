"""
Tests for the journal form and its date-driven pre-fill.

Journal pre-fill flow:
1. User picks a date
2. Form looks up that date's entry
3. Content is filled in (exists=True) or cleared (exists=False)
4. Save uses the exists flag to update or insert without a second lookup

Rapid date changes must always settle on the last chosen date.
"""

import asyncio
import datetime as dt
from functools import partial

import pytest
from sqlalchemy.orm import Session

from app.exceptions import StoreError
from domain.models import Journal
from domain.schemas import JournalCreate, JournalLookupResponse
from forms import JournalForm
from services import JournalService
from test_fixtures import count_rows


class FakeLoader:
    """
    Async loader over a dict of date -> content. A date listed in ``gates``
    blocks until its event is set, to hold a load in flight.
    """

    def __init__(self, entries=None):
        self.entries = entries or {}
        self.gates = {}
        self.calls = []

    def hold(self, day: dt.date) -> asyncio.Event:
        self.gates[day] = asyncio.Event()
        return self.gates[day]

    async def __call__(self, day: dt.date):
        self.calls.append(day)
        gate = self.gates.get(day)
        if gate is not None:
            await gate.wait()
        content = self.entries.get(day)
        return JournalLookupResponse(
            date=day, content=content or "", exists=content is not None
        )


D1 = dt.date(2024, 1, 1)
D2 = dt.date(2024, 1, 2)
D3 = dt.date(2024, 1, 3)


# =============================================================================
# PRE-FILL
# =============================================================================


def test_journal_form_defaults():
    form = JournalForm(loader=FakeLoader())

    assert form.values == {"date": dt.date.today().isoformat(), "content": ""}
    assert form.exists is False


@pytest.mark.anyio
async def test_change_date_fills_existing_content():
    loader = FakeLoader({D1: "Went hiking."})
    form = JournalForm(loader=loader)

    await form.change_date("2024-01-01")

    assert loader.calls == [D1]
    assert form.values["content"] == "Went hiking."
    assert form.exists is True


@pytest.mark.anyio
async def test_change_date_clears_content_when_absent():
    """
    Verifies:
    - Moving from a date with an entry to one without clears the text
    - Every change re-queries, including returning to an earlier date
    """
    loader = FakeLoader({D1: "Went hiking."})
    form = JournalForm(loader=loader)

    await form.change_date("2024-01-01")
    await form.change_date("2024-01-02")

    assert form.values["content"] == ""
    assert form.exists is False

    await form.change_date("2024-01-01")

    assert form.values["content"] == "Went hiking."
    assert loader.calls == [D1, D2, D1]


@pytest.mark.anyio
async def test_change_date_accepts_loader_returning_record_or_none():
    entries = {D1: Journal(id=1, date=D1, content="stored")}
    form = JournalForm(loader=lambda day: entries.get(day))

    await form.change_date(D1)
    assert (form.values["content"], form.exists) == ("stored", True)

    await form.change_date(D2)
    assert (form.values["content"], form.exists) == ("", False)


@pytest.mark.anyio
async def test_change_date_clears_message():
    form = JournalForm(loader=FakeLoader())
    form.message = "Saved"

    await form.change_date("2024-01-02")

    assert form.message is None


@pytest.mark.anyio
async def test_change_date_invalid_date_skips_lookup():
    loader = FakeLoader()
    form = JournalForm(loader=loader, content="keep me")

    await form.change_date("")

    assert loader.calls == []
    assert form.values["content"] == "keep me"


@pytest.mark.anyio
async def test_change_date_load_failure_leaves_form_unchanged():
    def loader(day):
        raise StoreError("Failed to load entry", operation="select")

    form = JournalForm(loader=loader, content="typed so far")

    await form.change_date("2024-01-01")

    assert form.values["content"] == "typed so far"
    assert form.exists is False


@pytest.mark.anyio
async def test_rapid_date_changes_never_apply_stale_response():
    """
    Verifies:
    - A slow load for D1 is cancelled when the user moves on to D2
    - Releasing D1's response afterwards does not overwrite D2's content
    """
    loader = FakeLoader({D1: "old day", D2: "new day"})
    gate = loader.hold(D1)
    form = JournalForm(loader=loader)

    first = asyncio.create_task(form.change_date("2024-01-01"))
    while loader.calls != [D1]:
        await asyncio.sleep(0)

    await form.change_date("2024-01-02")
    gate.set()
    await first

    assert form.values["date"] == "2024-01-02"
    assert form.values["content"] == "new day"
    assert form.exists is True


@pytest.mark.anyio
async def test_only_last_of_many_changes_is_applied():
    loader = FakeLoader({D1: "one", D2: "two", D3: "three"})
    gates = [loader.hold(D1), loader.hold(D2)]
    form = JournalForm(loader=loader)

    pending = [
        asyncio.create_task(form.change_date(D1)),
        asyncio.create_task(form.change_date(D2)),
    ]
    await asyncio.sleep(0)
    await form.change_date(D3)
    for gate in gates:
        gate.set()
    await asyncio.gather(*pending)

    assert form.values["content"] == "three"


# =============================================================================
# SUBMIT
# =============================================================================


@pytest.mark.anyio
async def test_submit_passes_exists_flag():
    calls = []

    def handler(payload, exists):
        calls.append((payload, exists))

    form = JournalForm(loader=FakeLoader({D1: "before"}))
    await form.change_date(D1)
    form.set("content", "after")

    await form.submit(handler)

    payload, exists = calls[0]
    assert isinstance(payload, JournalCreate)
    assert payload.content == "after"
    assert exists is True


@pytest.mark.anyio
async def test_submit_validation():
    calls = []
    form = JournalForm(loader=FakeLoader())
    await form.change_date(D1)

    await form.submit(lambda payload, exists: calls.append(payload))
    assert form.errors == {"content": "This field is required"}

    form.set("content", "x" * 1001)
    await form.submit(lambda payload, exists: calls.append(payload))
    assert form.errors == {"content": "Must be 1000 characters or less"}

    assert calls == []


@pytest.mark.anyio
async def test_journal_form_end_to_end(db_session: Session):
    """
    Verifies with the real service:
    - New date: insert, "Saved", exists flips to True
    - Second submit on the same date: update, "Updated"
    - Switching away and back pre-fills the saved text
    """
    form = JournalForm(
        loader=partial(JournalService.lookup, db_session),
        date="2024-01-01",
    )
    handler = partial(JournalService.save_journal, db_session)

    await form.load()
    assert form.exists is False

    form.set("content", "First draft")
    await form.submit(handler)
    assert form.message == "Saved"
    assert form.exists is True

    form.set("content", "Second draft")
    await form.submit(handler)
    assert form.message == "Updated"

    await form.change_date("2024-01-02")
    assert form.values["content"] == ""
    await form.change_date("2024-01-01")
    assert form.values["content"] == "Second draft"

    assert count_rows(db_session, Journal) == 1


@pytest.mark.anyio
async def test_journal_form_japanese_status(db_session: Session, monkeypatch):
    monkeypatch.setattr("app.messages.settings.locale", "ja")
    form = JournalForm(loader=partial(JournalService.lookup, db_session), date="2024-01-01")
    await form.load()
    form.set("content", "今日は晴れ")

    await form.submit(partial(JournalService.save_journal, db_session))

    assert form.message == "保存しました"
