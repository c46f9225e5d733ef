"""Expense form: a date and a variable-length list of line items"""

import datetime as dt
from typing import Any, Dict

from domain.schemas.expense_schemas import ExpenseCreate
from forms.base import BaseForm


def _blank_item() -> Dict[str, Any]:
    return {"name": "", "amount": 0}


class ExpenseForm(BaseForm[ExpenseCreate]):
    """
    Starts on today's date with one blank item. Items can be added and
    removed freely; the total is computed from the amounts at submit time
    and travels with the payload as ``ExpenseCreate.total``.
    """

    schema = ExpenseCreate

    def default_values(self) -> Dict[str, Any]:
        return {"date": dt.date.today().isoformat(), "items": [_blank_item()]}

    @property
    def items(self) -> list:
        return self.values.setdefault("items", [])

    def add_item(self, name: str = "", amount: Any = 0) -> int:
        """Append an item row; returns its index."""
        self.items.append({"name": name, "amount": amount})
        self._clear_errors("items")
        return len(self.items) - 1

    def remove_item(self, index: int) -> None:
        """Drop the item row at ``index``; the list may become empty."""
        del self.items[index]
        self._clear_errors("items")

    def set_item(self, index: int, **fields: Any) -> None:
        """Change ``name`` and/or ``amount`` of the item at ``index``."""
        unknown = set(fields) - {"name", "amount"}
        if unknown:
            raise KeyError(f"unknown item fields: {sorted(unknown)}")
        self.items[index].update(fields)
        for field in fields:
            self._clear_errors(f"items.{index}.{field}")
