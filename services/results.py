"""Result of a save through one of the record services"""

from typing import Any, NamedTuple

from app.messages import status_message
from domain.enums import UpsertAction


class SaveResult(NamedTuple):
    record: Any
    action: UpsertAction
    message: str

    @property
    def created(self) -> bool:
        return self.action == UpsertAction.CREATED


__all__ = ["SaveResult", "status_message"]
