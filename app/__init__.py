"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and the user-facing message catalog.
"""

from app.config import settings
from app.exceptions import (
    NotFoundError,
    StoreError,
)
from app.messages import translate

__all__ = [
    "settings",
    "NotFoundError",
    "StoreError",
    "translate",
]
