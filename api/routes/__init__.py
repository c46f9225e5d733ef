"""API routes package"""

from . import health, expenses, meals, journals

__all__ = ["health", "expenses", "meals", "journals"]
