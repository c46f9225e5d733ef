"""
Expense record: one row per date holding the day's line items and total.
"""

from sqlalchemy import (
    Column,
    Integer,
    Date,
    Numeric,
    JSON,
    TIMESTAMP,
    UniqueConstraint,
    CheckConstraint,
)
from sqlalchemy.sql import func

from domain.models.database import Base

# Precision of money columns; item amounts are held to the same limits
AMOUNT_MAX_DIGITS = 12
AMOUNT_DECIMAL_PLACES = 2


class Expense(Base):
    """Daily expenses keyed by date"""

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, index=True)
    items = Column(JSON, nullable=False, default=list)  # [{"name": str, "amount": number}]
    total = Column(Numeric(AMOUNT_MAX_DIGITS, AMOUNT_DECIMAL_PLACES), nullable=False, default=0)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        UniqueConstraint("date", name="uq_expenses_date"),
        CheckConstraint("total >= 0", name="ck_expenses_total_nonneg"),
    )

    def __repr__(self):
        return f"<Expense(id={self.id}, date={self.date}, total={self.total})>"
