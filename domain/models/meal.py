"""
Meal record: one row per (date, meal type).
"""

from sqlalchemy import Column, Integer, Date, Text, TIMESTAMP, UniqueConstraint
from sqlalchemy.sql import func

from domain.models.database import Base


class Meal(Base):
    """Meals keyed by date and meal type"""

    __tablename__ = "meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, index=True)
    type = Column(Text, nullable=False)  # breakfast, lunch, dinner, snack
    content = Column(Text, nullable=False)
    calories = Column(Integer, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (UniqueConstraint("date", "type", name="uq_meals_date_type"),)

    def __repr__(self):
        return f"<Meal(id={self.id}, date={self.date}, type='{self.type}')>"
