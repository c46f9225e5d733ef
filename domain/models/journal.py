"""
Journal record: one free-text entry per date.
"""

from sqlalchemy import Column, Integer, Date, String, TIMESTAMP, UniqueConstraint
from sqlalchemy.sql import func

from domain.models.database import Base

JOURNAL_MAX_LENGTH = 1000


class Journal(Base):
    """Journal entries keyed by date"""

    __tablename__ = "journals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, index=True)
    content = Column(String(JOURNAL_MAX_LENGTH), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (UniqueConstraint("date", name="uq_journals_date"),)

    def __repr__(self):
        return f"<Journal(id={self.id}, date={self.date})>"
