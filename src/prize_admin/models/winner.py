"""Winners ledger model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from ..core.database import Base


class Winner(Base):
    """A code value declared a winner, stored in whatever format it was entered."""

    __tablename__ = "winners"

    id = Column(Integer, primary_key=True, autoincrement=True)
    value = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    deleted_at = Column(DateTime)
