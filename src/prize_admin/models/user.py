"""Campaign participant model."""

from datetime import datetime

from sqlalchemy import BigInteger, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base


class User(Base):
    """A Telegram user who redeems codes."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tg_id = Column(BigInteger, index=True)
    tg_first_name = Column(String)
    tg_last_name = Column(String)
    tg_username = Column(String)
    first_name = Column(String)
    phone_number = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    deleted_at = Column(DateTime)

    codes = relationship("Code", back_populates="used_by")
