"""Gift catalog model."""

import enum
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base


class GiftTier(str, enum.Enum):
    """Prize tiers a gift can belong to."""

    PREMIUM = "premium"
    STANDARD = "standard"
    ECONOMY = "economy"
    SYMBOLIC = "symbolic"


class Gift(Base):
    """A prize that codes can be linked to."""

    __tablename__ = "gifts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False, default=GiftTier.STANDARD.value)
    image = Column(String)
    images = Column(JSON, nullable=False, default=list)
    total_count = Column(Integer, nullable=False, default=0)
    used_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    deleted_at = Column(DateTime)

    codes = relationship("Code", back_populates="gift")
