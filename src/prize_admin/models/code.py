"""Redeemable code model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base


class Code(Base):
    """A code printed for the campaign, redeemed once ``used_at`` is set."""

    __tablename__ = "codes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    value = Column(String, nullable=False, index=True)
    gift_id = Column(Integer, ForeignKey("gifts.id", ondelete="SET NULL"))
    used_by_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"))
    used_at = Column(DateTime)
    month = Column(String, index=True)
    gift_given_by = Column(String)
    gift_given_at = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    deleted_at = Column(DateTime)

    gift = relationship("Gift", back_populates="codes")
    used_by = relationship("User", back_populates="codes")

    @property
    def is_used(self) -> bool:
        return self.used_at is not None
