"""SQLAlchemy models for the prize campaign."""

from .code import Code
from .gift import Gift, GiftTier
from .user import User
from .winner import Winner

__all__ = [
    "Code",
    "Gift",
    "GiftTier",
    "User",
    "Winner",
]
