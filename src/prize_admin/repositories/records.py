"""Immutable records handed from repositories to services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..models import Code, Gift, User


@dataclass(frozen=True)
class GiftSummary:
    id: int
    name: str
    type: str
    image: Optional[str] = None
    images: list[str] = field(default_factory=list)
    total_count: int = 0
    used_count: int = 0

    @classmethod
    def from_model(cls, gift: Gift) -> "GiftSummary":
        return cls(
            id=gift.id,
            name=gift.name,
            type=gift.type,
            image=gift.image,
            images=list(gift.images or []),
            total_count=gift.total_count or 0,
            used_count=gift.used_count or 0,
        )


@dataclass(frozen=True)
class UserSummary:
    id: int
    tg_id: Optional[int] = None
    tg_first_name: Optional[str] = None
    tg_last_name: Optional[str] = None
    first_name: Optional[str] = None
    phone_number: Optional[str] = None

    @classmethod
    def from_model(cls, user: User) -> "UserSummary":
        return cls(
            id=user.id,
            tg_id=user.tg_id,
            tg_first_name=user.tg_first_name,
            tg_last_name=user.tg_last_name,
            first_name=user.first_name,
            phone_number=user.phone_number,
        )


@dataclass(frozen=True)
class CodeRecord:
    """A code row with its linked gift and redeeming user."""

    id: int
    value: str
    used_at: Optional[datetime] = None
    gift_id: Optional[int] = None
    used_by_id: Optional[int] = None
    month: Optional[str] = None
    gift_given_by: Optional[str] = None
    gift_given_at: Optional[datetime] = None
    gift: Optional[GiftSummary] = None
    used_by: Optional[UserSummary] = None

    @property
    def is_used(self) -> bool:
        return self.used_at is not None

    @classmethod
    def from_model(cls, code: Code) -> "CodeRecord":
        gift = code.gift if code.gift is not None and code.gift.deleted_at is None else None
        return cls(
            id=code.id,
            value=code.value,
            used_at=code.used_at,
            gift_id=code.gift_id,
            used_by_id=code.used_by_id,
            month=code.month,
            gift_given_by=code.gift_given_by,
            gift_given_at=code.gift_given_at,
            gift=GiftSummary.from_model(gift) if gift is not None else None,
            used_by=UserSummary.from_model(code.used_by) if code.used_by is not None else None,
        )


@dataclass(frozen=True)
class CodePage:
    """One page of codes plus the total number of matching rows."""

    data: list[CodeRecord]
    total: int
