"""Pydantic schemas for code listings and lookups."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .gift import GiftRead


class UserSummary(BaseModel):
    """Lightweight projection of the user who redeemed a code."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    tg_id: Optional[int] = None
    tg_first_name: Optional[str] = None
    tg_last_name: Optional[str] = None
    first_name: Optional[str] = None
    phone_number: Optional[str] = None


class CodeRead(BaseModel):
    """Code row in admin listings."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    value: str
    is_used: bool
    used_at: Optional[datetime] = None
    gift_id: Optional[int] = None
    used_by_id: Optional[int] = None
    gift: Optional[GiftRead] = None
    used_by: Optional[UserSummary] = None


class CodeListPage(BaseModel):
    data: List[CodeRead]
    total: int
    total_used_count: int


class CodePage(BaseModel):
    data: List[CodeRead]
    total: int


class WinnerRead(BaseModel):
    """Redeemed code found in the winners ledger."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    value: str
    is_used: bool
    used_at: Optional[datetime] = None
    used_by_id: Optional[int] = None
    gift_id: Optional[int] = None
    used_by: Optional[UserSummary] = None
    gift: Optional[GiftRead] = None


class LoserRead(BaseModel):
    """Redeemed code missing from the winners ledger."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    value: str
    is_used: bool
    used_at: Optional[datetime] = None
    used_by_id: Optional[int] = None
    used_by: Optional[UserSummary] = None


class WinnerCodeRead(WinnerRead):
    """Winning code, redeemed or not."""


class NonWinnerCodeRead(BaseModel):
    """Code missing from the winners ledger, redeemed or not."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    value: str
    is_used: bool
    used_at: Optional[datetime] = None
    used_by_id: Optional[int] = None
    gift_id: Optional[int] = None
    used_by: Optional[UserSummary] = None


class WinnersPage(BaseModel):
    data: List[WinnerRead]
    total: int


class LosersPage(BaseModel):
    data: List[LoserRead]
    total: int


class WinnerCodesPage(BaseModel):
    data: List[WinnerCodeRead]
    total: int


class NonWinnerCodesPage(BaseModel):
    data: List[NonWinnerCodeRead]
    total: int


class CodeCheckRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    value: str
    gift: Optional[GiftRead] = None
    is_winner: bool


class CodeMonthRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    value: str
    month: Optional[str] = None
    is_winner: bool


class GiftGiveRequest(BaseModel):
    """Incoming payload for handing a code's gift over."""

    given_by: str = Field(..., min_length=1, description="Administrator handing the gift over.")


class GiftGiveRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    value: str
    gift_id: Optional[int] = None
    gift_given_by: Optional[str] = None
    gift_given_at: Optional[datetime] = None
