"""Repositories translating domain queries into SQL."""

from .codes import CodeRepository, SqlCodeRepository
from .filters import ByField, ById, ByMembership, ByNullable, BySubstring, CodeFilter, Sort
from .gifts import GiftRepository, SqlGiftRepository
from .records import CodePage, CodeRecord, GiftSummary, UserSummary
from .winners import SqlWinnerRepository, WinnerRepository

__all__ = [
    "ByField",
    "ById",
    "ByMembership",
    "ByNullable",
    "BySubstring",
    "CodeFilter",
    "CodePage",
    "CodeRecord",
    "CodeRepository",
    "GiftRepository",
    "GiftSummary",
    "Sort",
    "SqlCodeRepository",
    "SqlGiftRepository",
    "SqlWinnerRepository",
    "UserSummary",
    "WinnerRepository",
]
