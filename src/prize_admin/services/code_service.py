"""Code listing, lookup and gift hand-over."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..repositories import (
    ByField,
    ById,
    ByNullable,
    BySubstring,
    CodeFilter,
    CodeRecord,
    CodeRepository,
    GiftSummary,
    Sort,
    WinnerRepository,
)
from ..utils.codes import build_winner_variants, code_variants
from .classification_service import MOST_RECENT_USE, is_winner

logger = logging.getLogger(__name__)

USER_ORDER_FIELDS = ("id", "value", "used_at", "created_at")


class CodeRuleViolation(Exception):
    """Raised when a code operation cannot be fulfilled."""

    def __init__(self, detail: str, status_code: int = 400) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class CodeNotFound(CodeRuleViolation):
    def __init__(self, detail: str = "Code not found") -> None:
        super().__init__(detail, status_code=404)


@dataclass(frozen=True)
class CodeListing:
    data: list[CodeRecord]
    total: int
    total_used_count: int


@dataclass(frozen=True)
class CodeCheck:
    value: str
    gift: Optional[GiftSummary]
    is_winner: bool


@dataclass(frozen=True)
class CodeMonth:
    value: str
    month: Optional[str]
    is_winner: bool


def search_filter(search: Optional[str]) -> Optional[CodeFilter]:
    """Digits search by id, anything else by substring of the code value."""

    if not search:
        return None
    if search.strip().isdecimal():
        return ById(int(search.strip()))
    return BySubstring("value", search)


class CodeService:
    def __init__(self, codes: CodeRepository, winners: WinnerRepository) -> None:
        self.code_repository = codes
        self.winner_repository = winners

    def _is_winner(self, value: str) -> bool:
        return is_winner(value, build_winner_variants(self.winner_repository.list_values()))

    def get_paging(
        self,
        *,
        search: Optional[str] = None,
        is_used: Optional[bool] = None,
        gift_id: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> CodeListing:
        """Admin code list with redemption, search and gift filters."""

        filters: list[CodeFilter] = []
        if is_used is not None:
            filters.append(ByNullable("used_at", is_null=not is_used))

        by_search = search_filter(search)
        if by_search is not None:
            filters.append(by_search)

        if gift_id:
            if gift_id == "withGift":
                filters.append(ByNullable("gift_id", is_null=False))
            elif gift_id.isdecimal():
                filters.append(ByField("gift_id", int(gift_id)))
            else:
                raise CodeRuleViolation(f"Invalid gift filter: {gift_id}")

        data, total = self.code_repository.find_and_count(filters, order=MOST_RECENT_USE, page=page, limit=limit)
        total_used_count = self.code_repository.count([ByNullable("used_at", is_null=False)])
        return CodeListing(data=data, total=total, total_used_count=total_used_count)

    def get_used_by_user_paging(
        self,
        user_id: int,
        *,
        search: Optional[str] = None,
        order_by: Optional[str] = None,
        order_type: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[CodeRecord], int]:
        """Codes redeemed by one user."""

        filters: list[CodeFilter] = [ByField("used_by_id", user_id)]
        by_search = search_filter(search)
        if by_search is not None:
            filters.append(by_search)

        field = order_by if order_by in USER_ORDER_FIELDS else "id"
        descending = (order_type or "").upper() != "ASC"
        return self.code_repository.find_and_count(filters, order=(Sort(field, descending=descending),), page=page, limit=limit)

    def get_codes_by_month(
        self,
        month: str,
        *,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[CodeRecord], int]:
        filters: list[CodeFilter] = [ByField("month", month)]
        by_search = search_filter(search)
        if by_search is not None:
            filters.append(by_search)
        return self.code_repository.find_and_count(filters, order=MOST_RECENT_USE, page=page, limit=limit)

    def check_code(self, value: str) -> CodeCheck:
        """Look up a code by its exact value and report its gift."""

        code = self.code_repository.find_one_by_values([value])
        if code is None:
            logger.info("code check missed: %s", value)
            raise CodeNotFound()
        return CodeCheck(value=code.value, gift=code.gift, is_winner=self._is_winner(code.value))

    def get_code_month(self, value: str) -> CodeMonth:
        """Find the campaign month of a code typed in any of its spellings."""

        code = self.code_repository.find_one_by_values(code_variants(value))
        if code is None:
            logger.info("code month lookup missed: %s", value)
            raise CodeNotFound()
        return CodeMonth(value=code.value, month=code.month or None, is_winner=self._is_winner(code.value))

    def give_gift(self, code_id: int, given_by: str) -> CodeRecord:
        now_naive = datetime.now(timezone.utc).replace(tzinfo=None)
        code = self.code_repository.mark_gift_given(code_id, given_by=given_by, given_at=now_naive)
        if code is None:
            raise CodeNotFound(f"Code {code_id} not found")
        logger.info("gift handed over for code %s by %s", code_id, given_by)
        return code
