"""Gift catalog listing."""

from __future__ import annotations

from typing import Optional

from ..repositories import GiftRepository, GiftSummary


class GiftService:
    def __init__(self, gifts: GiftRepository) -> None:
        self.gifts = gifts

    def get_paging(
        self,
        *,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[GiftSummary], int]:
        """Digits search by id, anything else by substring of the gift name."""

        if search and search.strip().isdecimal():
            return self.gifts.find_and_count(gift_id=int(search.strip()), page=page, limit=limit)
        return self.gifts.find_and_count(name_contains=search or None, page=page, limit=limit)
