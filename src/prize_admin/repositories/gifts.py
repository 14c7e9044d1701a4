"""Gift catalog access."""

from __future__ import annotations

from typing import Optional, Protocol

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models import Gift
from .records import GiftSummary


class GiftRepository(Protocol):
    def find_and_count(
        self,
        *,
        gift_id: Optional[int] = None,
        name_contains: Optional[str] = None,
        page: int,
        limit: int,
    ) -> tuple[list[GiftSummary], int]:
        ...


class SqlGiftRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def find_and_count(
        self,
        *,
        gift_id: Optional[int] = None,
        name_contains: Optional[str] = None,
        page: int,
        limit: int,
    ) -> tuple[list[GiftSummary], int]:
        conditions = [Gift.deleted_at.is_(None)]
        if gift_id is not None:
            conditions.append(Gift.id == gift_id)
        if name_contains:
            conditions.append(Gift.name.contains(name_contains, autoescape=True))

        total = self.session.execute(select(func.count(Gift.id)).where(*conditions)).scalar_one()

        stmt = (
            select(Gift)
            .where(*conditions)
            .order_by(Gift.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [GiftSummary.from_model(row) for row in rows], total
