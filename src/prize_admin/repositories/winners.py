"""Winners ledger access."""

from __future__ import annotations

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Winner


class WinnerRepository(Protocol):
    def list_values(self) -> list[str]:
        ...


class SqlWinnerRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_values(self) -> list[str]:
        """Return every non-deleted winner value as stored."""

        stmt = select(Winner.value).where(Winner.deleted_at.is_(None)).order_by(Winner.id)
        return list(self.session.execute(stmt).scalars().all())
