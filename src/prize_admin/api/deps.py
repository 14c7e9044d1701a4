"""Dependency injection for FastAPI routes."""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from ..core.config import get_settings
from ..core.database import get_db
from ..repositories import SqlCodeRepository, SqlGiftRepository, SqlWinnerRepository
from ..services.classification_service import CodeClassifier
from ..services.code_service import CodeService
from ..services.gift_service import GiftService


@dataclass(frozen=True)
class PageParams:
    search: Optional[str]
    page: int
    limit: int


def page_params(
    search: Optional[str] = Query(None, description="Substring of the value, or a numeric id"),
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: Optional[int] = Query(None, ge=1, description="Items per page"),
) -> PageParams:
    """Resolve paging query parameters against configured defaults."""

    settings = get_settings()
    size = min(limit or settings.default_page_size, settings.max_page_size)
    return PageParams(search=search or None, page=page, limit=size)


def get_classifier(db: Session = Depends(get_db)) -> CodeClassifier:
    return CodeClassifier(SqlCodeRepository(db), SqlWinnerRepository(db))


def get_code_service(db: Session = Depends(get_db)) -> CodeService:
    return CodeService(SqlCodeRepository(db), SqlWinnerRepository(db))


def get_gift_service(db: Session = Depends(get_db)) -> GiftService:
    return GiftService(SqlGiftRepository(db))
