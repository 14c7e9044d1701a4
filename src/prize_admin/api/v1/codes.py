"""Code listing, classification and lookup endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...schemas import (
    CodeCheckRead,
    CodeListPage,
    CodeMonthRead,
    CodePage,
    CodeRead,
    GiftGiveRead,
    GiftGiveRequest,
    LoserRead,
    LosersPage,
    NonWinnerCodeRead,
    NonWinnerCodesPage,
    WinnerCodeRead,
    WinnerCodesPage,
    WinnerRead,
    WinnersPage,
)
from ...services.classification_service import CodeClassifier
from ...services.code_service import CodeRuleViolation, CodeService
from ..deps import PageParams, get_classifier, get_code_service, page_params

router = APIRouter(prefix="/codes", tags=["codes"])


@router.get("", response_model=CodeListPage, summary="List codes")
def list_codes(
    *,
    is_used: Optional[bool] = Query(None, description="Only redeemed (true) or unredeemed (false) codes"),
    gift_id: Optional[str] = Query(None, description="Gift id, or 'withGift' for any linked gift"),
    params: PageParams = Depends(page_params),
    service: CodeService = Depends(get_code_service),
) -> CodeListPage:
    """Admin code list, most recently redeemed first."""

    try:
        listing = service.get_paging(
            search=params.search,
            is_used=is_used,
            gift_id=gift_id,
            page=params.page,
            limit=params.limit,
        )
    except CodeRuleViolation as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc

    return CodeListPage(
        data=[CodeRead.model_validate(code) for code in listing.data],
        total=listing.total,
        total_used_count=listing.total_used_count,
    )


@router.get("/winners", response_model=WinnersPage, summary="Redeemed winning codes")
def list_winners(
    params: PageParams = Depends(page_params),
    classifier: CodeClassifier = Depends(get_classifier),
) -> WinnersPage:
    result = classifier.winners(search=params.search, page=params.page, limit=params.limit)
    return WinnersPage(data=[WinnerRead.model_validate(code) for code in result.data], total=result.total)


@router.get("/losers", response_model=LosersPage, summary="Redeemed codes that did not win")
def list_losers(
    params: PageParams = Depends(page_params),
    classifier: CodeClassifier = Depends(get_classifier),
) -> LosersPage:
    result = classifier.losers(search=params.search, page=params.page, limit=params.limit)
    return LosersPage(data=[LoserRead.model_validate(code) for code in result.data], total=result.total)


@router.get("/winner-codes", response_model=WinnerCodesPage, summary="Winning codes")
def list_winner_codes(
    params: PageParams = Depends(page_params),
    classifier: CodeClassifier = Depends(get_classifier),
) -> WinnerCodesPage:
    """Codes present in the winners ledger, redeemed or not."""

    result = classifier.winner_codes(search=params.search, page=params.page, limit=params.limit)
    return WinnerCodesPage(data=[WinnerCodeRead.model_validate(code) for code in result.data], total=result.total)


@router.get("/non-winner-codes", response_model=NonWinnerCodesPage, summary="Codes without a prize")
def list_non_winner_codes(
    params: PageParams = Depends(page_params),
    classifier: CodeClassifier = Depends(get_classifier),
) -> NonWinnerCodesPage:
    """Codes absent from the winners ledger, redeemed or not."""

    result = classifier.non_winner_codes(search=params.search, page=params.page, limit=params.limit)
    return NonWinnerCodesPage(
        data=[NonWinnerCodeRead.model_validate(code) for code in result.data],
        total=result.total,
    )


@router.get(
    "/check/{value}",
    response_model=CodeCheckRead,
    summary="Check a code",
    responses={404: {"description": "Code not found"}},
)
def check_code(value: str, service: CodeService = Depends(get_code_service)) -> CodeCheckRead:
    """Return the gift linked to an exact code value."""

    try:
        return CodeCheckRead.model_validate(service.check_code(value))
    except CodeRuleViolation as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.get(
    "/month/{value}",
    response_model=CodeMonthRead,
    summary="Campaign month of a code",
    responses={404: {"description": "Code not found"}},
)
def get_code_month(value: str, service: CodeService = Depends(get_code_service)) -> CodeMonthRead:
    """Resolve a code typed with or without hyphen, in any case."""

    try:
        return CodeMonthRead.model_validate(service.get_code_month(value))
    except CodeRuleViolation as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.get("/by-month/{month}", response_model=CodePage, summary="Codes of a campaign month")
def list_codes_by_month(
    month: str,
    params: PageParams = Depends(page_params),
    service: CodeService = Depends(get_code_service),
) -> CodePage:
    codes, total = service.get_codes_by_month(month, search=params.search, page=params.page, limit=params.limit)
    return CodePage(data=[CodeRead.model_validate(code) for code in codes], total=total)


@router.get("/used-by/{user_id}", response_model=CodePage, summary="Codes redeemed by a user")
def list_codes_used_by(
    user_id: int,
    *,
    order_by: Optional[str] = Query(None, description="id, value, used_at or created_at"),
    order_type: Optional[str] = Query(None, description="ASC or DESC"),
    params: PageParams = Depends(page_params),
    service: CodeService = Depends(get_code_service),
) -> CodePage:
    codes, total = service.get_used_by_user_paging(
        user_id,
        search=params.search,
        order_by=order_by,
        order_type=order_type,
        page=params.page,
        limit=params.limit,
    )
    return CodePage(data=[CodeRead.model_validate(code) for code in codes], total=total)


@router.post(
    "/{code_id}/gift",
    response_model=GiftGiveRead,
    summary="Hand a code's gift over",
    responses={404: {"description": "Code not found"}},
)
def give_gift(
    code_id: int,
    payload: GiftGiveRequest,
    db: Session = Depends(get_db),
    service: CodeService = Depends(get_code_service),
) -> GiftGiveRead:
    """Record who handed the gift over and when.

    Example request body::

        {
            "given_by": "admin-7"
        }
    """

    try:
        code = service.give_gift(code_id, payload.given_by)
        db.commit()
        return GiftGiveRead.model_validate(code)
    except CodeRuleViolation as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
