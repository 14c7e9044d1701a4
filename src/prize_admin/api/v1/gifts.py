"""Gift catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...schemas import GiftPage, GiftRead
from ...services.gift_service import GiftService
from ..deps import PageParams, get_gift_service, page_params

router = APIRouter(prefix="/gifts", tags=["gifts"])


@router.get("", response_model=GiftPage, summary="List gifts")
def list_gifts(
    params: PageParams = Depends(page_params),
    service: GiftService = Depends(get_gift_service),
) -> GiftPage:
    """Return gifts newest first; a numeric search matches the gift id."""

    gifts, total = service.get_paging(search=params.search, page=params.page, limit=params.limit)
    return GiftPage(data=[GiftRead.model_validate(gift) for gift in gifts], total=total)
