"""Primary API router definition."""

from fastapi import APIRouter

from . import codes, gifts

api_router = APIRouter()

api_router.include_router(codes.router)
api_router.include_router(gifts.router)


@api_router.get("/health", tags=["health"])
async def healthcheck() -> dict[str, str]:
    """Basic health probe endpoint."""
    return {"status": "ok"}
