"""Pydantic schemas for the gift catalog."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GiftRead(BaseModel):
    """Gift as listed in the catalog and attached to codes."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: str
    image: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    total_count: int = Field(..., ge=0)
    used_count: int = Field(..., ge=0)


class GiftPage(BaseModel):
    data: List[GiftRead]
    total: int
