"""
Health check endpoint.

Liveness probe reporting the loaded classification tables.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cardslug.api.deps import get_dictionaries
from cardslug.models.slug import ClassificationDictionaries

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    dictionaries: dict[str, int]


@router.get("/health", response_model=HealthResponse)
async def health(
    dictionaries: Annotated[ClassificationDictionaries, Depends(get_dictionaries)],
) -> HealthResponse:
    """
    Liveness probe.

    Returns healthy with the size of each classification table.
    """
    return HealthResponse(status="healthy", dictionaries=dictionaries.sizes())
