"""
Card slug API endpoints.

Decomposes card slugs from card detail URLs into card number and player
slug, and builds the lookup parameters the card data-access layer uses.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from cardslug.api.deps import get_dictionaries
from cardslug.config import MAX_BATCH_SLUGS
from cardslug.models.slug import ClassificationDictionaries, SlugDecomposition
from cardslug.parsers.card_slug import SlugDecomposer
from cardslug.services.card_lookup import InvalidLookupError, build_card_lookup

router = APIRouter(prefix="/slugs", tags=["slugs"])


class DecompositionResponse(BaseModel):
    """A card slug split into card number and player slug."""

    slug: str
    card_number: str
    player_slug: str
    split_index: int | None = None
    strategy: str

    @classmethod
    def from_decomposition(
        cls, slug: str, result: SlugDecomposition
    ) -> "DecompositionResponse":
        return cls(
            slug=slug,
            card_number=result.card_number,
            player_slug=result.player_slug,
            split_index=result.split_index,
            strategy=result.strategy,
        )


class BatchDecomposeRequest(BaseModel):
    """Request body for batch decomposition."""

    slugs: list[str] = Field(min_length=1, max_length=MAX_BATCH_SLUGS)


class BatchDecomposeResponse(BaseModel):
    """Decompositions in request order."""

    results: list[DecompositionResponse]


class CardLookupResponse(BaseModel):
    """Filter values for the card data-access layer."""

    year: int
    set_slug: str
    series_slug: str
    series_name_pattern: str
    card_slug: str
    card_number: str
    player_slug: str
    search_params: dict[str, str | int]


@router.get(
    "/lookup/{year}/{set_slug}/{series_slug}/{card_slug}",
    response_model=CardLookupResponse,
    responses={400: {"description": "Invalid year"}},
)
async def card_lookup(
    year: str,
    set_slug: str,
    series_slug: str,
    card_slug: str,
    dictionaries: Annotated[ClassificationDictionaries, Depends(get_dictionaries)],
) -> CardLookupResponse:
    """
    Build card lookup parameters from a card detail URL.

    Returns 400 if the year segment is not a non-negative integer.
    """
    try:
        lookup = build_card_lookup(
            year, set_slug, series_slug, card_slug.lower(), dictionaries
        )
    except InvalidLookupError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return CardLookupResponse(
        year=lookup.year,
        set_slug=lookup.set_slug,
        series_slug=lookup.series_slug,
        series_name_pattern=lookup.series_name_pattern,
        card_slug=lookup.card_slug,
        card_number=lookup.card_number,
        player_slug=lookup.player_slug,
        search_params=lookup.search_params(),
    )


@router.post("/decompose", response_model=BatchDecomposeResponse)
async def decompose_batch(
    request: BatchDecomposeRequest,
    dictionaries: Annotated[ClassificationDictionaries, Depends(get_dictionaries)],
) -> BatchDecomposeResponse:
    """Decompose up to MAX_BATCH_SLUGS slugs in one call."""
    decomposer = SlugDecomposer(dictionaries)
    results = []
    for slug in request.slugs:
        normalized = slug.lower()
        results.append(
            DecompositionResponse.from_decomposition(
                normalized, decomposer.decompose(normalized)
            )
        )
    return BatchDecomposeResponse(results=results)


@router.get("/{card_slug}", response_model=DecompositionResponse)
async def decompose_slug(
    card_slug: str,
    dictionaries: Annotated[ClassificationDictionaries, Depends(get_dictionaries)],
) -> DecompositionResponse:
    """
    Decompose a single card slug.

    The path segment is lowercased first; no other normalization is applied.
    """
    normalized = card_slug.lower()
    result = SlugDecomposer(dictionaries).decompose(normalized)
    return DecompositionResponse.from_decomposition(normalized, result)
