"""
Card endpoints.

Provides:
- GET /verses/next - Next verse of the shuffled rotation, formatted
- POST /format - Format arbitrary text
- GET /cache/stats - Formatting cache statistics
- DELETE /cache - Clear the formatting cache
"""

from fastapi import APIRouter, Depends, HTTPException

from versecard.logging_config import get_logger

from ..dependencies import get_container
from ..factories import ServiceContainer
from ..models import (
    CacheClearResponse,
    CacheStatsResponse,
    CardResponse,
    FormatRequest,
    FormatResponse,
)
from ..orchestrators import CardOrchestrator, EmptyVerseStoreError

router = APIRouter(tags=["Cards"])
logger = get_logger("api.cards")


@router.get("/verses/next", response_model=CardResponse)
def next_verse(services: ServiceContainer = Depends(get_container)) -> CardResponse:
    """Draw the next verse; every verse is shown once before any repeats."""
    try:
        return CardOrchestrator(services).next_card()
    except EmptyVerseStoreError as e:
        logger.warning(f"Card requested with an empty verse store: {e}")
        raise HTTPException(status_code=503, detail="No verses are available")


@router.post("/format", response_model=FormatResponse)
def format_text(
    request: FormatRequest,
    services: ServiceContainer = Depends(get_container),
) -> FormatResponse:
    """Format text into meaning-aware card lines."""
    return CardOrchestrator(services).format_text(request.text, request.max_length)


@router.get("/cache/stats", response_model=CacheStatsResponse)
def cache_stats(services: ServiceContainer = Depends(get_container)) -> CacheStatsResponse:
    return CacheStatsResponse(**services.cache.get_stats())


@router.delete("/cache", response_model=CacheClearResponse)
def clear_cache(services: ServiceContainer = Depends(get_container)) -> CacheClearResponse:
    return CacheClearResponse(cleared=services.cache.clear())
