"""
Credit API endpoints.
"""

import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_catalog_service
from app.api.models.movie import MovieWithCreditsResponse
from app.api.routers.movies import title_query
from app.core.service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["credits"])


@router.get("/credits", response_model=list[MovieWithCreditsResponse])
def search_credits(
    title: str | None = Depends(title_query),
    service: CatalogService = Depends(get_catalog_service),
):
    """Movies matching the title filter, each with its credit records."""
    pairs = service.search_credits(title)
    logger.debug(f"/credits q={title!r} -> {len(pairs)} movies")
    return [MovieWithCreditsResponse.from_pair(p) for p in pairs]
