"""
Movie API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_catalog_service
from app.api.models.movie import MovieResponse
from app.core.service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["movies"])


def title_query(
    q: str | None = Query(None, description="Case-insensitive substring or regular expression"),
    query: str | None = Query(None, description="Alias of q"),
) -> str | None:
    """Title filter from ``q``, falling back to ``query``."""
    return q if q is not None else query


@router.get("/movies", response_model=list[MovieResponse])
def search_movies(
    title: str | None = Depends(title_query),
    service: CatalogService = Depends(get_catalog_service),
):
    """Movies newest first, optionally filtered by title."""
    movies = service.search_movies(title)
    logger.debug(f"/movies q={title!r} -> {len(movies)} movies")
    return [MovieResponse.from_movie(m) for m in movies]


@router.get("/old-movies", response_model=list[MovieResponse])
def list_old_movies(
    year: str = Query(..., min_length=1, description="Release date prefix to compare against, e.g. 2010"),
    limit: int = Query(10, ge=0),
    service: CatalogService = Depends(get_catalog_service),
):
    """Up to ``limit`` movies released before ``year``, in catalog order."""
    movies = service.old_movies(year, limit)
    logger.debug(f"/old-movies year={year} limit={limit} -> {len(movies)} movies")
    return [MovieResponse.from_movie(m) for m in movies]
