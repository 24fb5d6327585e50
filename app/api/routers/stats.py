"""
Crew role statistics endpoint.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_catalog_service
from app.api.models.stats import StatsResponse
from app.api.routers.movies import title_query
from app.core.service import CatalogService

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
def crew_stats(
    title: str | None = Depends(title_query),
    service: CatalogService = Depends(get_catalog_service),
):
    """Crew role counts summed over the movies matching the title filter."""
    return StatsResponse.from_result(service.aggregate_stats(title))
