"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_catalog_service
from app.core.service import CatalogService

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(service: CatalogService = Depends(get_catalog_service)):
    """Health check: whether the datasets are loaded, and their sizes if so."""
    if not service.is_loaded:
        return {"status": "starting", "catalog_loaded": False}
    return {
        "status": "healthy",
        "catalog_loaded": True,
        "movies": len(service.movies),
        "credits": len(service.credits),
        "indexed_movies": len(service.index),
    }
