"""
FastAPI dependency injection for the catalog service.
"""

import logging
import threading

from app.core.service import CatalogService
from app.data.credit_loader import load_credits
from app.data.movie_loader import load_movies
from app.database.connection import get_mongo_manager
from app.api.config import (
    get_credits_collection,
    get_mongo_batch_size,
    get_mongo_database,
    get_mongo_uri,
    get_movies_path,
)

logger = logging.getLogger(__name__)


def create_catalog_service() -> CatalogService:
    """Build a CatalogService wired to the configured dataset file and MongoDB."""
    movies_path = get_movies_path()
    manager = get_mongo_manager(uri=get_mongo_uri(), database=get_mongo_database())
    collection = get_credits_collection()
    batch_size = get_mongo_batch_size()

    logger.info(f"Catalog service: movies={movies_path} credits={manager.database_name}.{collection}")
    return CatalogService(
        movie_loader=lambda: load_movies(movies_path),
        credit_loader=lambda: load_credits(manager, collection_name=collection, batch_size=batch_size),
    )


# Singleton catalog service
_catalog_service: CatalogService | None = None
_catalog_lock = threading.Lock()


def get_catalog_service() -> CatalogService:
    """Get or create singleton CatalogService. Datasets load on first use."""
    global _catalog_service
    if _catalog_service is None:
        with _catalog_lock:
            if _catalog_service is None:
                _catalog_service = create_catalog_service()
    return _catalog_service
