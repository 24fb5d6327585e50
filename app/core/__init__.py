"""
In-memory movie catalog core.

This package contains:
- Data models and crew role classification
- Movie -> credits index
- Title search, release date ordering and age filtering
- Crew role aggregation
- The catalog service that owns the loaded datasets
"""

from app.core.exceptions import DatasetError, MalformedCreditEntry
from app.core.models import Credit, CrewRole, Movie, MovieWithCredits, StatsResult
from app.core.index import CreditIndex, build_index
from app.core.service import CatalogService, Lazy

__all__ = [
    'DatasetError',
    'MalformedCreditEntry',
    'Credit',
    'CrewRole',
    'Movie',
    'MovieWithCredits',
    'StatsResult',
    'CreditIndex',
    'build_index',
    'CatalogService',
    'Lazy',
]
