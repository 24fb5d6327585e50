"""
Pydantic schemas for API responses.
"""

from app.api.models.movie import MovieResponse, CreditResponse, MovieWithCreditsResponse
from app.api.models.stats import StatsResponse

__all__ = [
    "MovieResponse",
    "CreditResponse",
    "MovieWithCreditsResponse",
    "StatsResponse",
]
