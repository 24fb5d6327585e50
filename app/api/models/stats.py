"""
Pydantic schemas for crew role statistics.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from app.core.models import StatsResult


class StatsResponse(BaseModel):
    """Response model for aggregated crew role counts."""

    matched_movies: int
    roles: dict[str, int]
    total_crew: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_result(cls, result: StatsResult) -> "StatsResponse":
        return cls(
            matched_movies=result.matched_movies,
            roles={role.value: count for role, count in result.counts.items()},
            total_crew=result.total_crew,
        )
