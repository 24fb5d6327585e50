"""
Pydantic schemas for Movie and Credit API responses.

Field names are serialized in camelCase to keep the JSON layout of the
original service (``originalTitle``, ``releaseDate``, ...).
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from app.core.models import Credit, Movie, MovieWithCredits


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: str
    title: str | None = None
    original_title: str | None = None
    overview: str | None = None
    release_date: str | None = None
    tagline: str | None = None
    vote_average: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            title=movie.title,
            original_title=movie.original_title,
            overview=movie.overview,
            release_date=movie.release_date,
            tagline=movie.tagline,
            vote_average=movie.vote_average,
        )


class CreditResponse(BaseModel):
    """Response model for one credit record."""

    id: str
    crew: list[str]
    cast: list[str]

    @classmethod
    def from_credit(cls, credit: Credit) -> "CreditResponse":
        return cls(id=credit.id, crew=list(credit.crew), cast=list(credit.cast))


class MovieWithCreditsResponse(BaseModel):
    """A movie together with all of its credit records."""

    movie: MovieResponse
    credits: list[CreditResponse]

    @classmethod
    def from_pair(cls, pair: MovieWithCredits) -> "MovieWithCreditsResponse":
        return cls(
            movie=MovieResponse.from_movie(pair.movie),
            credits=[CreditResponse.from_credit(c) for c in pair.credits],
        )
