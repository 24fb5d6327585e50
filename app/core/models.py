"""
In-memory data models for movies and their cast/crew credits.

Movies and credits are loaded once and never mutated afterwards, so all
records are frozen dataclasses holding tuples.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from app.core.exceptions import MalformedCreditEntry
from app.core.roles import CrewRole, extract_role

__all__ = ["CrewRole", "Movie", "Credit", "MovieWithCredits", "StatsResult"]


@dataclass(frozen=True)
class Movie:
    """A single catalog entry."""

    id: str
    title: Optional[str] = None
    original_title: Optional[str] = None
    overview: Optional[str] = None
    release_date: Optional[str] = None
    tagline: Optional[str] = None
    vote_average: Optional[str] = None
    lower_title: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "lower_title", self.title.lower() if self.title else "")


@dataclass(frozen=True)
class Credit:
    """
    Cast and crew of one movie.

    ``roles`` holds the role text of every crew entry, in the same order as
    ``crew``. It is derived on construction; a crew entry without a role
    raises MalformedCreditEntry instead of being dropped.
    """

    id: str
    cast: Tuple[str, ...] = ()
    crew: Tuple[str, ...] = ()
    roles: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "cast", tuple(self.cast))
        object.__setattr__(self, "crew", tuple(self.crew))
        try:
            roles = tuple(extract_role(entry) for entry in self.crew)
        except MalformedCreditEntry as e:
            raise MalformedCreditEntry(e.entry, credit_id=self.id) from None
        object.__setattr__(self, "roles", roles)

    @classmethod
    def from_parts(cls, credit_id: str, crew: Iterable[str], cast: Iterable[str]) -> "Credit":
        return cls(id=credit_id, cast=tuple(cast), crew=tuple(crew))


@dataclass(frozen=True)
class MovieWithCredits:
    """A movie paired with its credit records."""

    movie: Movie
    credits: Tuple[Credit, ...]


@dataclass(frozen=True)
class StatsResult:
    """Aggregate crew role counts over the movies matched by a query."""

    matched_movies: int
    counts: Dict[CrewRole, int]

    @property
    def total_crew(self) -> int:
        return sum(self.counts.values())
