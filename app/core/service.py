"""
Catalog service: owns the loaded movies, credits and credit index.

The collections are loaded lazily on first access, exactly once, and shared
by every request afterwards. This class is the single entry point the HTTP
layer uses for the four query operations.

Usage:
    service = CatalogService(movie_loader, credit_loader)
    service.warm_up()
    stats = service.aggregate_stats("matrix")
"""

import logging
import threading
import time
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from app.core.aggregation import aggregate
from app.core.index import CreditIndex, build_index
from app.core.models import Credit, Movie, MovieWithCredits, StatsResult
from app.core.query import old_movies, search_titles, sort_by_release_date_desc

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Lazy(Generic[T]):
    """
    Thread-safe compute-once value.

    The first ``get()`` runs the factory while holding a lock; concurrent
    callers wait and then see the same result. If the factory raises, nothing
    is cached and the next ``get()`` tries again. Reads after the value is set
    take no lock.
    """

    _UNSET = object()

    def __init__(self, factory: Callable[[], T], name: str = "value"):
        self._factory = factory
        self._name = name
        self._value = self._UNSET
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._value is not self._UNSET

    def get(self) -> T:
        value = self._value
        if value is not self._UNSET:
            return value
        with self._lock:
            if self._value is self._UNSET:
                start = time.time()
                self._value = self._factory()
                logger.info(f"Loaded {self._name} in {time.time() - start:.2f}s")
            return self._value


class CatalogService:
    """
    Query operations over the in-memory movie and credit datasets.

    Args:
        movie_loader: Returns the full ordered movie list
        credit_loader: Returns the full credit list
    """

    def __init__(
        self,
        movie_loader: Callable[[], Sequence[Movie]],
        credit_loader: Callable[[], Sequence[Credit]],
    ):
        self._movies = Lazy(lambda: tuple(movie_loader()), name="movies")
        self._credits = Lazy(lambda: tuple(credit_loader()), name="credits")
        self._index = Lazy(lambda: build_index(self.credits), name="credit index")

    @property
    def movies(self) -> Sequence[Movie]:
        return self._movies.get()

    @property
    def credits(self) -> Sequence[Credit]:
        return self._credits.get()

    @property
    def index(self) -> CreditIndex:
        return self._index.get()

    @property
    def is_loaded(self) -> bool:
        return self._movies.is_loaded and self._index.is_loaded

    def warm_up(self) -> None:
        """Load movies, credits and build the index now instead of on first request."""
        logger.info("Warming up catalog...")
        self.movies
        self.index
        logger.info(f"Catalog ready: {len(self.movies)} movies, {len(self.credits)} credits")

    def credits_for(self, movie_id: str):
        return self.index.credits_for(movie_id)

    def search_movies(self, query: Optional[str] = None) -> List[Movie]:
        """Movies newest first, optionally filtered by title."""
        movies = sort_by_release_date_desc(self.movies)
        return list(search_titles(movies, query))

    def search_credits(self, query: Optional[str] = None) -> List[MovieWithCredits]:
        """Movies matching the title query, each paired with its credits."""
        index = self.index
        return [
            MovieWithCredits(movie=movie, credits=index.credits_for(movie.id))
            for movie in search_titles(self.movies, query)
        ]

    def aggregate_stats(self, query: Optional[str] = None) -> StatsResult:
        """Crew role counts across the movies matching the title query."""
        return aggregate(search_titles(self.movies, query), self.index)

    def old_movies(self, year: str, limit: int) -> List[Movie]:
        """Up to ``limit`` movies released before ``year``, in catalog order."""
        return old_movies(self.movies, year, limit)
