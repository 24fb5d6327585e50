"""
Title search, release date ordering and age filtering over the movie catalog.

Every function here is pure: it reads the shared, immutable movie list and
returns a new sequence without touching the input.
"""

import calendar
import re
from typing import Iterable, Iterator, List, Optional, Tuple

from app.core.models import Movie

_REGEX_METACHARACTERS = frozenset(".^$*+?{}[]\\|()")
_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


class TitleMatcher:
    """
    Case-insensitive title matcher compiled once per request.

    Queries without regex metacharacters are plain substrings and are checked
    against the movie's cached lowercase title. Anything else is compiled as
    a regular expression; a pattern that does not compile is matched
    literally.
    """

    def __init__(self, query: str):
        self.query = query
        self._needle: Optional[str] = None
        self._pattern: Optional[re.Pattern] = None

        if not _REGEX_METACHARACTERS.intersection(query):
            self._needle = query.lower()
        else:
            try:
                self._pattern = re.compile(query, re.IGNORECASE)
            except re.error:
                self._pattern = re.compile(re.escape(query), re.IGNORECASE)

    def matches(self, movie: Movie) -> bool:
        if not movie.title:
            return False
        if self._needle is not None:
            return self._needle in movie.lower_title
        return self._pattern.search(movie.title) is not None


def compile_title_query(query: str) -> TitleMatcher:
    return TitleMatcher(query)


def search_titles(movies: Iterable[Movie], query: Optional[str]) -> Iterator[Movie]:
    """
    Lazily yield the movies whose title matches the query.

    Args:
        movies: Movies to filter
        query: Substring or regular expression; None disables the filter

    Returns:
        Iterator over matching movies in input order
    """
    if query is None:
        return iter(movies)
    matcher = compile_title_query(query)
    return (movie for movie in movies if matcher.matches(movie))


def parse_release_date(value: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """
    Parse a strict ``YYYY-MM-DD`` date into ``(year, month, day)``.

    Returns None when the value is not a proleptic calendar date. Year 0000
    is accepted and is a leap year.
    """
    if not isinstance(value, str):
        return None
    match = _ISO_DATE.match(value)
    if match is None:
        return None

    year, month, day = (int(part) for part in match.groups())
    if not 1 <= month <= 12:
        return None
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        return None
    return year, month, day


def _release_sort_key(movie: Movie):
    # Valid ISO dates order the same as strings; unparseable ones rank below all of them.
    if parse_release_date(movie.release_date) is None:
        return (0, "")
    return (1, movie.release_date)


def sort_by_release_date_desc(movies: Iterable[Movie]) -> List[Movie]:
    """
    Order movies newest first.

    Movies whose release date is not a valid calendar date are kept and
    placed last, in their original relative order.
    """
    return sorted(movies, key=_release_sort_key, reverse=True)


def old_movies(movies: Iterable[Movie], year: str, limit: int) -> List[Movie]:
    """
    Get up to ``limit`` movies released before ``year``.

    The comparison is a plain string comparison of the release date against
    ``year`` (e.g. ``"2009-12-31" < "2010"``), so an empty date qualifies.
    Movies with no release date at all never do. Source order is preserved.
    """
    result: List[Movie] = []
    if limit <= 0:
        return result
    for movie in movies:
        if movie.release_date is not None and movie.release_date < year:
            result.append(movie)
            if len(result) >= limit:
                break
    return result
