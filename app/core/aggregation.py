"""
Crew role statistics over a set of movies.
"""

import logging
from collections import Counter
from typing import Dict, Iterable

from app.core.index import CreditIndex
from app.core.models import Movie, StatsResult
from app.core.roles import CrewRole, classify

logger = logging.getLogger(__name__)


def count_roles(role_texts: Iterable[str]) -> Counter:
    """Count the CrewRole of every role text."""
    return Counter(classify(role_text) for role_text in role_texts)


def aggregate(movies: Iterable[Movie], index: CreditIndex) -> StatsResult:
    """
    Sum crew role counts across movies.

    Only the first credit record of each movie is counted; a movie without
    credits adds nothing to the counts but is still part of
    ``matched_movies``.

    Args:
        movies: Movies matched by the current query
        index: Credit lookup for the loaded dataset

    Returns:
        StatsResult with a count for every CrewRole
    """
    totals: Dict[CrewRole, int] = {role: 0 for role in CrewRole}
    matched = 0

    for movie in movies:
        matched += 1
        credits = index.credits_for(movie.id)
        if not credits:
            continue
        # TODO: decide whether duplicate credit records should be merged into the stats
        for role, count in count_roles(credits[0].roles).items():
            totals[role] += count

    logger.debug(f"Aggregated crew roles over {matched} movies")
    return StatsResult(matched_movies=matched, counts=totals)
