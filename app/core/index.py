"""
Movie id -> credit records lookup.

The index is built in a single pass over the credit collection and never
changes afterwards; lookups are plain dict reads.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from app.core.models import Credit

logger = logging.getLogger(__name__)

_NO_CREDITS: Tuple[Credit, ...] = ()


class CreditIndex:
    """
    Immutable mapping from movie id to the credits recorded for it.

    Several credits may share an id; they are kept together in load order.
    """

    def __init__(self, credits_by_id: Dict[str, Tuple[Credit, ...]]):
        self._credits_by_id = credits_by_id

    def credits_for(self, movie_id: str) -> Tuple[Credit, ...]:
        """
        Get the credits for a movie.

        Args:
            movie_id: Movie identifier

        Returns:
            Credits in load order; an empty tuple if the movie has none
        """
        return self._credits_by_id.get(movie_id, _NO_CREDITS)

    def __contains__(self, movie_id: str) -> bool:
        return movie_id in self._credits_by_id

    def __len__(self) -> int:
        return len(self._credits_by_id)

    def duplicate_ids(self) -> List[str]:
        """Movie ids with more than one credit record."""
        return [movie_id for movie_id, credits in self._credits_by_id.items() if len(credits) > 1]


def build_index(credits: Iterable[Credit]) -> CreditIndex:
    """Group credits by movie id, preserving load order within each group."""
    grouped: Dict[str, List[Credit]] = {}
    for credit in credits:
        grouped.setdefault(credit.id, []).append(credit)

    index = CreditIndex({movie_id: tuple(group) for movie_id, group in grouped.items()})

    duplicates = index.duplicate_ids()
    if duplicates:
        logger.warning(
            f"{len(duplicates)} movies have more than one credit record "
            f"(first: {duplicates[0]}); only the first is used for stats"
        )
    logger.info(f"Credit index built for {len(index)} movies")
    return index
