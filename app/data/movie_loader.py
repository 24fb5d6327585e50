"""
Movie catalog loading from the bundled gzip JSON dataset.

The dataset is a single JSON array of objects with camelCase keys
(``id``, ``title``, ``originalTitle``, ``overview``, ``releaseDate``,
``tagline``, ``voteAverage``).
"""

import gzip
import json
import logging
import time
from pathlib import Path
from typing import Any, List, Mapping

from app.core.exceptions import DatasetError
from app.core.models import Movie

logger = logging.getLogger(__name__)


def _optional_str(value: Any):
    if value is None:
        return None
    return str(value)


def movie_from_record(record: Mapping[str, Any]) -> Movie:
    """
    Convert one raw JSON object into a Movie.

    Raises:
        DatasetError: If the record is not an object or has no id
    """
    if not isinstance(record, Mapping):
        raise DatasetError(f"Movie record is not an object: {record!r}")
    if record.get("id") is None:
        raise DatasetError(f"Movie record without id: title={record.get('title')!r}")

    return Movie(
        id=str(record["id"]),
        title=_optional_str(record.get("title")),
        original_title=_optional_str(record.get("originalTitle")),
        overview=_optional_str(record.get("overview")),
        release_date=_optional_str(record.get("releaseDate")),
        tagline=_optional_str(record.get("tagline")),
        vote_average=_optional_str(record.get("voteAverage")),
    )


def load_movies(path: str) -> List[Movie]:
    """
    Decompress and parse the movie dataset.

    Args:
        path: Path to the ``.json.gz`` file

    Returns:
        Movies in file order

    Raises:
        FileNotFoundError: If the dataset file does not exist
        DatasetError: If the payload is not a JSON array of movie objects
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Movie data file not found: {filepath}")

    logger.info(f"Loading movies from {filepath}...")
    start = time.time()

    try:
        with gzip.open(filepath, "rt", encoding="utf-8") as f:
            records = json.load(f)
    except (OSError, EOFError, ValueError) as e:
        raise DatasetError(f"Failed to load movie data from {filepath}: {e}") from e

    if not isinstance(records, list):
        raise DatasetError(f"Movie data in {filepath} is not a JSON array")

    movies = [movie_from_record(record) for record in records]
    logger.info(f"Loaded {len(movies)} movies in {time.time() - start:.2f}s")
    return movies
