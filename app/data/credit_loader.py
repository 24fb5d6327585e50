"""
Credit loading from the MongoDB credits collection.

Each document looks like::

    {"id": "603", "cast": ["Keanu Reeves", ...], "crew": ["Lana Wachowski (Director)", ...]}

Every crew entry is parsed while loading; a single entry without a
parenthesized role fails the whole load.
"""

import logging
import time
from typing import Any, Dict, Iterable, List, Mapping

from app.core.exceptions import DatasetError
from app.core.models import Credit
from app.database.connection import MongoManager

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 5000


def credit_from_document(doc: Mapping[str, Any]) -> Credit:
    """
    Convert a raw credits document into a Credit.

    Raises:
        DatasetError: If the document has no id or its lists are not lists
        MalformedCreditEntry: If a crew entry has no role
    """
    if doc.get("id") is None:
        raise DatasetError(f"Credit document without id (fields: {sorted(doc)})")

    credit_id = str(doc["id"])
    crew = doc.get("crew") or []
    cast = doc.get("cast") or []
    if not isinstance(crew, list) or not isinstance(cast, list):
        raise DatasetError(f"Credit {credit_id} has non-list crew or cast")

    return Credit.from_parts(credit_id, crew=crew, cast=cast)


def credits_from_documents(documents: Iterable[Mapping[str, Any]]) -> List[Credit]:
    """Convert raw documents in order, failing on the first malformed one."""
    return [credit_from_document(doc) for doc in documents]


def load_credits_from_collection(collection, batch_size: int = DEFAULT_BATCH_SIZE) -> List[Credit]:
    """
    Read every document of a credits collection.

    Args:
        collection: PyMongo collection (anything with a compatible ``find``)
        batch_size: Cursor batch size

    Returns:
        Credits in cursor order
    """
    cursor = collection.find({}, {"_id": 0}, batch_size=batch_size)
    return credits_from_documents(cursor)


def load_credits(
    manager: MongoManager,
    collection_name: str = "credits",
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> List[Credit]:
    """
    Open a client, read the whole credits collection and close the client.

    Args:
        manager: Mongo connection manager
        collection_name: Name of the credits collection
        batch_size: Cursor batch size

    Returns:
        List of Credit
    """
    logger.info(f"Loading credits from {manager.database_name}.{collection_name}...")
    start = time.time()

    with manager.collection_scope(collection_name) as collection:
        credits = load_credits_from_collection(collection, batch_size=batch_size)

    logger.info(f"Loaded {len(credits)} credits in {time.time() - start:.2f}s")
    return credits


def credit_to_document(credit: Credit) -> Dict[str, Any]:
    """Inverse of credit_from_document, used when seeding the collection."""
    return {"id": credit.id, "cast": list(credit.cast), "crew": list(credit.crew)}
