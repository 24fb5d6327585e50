#!/usr/bin/env python
"""
Seed the MongoDB credits collection from a JSON or JSON-lines file.

Every document is validated the same way the API loads it (each crew entry
must look like "Name (Role)") before anything is written.

Usage:
    # Replace the collection with the file contents
    python scripts/seed_credits.py data/credits.jsonl --drop

    # Append to an existing collection
    python scripts/seed_credits.py data/credits.json
"""

import sys
import json
import logging
import time
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.config import get_credits_collection, get_mongo_database, get_mongo_uri
from app.core.exceptions import DatasetError
from app.data.credit_loader import credit_to_document, credits_from_documents
from app.database import MongoManager
from app.utils.logging_config import configure_script_logging

logger = logging.getLogger(__name__)


def read_documents(path: Path):
    """Read a JSON array or one JSON object per line."""
    text = path.read_text(encoding="utf-8")
    if text.lstrip().startswith("["):
        return json.loads(text)
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def seed(manager: MongoManager, collection_name: str, path: Path, drop: bool, batch_size: int) -> int:
    """Validate and insert the credits in ``path``; returns the number inserted."""
    credits = credits_from_documents(read_documents(path))
    logger.info(f"Validated {len(credits)} credits from {path}")

    with manager.collection_scope(collection_name) as collection:
        if drop:
            logger.info(f"Dropping {manager.database_name}.{collection_name}")
            collection.drop()
        for start in range(0, len(credits), batch_size):
            batch = credits[start:start + batch_size]
            collection.insert_many([credit_to_document(c) for c in batch])
        collection.create_index("id")
    return len(credits)


def main():
    """Main entry point for credits seeding."""
    parser = argparse.ArgumentParser(description="Seed the MongoDB credits collection")
    parser.add_argument('path', type=Path, help='JSON array or JSON-lines file of credit documents')
    parser.add_argument('--drop', action='store_true', help='Drop the collection before inserting')
    parser.add_argument('--uri', default=get_mongo_uri(), help='MongoDB connection string')
    parser.add_argument('--database', default=get_mongo_database(), help='Database name')
    parser.add_argument('--collection', default=get_credits_collection(), help='Collection name')
    parser.add_argument('--batch-size', type=int, default=1000, help='Documents per insert')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    configure_script_logging(debug=args.debug)

    start = time.time()
    manager = MongoManager(uri=args.uri, database=args.database)
    try:
        count = seed(manager, args.collection, args.path, args.drop, args.batch_size)
    except DatasetError as e:
        logger.error(f"Refusing to seed invalid data: {e}")
        return 1

    logger.info(f"Seeded {count} credits in {time.time() - start:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
