"""
MongoDB connection management using PyMongo.

This module handles client creation for the credits document store and
provides a context manager that guarantees the client is closed.
"""

from contextlib import contextmanager
from typing import Generator, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database


# Defaults match the seeded credits database
DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_DATABASE = "moviesDB"
DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 5000


class MongoManager:
    """
    Document store connection manager.

    Clients are opened on demand and closed when the scope ends; the credits
    collection is only read once at startup, so no client is kept around.
    """

    def __init__(
        self,
        uri: str = DEFAULT_MONGO_URI,
        database: str = DEFAULT_DATABASE,
        server_selection_timeout_ms: int = DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    ):
        """
        Initialize the manager.

        Args:
            uri: MongoDB connection string
            database: Database holding the credits collection
            server_selection_timeout_ms: How long to wait for a reachable server
        """
        self.uri = uri
        self.database_name = database
        self.server_selection_timeout_ms = server_selection_timeout_ms

    def create_client(self) -> MongoClient:
        """
        Create a new client.

        Note:
            The caller owns the client and must close it:
            client = manager.create_client()
            try:
                ...
            finally:
                client.close()
        """
        return MongoClient(self.uri, serverSelectionTimeoutMS=self.server_selection_timeout_ms)

    @contextmanager
    def database_scope(self) -> Generator[Database, None, None]:
        """
        Context manager yielding the configured database.

        Usage:
            with manager.database_scope() as db:
                docs = list(db["credits"].find())
        """
        client = self.create_client()
        try:
            yield client[self.database_name]
        finally:
            client.close()

    @contextmanager
    def collection_scope(self, name: str) -> Generator[Collection, None, None]:
        """Context manager yielding one collection of the configured database."""
        with self.database_scope() as db:
            yield db[name]

    def ping(self) -> bool:
        """Return True if the server answers a ping."""
        with self.database_scope() as db:
            db.command("ping")
        return True


# Global manager instance (singleton pattern)
_mongo_manager: Optional[MongoManager] = None


def get_mongo_manager(uri: str = DEFAULT_MONGO_URI, database: str = DEFAULT_DATABASE) -> MongoManager:
    """
    Get or create the global Mongo manager instance.

    Args:
        uri: MongoDB connection string
        database: Database name

    Returns:
        MongoManager instance
    """
    global _mongo_manager
    if _mongo_manager is None:
        _mongo_manager = MongoManager(uri=uri, database=database)
    return _mongo_manager
