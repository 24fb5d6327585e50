"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path


def get_movies_path() -> str:
    """Get movie dataset path from env or default."""
    return os.getenv("MOVIES_DATA_PATH", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "movies-v2.json.gz"
    )


def get_mongo_uri() -> str:
    """Get MongoDB connection string."""
    return os.getenv("MONGO_URI", "mongodb://localhost:27017")


def get_mongo_database() -> str:
    """Get database holding the credits collection."""
    return os.getenv("MONGO_DATABASE", "moviesDB")


def get_credits_collection() -> str:
    """Get credits collection name."""
    return os.getenv("MONGO_CREDITS_COLLECTION", "credits")


def get_mongo_batch_size() -> int:
    """Get cursor batch size used when reading credits."""
    return int(os.getenv("MONGO_BATCH_SIZE", "5000"))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8081"))


def get_warm_on_startup() -> bool:
    """Whether to load the datasets when the app starts instead of on first request."""
    return os.getenv("WARM_ON_STARTUP", "true").lower() in ("1", "true", "yes")


def get_log_file() -> str | None:
    """Get optional log file name (written under logs/)."""
    return os.getenv("LOG_FILE") or None
