"""
Tests for environment-driven API configuration.
"""

from app.api import config


class TestConfig:
    """Defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("MOVIES_DATA_PATH", "MONGO_URI", "MONGO_DATABASE", "MONGO_CREDITS_COLLECTION",
                     "MONGO_BATCH_SIZE", "API_PORT", "WARM_ON_STARTUP", "LOG_FILE"):
            monkeypatch.delenv(name, raising=False)

        assert config.get_movies_path().endswith("movies-v2.json.gz")
        assert config.get_mongo_uri() == "mongodb://localhost:27017"
        assert config.get_mongo_database() == "moviesDB"
        assert config.get_credits_collection() == "credits"
        assert config.get_mongo_batch_size() == 5000
        assert config.get_api_port() == 8081
        assert config.get_warm_on_startup() is True
        assert config.get_log_file() is None

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("MOVIES_DATA_PATH", "/data/m.json.gz")
        monkeypatch.setenv("MONGO_BATCH_SIZE", "100")
        monkeypatch.setenv("WARM_ON_STARTUP", "false")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert config.get_movies_path() == "/data/m.json.gz"
        assert config.get_mongo_batch_size() == 100
        assert config.get_warm_on_startup() is False
        assert config.get_log_level() == "DEBUG"
