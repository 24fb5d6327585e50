"""
API test fixtures: the real app with the catalog service swapped for the
in-memory fixture catalog.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_catalog_service
from app.api.main import app


@pytest.fixture
def client(service):
    """TestClient whose catalog is the shared fixture service."""
    app.dependency_overrides[get_catalog_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
