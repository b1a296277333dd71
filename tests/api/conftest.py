"""Shared fixtures for API tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

import techstore.api.dependencies as dependencies_module
from techstore.api.dependencies import get_catalog_store
from techstore.catalog.store import CatalogStore
from techstore.main import app


@pytest.fixture(autouse=True)
def reset_stores() -> Generator[None, None, None]:
    """Reset the global catalog store and overrides around each test."""
    dependencies_module._catalog_store = None
    yield
    dependencies_module._catalog_store = None
    app.dependency_overrides.clear()


@pytest.fixture
def client(demo_store: CatalogStore) -> TestClient:
    """Create test client serving the 50-product demo catalog."""
    app.dependency_overrides[get_catalog_store] = lambda: demo_store
    return TestClient(app)
