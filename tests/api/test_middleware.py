"""Tests for API middleware and error handlers."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from techstore.api.middleware import setup_middleware
from techstore.domain.exceptions import CatalogLoadError, ProductNotFoundError


@pytest.fixture
def failing_client() -> TestClient:
    """Create test client for an app whose routes raise."""
    failing_app = FastAPI()
    setup_middleware(failing_app)

    @failing_app.get("/missing")
    async def missing() -> None:
        raise ProductNotFoundError("p-1")

    @failing_app.get("/unloadable")
    async def unloadable() -> None:
        raise CatalogLoadError("/data/products", "not a directory")

    @failing_app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("boom")

    @failing_app.get("/whoami")
    async def whoami(request: Request) -> dict[str, str]:
        return {"request_id": request.state.request_id}

    return TestClient(failing_app)


class TestRequestIdMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        # UUID format
        assert len(response.headers["X-Request-ID"]) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        response = client.get("/catalog", headers={"X-Request-ID": "custom-request-id-12345"})
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == "custom-request-id-12345"

    def test_handlers_see_request_id(self, failing_client: TestClient) -> None:
        """The ID is on request state before the route runs."""
        response = failing_client.get("/whoami", headers={"X-Request-ID": "req-42"})
        assert response.json() == {"request_id": "req-42"}
        assert response.headers["X-Request-ID"] == "req-42"


class TestErrorHandling:
    """Tests for domain and unexpected error responses."""

    def test_not_found_maps_to_404(self, failing_client: TestClient) -> None:
        response = failing_client.get("/missing")
        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["message"] == "Product p-1 not found"
        assert data["request_id"] == response.headers["X-Request-ID"]

    def test_other_domain_errors_map_to_400(self, failing_client: TestClient) -> None:
        response = failing_client.get("/unloadable")
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "CATALOG_ERROR"
        assert data["details"] == {"source": "/data/products", "reason": "not a directory"}

    def test_unhandled_exception_maps_to_500(self, failing_client: TestClient) -> None:
        """Unexpected errors never leak details."""
        response = failing_client.get("/boom", headers={"X-Request-ID": "req-500"})
        assert response.status_code == 500
        assert response.json() == {
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": {},
            "request_id": "req-500",
        }
