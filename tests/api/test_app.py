"""
Test suite for the assembled application.

Tests route registration, CORS and correlation ID propagation through
create_app() with mocked pipelines.

System role: Verification of API assembly and middleware
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from ragika.api.deps import get_index_writer, get_query_orchestrator
from ragika.api.main import create_app
from ragika.observability.middleware import CORRELATION_HEADER


@pytest.fixture
def client() -> TestClient:
    """Provide TestClient for the full app without running the lifespan."""
    index_writer = MagicMock()
    index_writer.ensure_collection = AsyncMock()
    app = create_app()
    app.dependency_overrides[get_index_writer] = lambda: index_writer
    app.dependency_overrides[get_query_orchestrator] = lambda: MagicMock()
    return TestClient(app)


class TestApplication:
    """Test suite for create_app()."""

    def test_app_should_register_all_routes(self) -> None:
        """Test the three endpoints are mounted without a prefix."""
        paths = set(create_app().openapi()["paths"])

        assert {"/healthz", "/ingest/text", "/chat/query"} <= paths

    def test_response_should_echo_incoming_correlation_id(self, client: TestClient) -> None:
        """Test a caller-supplied correlation ID is returned unchanged."""
        response = client.get("/healthz", headers={CORRELATION_HEADER: "req-42"})

        assert response.status_code == 200
        assert response.headers[CORRELATION_HEADER] == "req-42"

    def test_response_should_carry_generated_correlation_id(self, client: TestClient) -> None:
        """Test a correlation ID is generated when none is supplied."""
        first = client.get("/healthz").headers[CORRELATION_HEADER]
        second = client.get("/healthz").headers[CORRELATION_HEADER]

        assert first
        assert first != second

    def test_cors_should_allow_any_origin(self, client: TestClient) -> None:
        """Test preflight requests from arbitrary origins are accepted."""
        response = client.options(
            "/chat/query",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] in ("*", "http://example.com")
