"""
Test suite for document ingestion endpoint.

Tests POST /ingest/text with FastAPI TestClient and a mocked IndexWriter.
Covers successful ingestion, validation failures and generic 500 responses.

System role: Verification of ingestion HTTP API endpoint
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ragika.api.deps import get_index_writer
from ragika.api.routers.documents import router
from ragika.core.exceptions import IngestionError, InvalidRequest
from ragika.models.document import IngestTextResponse


@pytest.fixture
def mock_index_writer() -> MagicMock:
    """
    Create mock IndexWriter for testing.

    Returns:
        MagicMock: Index writer reporting a three-chunk ingest
    """
    writer = MagicMock()
    writer.ingest = AsyncMock(
        return_value=IngestTextResponse(document_id="doc-123", chunks=3)
    )
    return writer


@pytest.fixture
def app(mock_index_writer) -> FastAPI:
    """Create FastAPI test application with documents router."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_index_writer] = lambda: mock_index_writer
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


class TestIngestTextSuccessful:
    """Test suite for successful ingestion requests."""

    def test_ingest_should_return_camel_case_document_id(
        self, client: TestClient, mock_index_writer: MagicMock
    ) -> None:
        """Test response body is {documentId, chunks}."""
        # Act
        response = client.post(
            "/ingest/text",
            json={"text": "Employees get 20 days.", "category": "hr", "title": "Handbook"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"documentId": "doc-123", "chunks": 3}

        request = mock_index_writer.ingest.await_args.args[0]
        assert request.text == "Employees get 20 days."
        assert request.category == "hr"
        assert request.title == "Handbook"

    def test_ingest_should_accept_missing_title(
        self, client: TestClient, mock_index_writer: MagicMock
    ) -> None:
        """Test title is optional."""
        response = client.post("/ingest/text", json={"text": "body", "category": "hr"})

        assert response.status_code == 200
        assert mock_index_writer.ingest.await_args.args[0].title is None


class TestIngestTextErrors:
    """Test suite for ingestion failures."""

    def test_ingest_should_return_400_for_invalid_request(
        self, client: TestClient, mock_index_writer: MagicMock
    ) -> None:
        """Test validation failures map to 400 with the message as detail."""
        mock_index_writer.ingest.side_effect = InvalidRequest(
            "text and category are required", field="category"
        )

        response = client.post("/ingest/text", json={"text": "body"})

        assert response.status_code == 400
        assert response.json() == {"detail": "text and category are required"}

    def test_ingest_should_return_generic_500_on_pipeline_failure(
        self, client: TestClient, mock_index_writer: MagicMock
    ) -> None:
        """Test internal error details are not leaked to the client."""
        mock_index_writer.ingest.side_effect = IngestionError(
            "Failed to upsert document chunks",
            document_id="doc-9",
            details={"error": "qdrant 503"},
        )

        response = client.post("/ingest/text", json={"text": "body", "category": "hr"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to ingest document"}
        assert "qdrant" not in response.text

    def test_ingest_should_return_generic_500_on_unexpected_error(
        self, client: TestClient, mock_index_writer: MagicMock
    ) -> None:
        """Test non-domain exceptions are also reported generically."""
        mock_index_writer.ingest.side_effect = RuntimeError("boom")

        response = client.post("/ingest/text", json={"text": "body", "category": "hr"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to ingest document"}
