"""
Test suite for chat API endpoint.

Tests POST /chat/query with FastAPI TestClient and a mocked QueryOrchestrator.
Covers successful answers, citation serialization and error handling.

System role: Verification of chat HTTP API endpoint
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ragika.api.deps import get_query_orchestrator
from ragika.api.routers.chat import router
from ragika.core.exceptions import GenerationError, InvalidRequest
from ragika.core.rag_query import NO_INFORMATION_ANSWER
from ragika.models.chat import ChatQueryResponse
from ragika.models.citation import Citation


@pytest.fixture
def sample_response() -> ChatQueryResponse:
    """Provide sample answer with two citations."""
    return ChatQueryResponse(
        answer="Employees get 20 days [1][2].",
        citations=[
            Citation(document_id="doc-1", chunk_id="chunk-3"),
            Citation(document_id="doc-2", chunk_id="chunk-0"),
        ],
    )


@pytest.fixture
def mock_orchestrator(sample_response) -> MagicMock:
    """
    Create mock QueryOrchestrator for testing.

    Returns:
        MagicMock: Orchestrator returning the sample response
    """
    orchestrator = MagicMock()
    orchestrator.answer = AsyncMock(return_value=sample_response)
    return orchestrator


@pytest.fixture
def client(mock_orchestrator) -> TestClient:
    """Provide TestClient with chat router and mocked orchestrator."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_query_orchestrator] = lambda: mock_orchestrator
    return TestClient(app)


class TestChatQuerySuccessful:
    """Test suite for successful chat queries."""

    def test_chat_should_return_answer_with_camel_case_citations(
        self, client: TestClient, mock_orchestrator: MagicMock
    ) -> None:
        """Test citations serialize as documentId/chunkId in order."""
        # Act
        response = client.post("/chat/query", json={"query": "Vacation days?", "category": "hr"})

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "answer": "Employees get 20 days [1][2].",
            "citations": [
                {"documentId": "doc-1", "chunkId": "chunk-3"},
                {"documentId": "doc-2", "chunkId": "chunk-0"},
            ],
        }
        request = mock_orchestrator.answer.await_args.args[0]
        assert request.query == "Vacation days?"
        assert request.category == "hr"

    def test_chat_should_return_200_when_nothing_found(
        self, client: TestClient, mock_orchestrator: MagicMock
    ) -> None:
        """Test the no-information answer is a normal 200 response."""
        mock_orchestrator.answer.return_value = ChatQueryResponse(
            answer=NO_INFORMATION_ANSWER, citations=[]
        )

        response = client.post("/chat/query", json={"query": "Unknown topic"})

        assert response.status_code == 200
        assert response.json() == {"answer": NO_INFORMATION_ANSWER, "citations": []}


class TestChatQueryErrors:
    """Test suite for chat query failures."""

    def test_chat_should_return_400_for_missing_query(
        self, client: TestClient, mock_orchestrator: MagicMock
    ) -> None:
        """Test validation failures map to 400."""
        mock_orchestrator.answer.side_effect = InvalidRequest("query is required", field="query")

        response = client.post("/chat/query", json={})

        assert response.status_code == 400
        assert response.json() == {"detail": "query is required"}

    def test_chat_should_return_generic_500_on_generation_failure(
        self, client: TestClient, mock_orchestrator: MagicMock
    ) -> None:
        """Test backend failures return a generic message."""
        mock_orchestrator.answer.side_effect = GenerationError(
            "LLM request failed: connection refused", provider="ollama"
        )

        response = client.post("/chat/query", json={"query": "Vacation days?"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to process chat query"}
        assert "ollama" not in response.text
