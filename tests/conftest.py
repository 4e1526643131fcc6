"""
Shared test fixtures and configuration for entire test suite.

Provides: Settings fixtures, mock transport helpers, retrieval hit factories
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

import json
from collections.abc import Callable

import httpx
import pytest

from ragika.boundary.vdb import PointPayload, RetrievalHit
from ragika.configs.llm import LLMProvider, LLMSettings
from ragika.configs.services import EmbeddingSettings, RerankSettings
from ragika.configs.vector_store import VectorStoreSettings


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def json_bodies(self) -> list[dict]:
        """Decoded JSON bodies of the recorded requests."""
        return [json.loads(request.content) for request in self.requests if request.content]


def make_hit(index: int, document_id: str = "doc-1", category: str = "hr") -> RetrievalHit:
    """Build a retrieval hit whose id and text carry its index."""
    return RetrievalHit(
        id=f"H{index}",
        score=1.0 - index * 0.01,
        payload=PointPayload(
            document_id=document_id,
            category=category,
            title="Handbook",
            text=f"context {index}",
        ),
    )


@pytest.fixture
def embedding_settings() -> EmbeddingSettings:
    """Embedding settings pointing at a fake host."""
    return EmbeddingSettings(base_url="http://embed.test", dimension=4, timeout_seconds=5)


@pytest.fixture
def rerank_settings() -> RerankSettings:
    """Rerank settings with a configured backend."""
    return RerankSettings(base_url="http://rerank.test", timeout_seconds=5)


@pytest.fixture
def vector_store_settings() -> VectorStoreSettings:
    """Vector store settings pointing at a fake Qdrant."""
    return VectorStoreSettings(
        qdrant_url="http://qdrant.test",
        collection_name="ragika_test",
        top_k=20,
    )


@pytest.fixture
def ollama_settings() -> LLMSettings:
    """LLM settings for the Ollama protocol."""
    return LLMSettings(
        provider=LLMProvider.OLLAMA,
        base_url="http://llm.test",
        model="llama3.1:8b-instruct",
    )


@pytest.fixture
def openai_compat_settings() -> LLMSettings:
    """LLM settings for the OpenAI-compatible protocol."""
    return LLMSettings(
        provider=LLMProvider.OPENAI_COMPAT,
        base_url="http://llm.test/",
        model="qwen2.5-7b-instruct",
        system_prompt="Be brief.",
        temperature=0.1,
        top_p=0.9,
    )


@pytest.fixture
def hit_factory() -> Callable[..., RetrievalHit]:
    """Provide the retrieval hit factory."""
    return make_hit


@pytest.fixture
def transport_factory() -> Callable[[Callable[[httpx.Request], httpx.Response]], RecordingTransport]:
    """Provide a factory for recording mock transports."""
    return RecordingTransport
