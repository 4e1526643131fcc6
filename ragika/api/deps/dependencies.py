"""
Dependency injection container.

Builds pipeline components once from the frozen settings and hands them to
FastAPI routes. Components share one httpx.AsyncClient, closed at shutdown.

Dependencies: httpx, ragika.configs, ragika.core, ragika.boundary
System role: DI container for pipeline injection
"""

import httpx

from ragika.boundary.embeddings import EmbeddingClient
from ragika.boundary.vdb import QdrantStore
from ragika.configs import Settings, get_settings
from ragika.core.citation_builder import CitationBuilder
from ragika.core.document_processing import IndexWriter
from ragika.core.document_processing.tasks import ChunkingTask
from ragika.core.rag_query import Generator, PromptComposer, QueryOrchestrator
from ragika.core.reranker import Reranker
from ragika.core.retriever import Retriever


class ServiceCache:
    """Container for cached pipeline instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._http_client: httpx.AsyncClient | None = None
        self._vector_store: QdrantStore | None = None
        self._embedding_client: EmbeddingClient | None = None
        self._index_writer: IndexWriter | None = None
        self._query_orchestrator: QueryOrchestrator | None = None

    @property
    def settings(self) -> Settings:
        """Get settings, loading them on first use."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get shared HTTP client. Per-call timeouts are set by each component."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient()
        return self._http_client

    @property
    def vector_store(self) -> QdrantStore:
        """Get cached Qdrant client."""
        if self._vector_store is None:
            self._vector_store = QdrantStore(self.http_client, self.settings.vector_store)
        return self._vector_store

    @property
    def embedding_client(self) -> EmbeddingClient:
        """Get cached embedding client."""
        if self._embedding_client is None:
            self._embedding_client = EmbeddingClient(self.http_client, self.settings.embeddings)
        return self._embedding_client

    @property
    def index_writer(self) -> IndexWriter:
        """Get cached index writer."""
        if self._index_writer is None:
            self._index_writer = IndexWriter(
                vector_store=self.vector_store,
                embedding_client=self.embedding_client,
                chunking_task=ChunkingTask(self.settings.pipeline.chunk_max_tokens),
                vector_size=self.settings.embeddings.dimension,
            )
        return self._index_writer

    @property
    def query_orchestrator(self) -> QueryOrchestrator:
        """Get cached query orchestrator."""
        if self._query_orchestrator is None:
            settings = self.settings
            self._query_orchestrator = QueryOrchestrator(
                index_writer=self.index_writer,
                retriever=Retriever(
                    vector_store=self.vector_store,
                    embedding_client=self.embedding_client,
                    top_k=settings.vector_store.top_k,
                ),
                reranker=Reranker(self.http_client, settings.rerank),
                prompt_composer=PromptComposer(),
                generator=Generator(self.http_client, settings.llm),
                citation_builder=CitationBuilder(),
                max_context=settings.pipeline.max_context,
            )
        return self._query_orchestrator

    async def aclose(self) -> None:
        """Close the HTTP client and drop all cached instances."""
        if self._http_client is not None:
            await self._http_client.aclose()
        self._http_client = None
        self._vector_store = None
        self._embedding_client = None
        self._index_writer = None
        self._query_orchestrator = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_index_writer() -> IndexWriter:
    """
    Get index writer instance.

    Returns:
        IndexWriter: Ingestion pipeline bound to the configured collection
    """
    return get_service_cache().index_writer


def get_query_orchestrator() -> QueryOrchestrator:
    """
    Get query orchestrator instance.

    Returns:
        QueryOrchestrator: Query pipeline with retriever, reranker and generator
    """
    return get_service_cache().query_orchestrator
