"""
Retrieval logic with category filtering.

Embeds the query and runs a top-K similarity search against the collection.

Dependencies: ragika.boundary.embeddings, ragika.boundary.vdb, ragika.core.exceptions
System role: RAG retrieval business logic
"""

import logging

from ragika.boundary.embeddings import EmbeddingClient
from ragika.boundary.vdb import CategoryFilter, QdrantStore, RetrievalHit
from ragika.core.exceptions import EmbeddingServiceError, RetrievalError, VectorStoreError

logger = logging.getLogger(__name__)


class Retriever:
    """Retrieval business logic."""

    def __init__(
        self,
        vector_store: QdrantStore,
        embedding_client: EmbeddingClient,
        top_k: int = 20,
    ) -> None:
        """Initialize retriever with vector store and embedding clients."""
        self.vector_store = vector_store
        self.embedding_client = embedding_client
        self.top_k = top_k

    async def retrieve(self, query: str, category: str | None = None) -> list[RetrievalHit]:
        """
        Retrieve the chunks most similar to a query.

        Args:
            query: Query text
            category: Optional category; blank means no filter

        Returns:
            list[RetrievalHit]: Hits by descending similarity, possibly empty

        Raises:
            RetrievalError: On embedding or search failure
        """
        try:
            [query_vector] = await self.embedding_client.embed([query])
        except EmbeddingServiceError as e:
            raise RetrievalError("Failed to embed query", details={"error": e.message}) from e

        category_filter = self.apply_filters(category)
        try:
            hits = await self.vector_store.search(query_vector, self.top_k, category_filter)
        except VectorStoreError as e:
            raise RetrievalError(
                "Similarity search failed",
                details={"category": category, "error": e.message},
            ) from e

        logger.info(
            "Retrieved candidates",
            extra={"hit_count": len(hits), "top_k": self.top_k, "category": category},
        )
        return hits

    @staticmethod
    def apply_filters(category: str | None) -> CategoryFilter | None:
        """
        Build the payload filter for a category.

        Args:
            category: Requested category

        Returns:
            CategoryFilter | None: Equality filter, or None for unfiltered search
        """
        if category:
            return CategoryFilter(category=category)
        return None
