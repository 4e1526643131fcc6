"""
Embedding service client.

Generates vector embeddings for text batches through a TEI-style /embed endpoint.

Dependencies: httpx, ragika.configs, ragika.core.exceptions
System role: Embedding generation adapter for ingestion and retrieval
"""

import logging
from numbers import Real

import httpx

from ragika.configs.services import EmbeddingSettings
from ragika.core.exceptions import EmbeddingServiceError

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Convert text batches into embedding vectors. One request per batch, no retry."""

    def __init__(self, http_client: httpx.AsyncClient, config: EmbeddingSettings) -> None:
        """
        Initialize embedding client.

        Args:
            http_client: Shared async HTTP client
            config: Embedding settings (base URL, timeout)
        """
        self._http = http_client
        self.config = config
        self._endpoint = f"{config.base_url.rstrip('/')}/embed"

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """
        Embed a batch of texts.

        Args:
            texts: Ordered texts to embed (1..N). Batching is the caller's concern.

        Returns:
            list[list[float]]: One vector per input text, in input order

        Raises:
            EmbeddingServiceError: When the backend is unreachable, times out,
                or returns a response without an aligned embeddings array
        """
        if not texts:
            raise EmbeddingServiceError("Cannot embed an empty batch")

        try:
            response = await self._http.post(
                self._endpoint,
                json={"inputs": texts},
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "Embedding request failed",
                extra={"endpoint": self._endpoint, "batch_size": len(texts), "error": str(e)},
            )
            raise EmbeddingServiceError(
                f"Embedding request failed: {e}",
                details={"batch_size": len(texts)},
            ) from e

        embeddings = data.get("embeddings") if isinstance(data, dict) else None
        if not isinstance(embeddings, list) or not all(self._is_vector(v) for v in embeddings):
            raise EmbeddingServiceError(
                "Invalid response from embeddings service",
                details={"batch_size": len(texts)},
            )
        if len(embeddings) != len(texts):
            raise EmbeddingServiceError(
                "Embeddings service returned a different number of vectors than inputs",
                details={"batch_size": len(texts), "vector_count": len(embeddings)},
            )

        return embeddings

    @staticmethod
    def _is_vector(value: object) -> bool:
        """A vector is a list of real numbers; booleans do not count."""
        return isinstance(value, list) and all(
            isinstance(x, Real) and not isinstance(x, bool) for x in value
        )
