"""
Cross-encoder reranking with pass-through fallback.

Reorders retrieved candidates by relevance scores from a rerank service.
Reranking is best-effort: without a configured backend, or on any backend
failure, retrieval order is kept.

Dependencies: httpx, ragika.configs
System role: Candidate reordering between retrieval and prompt assembly
"""

import logging
from numbers import Real

import httpx

from ragika.configs.services import RerankSettings

logger = logging.getLogger(__name__)


class Reranker:
    """Compute a relevance permutation over candidate texts."""

    def __init__(self, http_client: httpx.AsyncClient, config: RerankSettings) -> None:
        """
        Initialize reranker.

        Args:
            http_client: Shared async HTTP client
            config: Rerank settings; an empty base URL disables reranking
        """
        self._http = http_client
        self.config = config

    async def rerank(self, query: str, texts: list[str]) -> list[int]:
        """
        Order candidate indices by descending relevance.

        Args:
            query: Original user query
            texts: Candidate texts in retrieval order

        Returns:
            list[int]: Permutation of range(len(texts)); identity when
                reranking is disabled or the backend fails
        """
        identity = list(range(len(texts)))
        if not self.config.enabled or not texts:
            return identity

        endpoint = f"{self.config.base_url.rstrip('/')}/rerank"
        try:
            response = await self._http.post(
                endpoint,
                json={"query": query, "texts": texts},
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "Rerank request failed, keeping retrieval order",
                extra={"endpoint": endpoint, "error": str(e)},
            )
            return identity

        scores = data.get("scores") if isinstance(data, dict) else None
        if not self._valid_scores(scores, len(texts)):
            logger.warning(
                "Malformed rerank response, keeping retrieval order",
                extra={"endpoint": endpoint, "candidate_count": len(texts)},
            )
            return identity

        # sorted() is stable, so equal scores keep retrieval order
        return sorted(identity, key=lambda idx: -scores[idx])

    @staticmethod
    def _valid_scores(scores: object, expected: int) -> bool:
        """Scores must be a numeric list aligned with the candidates."""
        return (
            isinstance(scores, list)
            and len(scores) == expected
            and all(isinstance(s, Real) and not isinstance(s, bool) for s in scores)
        )
