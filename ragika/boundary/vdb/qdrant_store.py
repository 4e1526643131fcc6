"""
Qdrant REST client wrapper.

Provides collection provisioning, point upsert and filtered similarity
search against a single Qdrant collection over its REST API.

Dependencies: httpx, ragika.configs, ragika.core.exceptions
System role: Vector store client for indexing and retrieval
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ragika.boundary.vdb.vector_schemas import (
    CategoryFilter,
    IndexedPoint,
    PointPayload,
    RetrievalHit,
)
from ragika.configs.vector_store import VectorStoreSettings
from ragika.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)

COSINE_DISTANCE = "Cosine"


class QdrantStore:
    """
    Qdrant client bound to one collection.

    Every call is a single request; nothing is retried or cached.
    """

    def __init__(self, http_client: httpx.AsyncClient, config: VectorStoreSettings) -> None:
        """
        Initialize store client.

        Args:
            http_client: Shared async HTTP client
            config: Vector store settings (URL, collection, timeouts)
        """
        self._http = http_client
        self.config = config
        self._collection_url = (
            f"{config.qdrant_url.rstrip('/')}/collections/{config.collection_name}"
        )

    @property
    def collection_name(self) -> str:
        """Name of the bound collection."""
        return self.config.collection_name

    async def collection_exists(self) -> bool:
        """
        Check whether the collection exists.

        Any failure (404, connection error, timeout) is reported as absent.

        Returns:
            bool: True when the existence check returned 2xx
        """
        try:
            response = await self._http.get(
                self._collection_url,
                timeout=self.config.collection_timeout_seconds,
            )
            response.raise_for_status()
            return True
        except httpx.HTTPError as e:
            logger.debug(
                "Collection existence check failed, treating as absent",
                extra={"collection": self.collection_name, "error": str(e)},
            )
            return False

    async def create_collection(self, vector_size: int, distance: str = COSINE_DISTANCE) -> None:
        """
        Create the collection with the given vector geometry.

        Args:
            vector_size: Embedding dimensionality
            distance: Similarity metric name

        Raises:
            VectorStoreError: If creation fails
        """
        body = {"vectors": {"size": vector_size, "distance": distance}}
        try:
            response = await self._http.put(
                self._collection_url,
                json=body,
                timeout=self.config.collection_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise VectorStoreError(
                message="Failed to create Qdrant collection",
                operation="create_collection",
                details={"collection": self.collection_name, "error": str(e)},
            ) from e

        logger.info(
            "Created Qdrant collection",
            extra={"collection": self.collection_name, "vector_size": vector_size},
        )

    async def upsert_points(self, points: list[IndexedPoint]) -> None:
        """
        Upsert points in one request and wait until they are searchable.

        Args:
            points: Points to write

        Raises:
            VectorStoreError: If the upsert fails
        """
        try:
            response = await self._http.put(
                f"{self._collection_url}/points",
                params={"wait": "true"},
                json={"points": [point.to_wire() for point in points]},
                timeout=self.config.qdrant_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise VectorStoreError(
                message="Failed to upsert points to Qdrant",
                operation="upsert",
                details={"error": str(e), "point_count": len(points)},
            ) from e

    async def search(
        self,
        vector: list[float],
        top: int,
        category_filter: CategoryFilter | None = None,
    ) -> list[RetrievalHit]:
        """
        Similarity search returning payloads without vectors.

        Args:
            vector: Query embedding
            top: Number of results to return
            category_filter: Optional payload equality filter

        Returns:
            list[RetrievalHit]: Hits in the store's order (descending score)

        Raises:
            VectorStoreError: If the request fails or the response is malformed
        """
        body: dict[str, Any] = {
            "vector": vector,
            "top": top,
            "with_payload": True,
            "with_vector": False,
        }
        if category_filter is not None:
            body["filter"] = category_filter.to_wire()

        try:
            response = await self._http.post(
                f"{self._collection_url}/points/search",
                json=body,
                timeout=self.config.qdrant_timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise VectorStoreError(
                message="Failed to search Qdrant collection",
                operation="search",
                details={"error": str(e), "top": top},
            ) from e

        try:
            return self._parse_hits(data)
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            raise VectorStoreError(
                message="Malformed search response from Qdrant",
                operation="search",
                details={"error": str(e)},
            ) from e

    @staticmethod
    def _parse_hits(data: Any) -> list[RetrievalHit]:
        """
        Convert a search response body into hits.

        A missing result list means no hits. A hit without id or score is malformed.
        """
        items = (data or {}).get("result") or []
        return [
            RetrievalHit(
                id=str(item["id"]),
                score=item["score"],
                payload=PointPayload.model_validate(item.get("payload") or {}),
            )
            for item in items
        ]
