"""
Index writer: collection provisioning and chunk persistence.

Coordinates chunking, batch embedding and a single synchronous upsert per
document. Partial writes are not rolled back; a failed document must be
re-ingested.

Dependencies: ragika.boundary, ragika.core.document_processing.tasks
System role: Ingestion pipeline orchestration
"""

import logging
import time
import uuid

from ragika.boundary.embeddings import EmbeddingClient
from ragika.boundary.vdb import IndexedPoint, PointPayload, QdrantStore
from ragika.core.document_processing.tasks import ChunkingTask
from ragika.core.exceptions import (
    EmbeddingServiceError,
    IndexProvisioningError,
    IngestionError,
    InvalidRequest,
    VectorStoreError,
)
from ragika.models.chunk import Chunk
from ragika.models.document import IngestTextRequest, IngestTextResponse

logger = logging.getLogger(__name__)


class IndexWriter:
    """Ingest documents: chunk -> embed -> upsert."""

    def __init__(
        self,
        vector_store: QdrantStore,
        embedding_client: EmbeddingClient,
        chunking_task: ChunkingTask,
        vector_size: int,
    ) -> None:
        """
        Initialize index writer.

        Args:
            vector_store: Qdrant client bound to the target collection
            embedding_client: Embedding backend client
            chunking_task: Text chunker
            vector_size: Embedding dimensionality the collection is created with
        """
        self.vector_store = vector_store
        self.embedding_client = embedding_client
        self.chunking_task = chunking_task
        self.vector_size = vector_size

    async def ensure_collection(self) -> None:
        """
        Create the collection unless it already exists. Safe to call before every operation.

        Raises:
            IndexProvisioningError: If the collection is absent and creation fails
        """
        if await self.vector_store.collection_exists():
            return

        try:
            await self.vector_store.create_collection(self.vector_size)
        except VectorStoreError as e:
            logger.error(
                "Failed to create Qdrant collection",
                extra={"collection": self.vector_store.collection_name, "error": str(e)},
            )
            raise IndexProvisioningError(
                f"Failed to provision collection '{self.vector_store.collection_name}'",
                details=e.details,
            ) from e

    async def ingest(self, request: IngestTextRequest) -> IngestTextResponse:
        """
        Index a raw text document.

        Args:
            request: Text, category and optional title

        Returns:
            IngestTextResponse: Generated document ID and chunk count

        Raises:
            InvalidRequest: Text or category missing
            IndexProvisioningError: Collection could not be created
            IngestionError: Embedding or upsert failed
        """
        if not request.text or not request.text.strip():
            raise InvalidRequest("text and category are required", field="text")
        if not request.category or not request.category.strip():
            raise InvalidRequest("text and category are required", field="category")

        start_time = time.perf_counter()
        await self.ensure_collection()

        document_id = str(uuid.uuid4())
        chunks = [
            Chunk(
                id=str(uuid.uuid4()),
                document_id=document_id,
                category=request.category,
                title=request.title or "",
                text=text,
            )
            for text in self.chunking_task.chunk(request.text)
        ]

        try:
            vectors = await self.embedding_client.embed([chunk.text for chunk in chunks])
        except EmbeddingServiceError as e:
            raise IngestionError(
                "Failed to embed document chunks",
                document_id=document_id,
                details={"chunk_count": len(chunks), "error": e.message},
            ) from e

        self._check_dimensions(vectors, document_id)

        points = [
            IndexedPoint(
                id=chunk.id,
                vector=vector,
                payload=PointPayload(
                    document_id=chunk.document_id,
                    category=chunk.category,
                    title=chunk.title,
                    text=chunk.text,
                ),
            )
            for chunk, vector in zip(chunks, vectors)
        ]

        try:
            await self.vector_store.upsert_points(points)
        except VectorStoreError as e:
            raise IngestionError(
                "Failed to upsert document chunks",
                document_id=document_id,
                details={"chunk_count": len(points), "error": e.message},
            ) from e

        logger.info(
            "Ingested document",
            extra={
                "document_id": document_id,
                "category": request.category,
                "chunk_count": len(points),
                "processing_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        return IngestTextResponse(document_id=document_id, chunks=len(points))

    def _check_dimensions(self, vectors: list[list[float]], document_id: str) -> None:
        """Reject vectors whose length differs from the collection's vector size."""
        mismatched = {len(vector) for vector in vectors} - {self.vector_size}
        if mismatched:
            logger.error(
                "Embedding dimensionality does not match collection configuration",
                extra={"expected": self.vector_size, "received": sorted(mismatched)},
            )
            raise IngestionError(
                "Embedding dimensionality does not match collection vector size",
                document_id=document_id,
                details={"expected": self.vector_size, "received": sorted(mismatched)},
            )
