"""
Vector database boundary layer.

Provides the Qdrant REST client and the records exchanged with it.

Dependencies: httpx
System role: Vector store adapter for indexing and retrieval
"""

from ragika.boundary.vdb.qdrant_store import QdrantStore
from ragika.boundary.vdb.vector_schemas import (
    CategoryFilter,
    IndexedPoint,
    PointPayload,
    RetrievalHit,
)

__all__ = [
    "QdrantStore",
    "CategoryFilter",
    "IndexedPoint",
    "PointPayload",
    "RetrievalHit",
]
