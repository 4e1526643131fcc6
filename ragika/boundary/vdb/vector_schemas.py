"""
Vector database schemas.

Pydantic models for vector operations (points, payloads, filters, hits).
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PointPayload(BaseModel):
    """
    Payload attached to each indexed point.

    Stored with camelCase keys (documentId) so that existing collections
    remain readable.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    document_id: str = Field(default="", description="Parent document identifier")
    category: str = Field(default="", description="Document category for filtering")
    title: str = Field(default="", description="Document title for display")
    text: str = Field(default="", description="Chunk text")


class IndexedPoint(BaseModel):
    """A chunk vector as persisted in the collection."""

    id: str = Field(description="Point identifier (chunk id)")
    vector: list[float] = Field(description="Embedding vector")
    payload: PointPayload

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the Qdrant point shape."""
        return {
            "id": self.id,
            "payload": self.payload.model_dump(by_alias=True),
            "vector": self.vector,
        }


class CategoryFilter(BaseModel):
    """Equality filter on the payload category."""

    category: str

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the Qdrant filter shape."""
        return {"must": [{"key": "category", "match": {"value": self.category}}]}


class RetrievalHit(BaseModel):
    """Single result from vector search."""

    id: str = Field(description="Point identifier")
    score: float = Field(description="Similarity score")
    payload: PointPayload = Field(default_factory=PointPayload)

    @property
    def text(self) -> str:
        """Context text stored with the point."""
        return self.payload.text
