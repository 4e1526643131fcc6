"""
Chunk domain model.

Represents a slice of a document's text with the metadata copied from its parent.

Dependencies: pydantic
System role: Document chunk data structure
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Document chunk model."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Generated chunk identifier (UUID4)")
    document_id: str = Field(description="Parent document identifier")
    category: str = Field(description="Category copied from the parent document")
    title: str = Field(default="", description="Title copied from the parent document")
    text: str = Field(description="Chunk text content")
