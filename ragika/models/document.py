"""
Document domain models and schemas.

Request/response schemas for text ingestion.

Dependencies: pydantic
System role: Document API contracts
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IngestTextRequest(BaseModel):
    """Request schema for ingesting a raw text document.

    Required fields are checked by the ingestion pipeline so that missing and
    blank values are rejected the same way.
    """

    text: str | None = Field(default=None, description="Raw document text")
    category: str | None = Field(default=None, description="Category used for retrieval filtering")
    title: str | None = Field(default=None, description="Optional display title")


class IngestTextResponse(BaseModel):
    """Response schema for text ingestion."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    document_id: str = Field(description="Generated document identifier")
    chunks: int = Field(description="Number of chunks indexed")
