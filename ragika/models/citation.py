"""
Citation domain model.

Represents the provenance of a context passage used in an answer.

Dependencies: pydantic
System role: Citation data structure
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Citation(BaseModel):
    """Citation model for source attribution. Serialized as {documentId, chunkId}."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    document_id: str = Field(description="Parent document identifier")
    chunk_id: str = Field(description="Indexed point identifier of the chunk")
