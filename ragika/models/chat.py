"""
Chat domain models and schemas.

Request/response schemas for grounded question answering.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field

from ragika.models.citation import Citation


class ChatQueryRequest(BaseModel):
    """Request schema for chat queries."""

    query: str | None = Field(default=None, description="User question")
    category: str | None = Field(default=None, description="Restrict retrieval to this category")


class ChatQueryResponse(BaseModel):
    """Response schema for chat queries."""

    answer: str
    citations: list[Citation] = Field(default_factory=list)
