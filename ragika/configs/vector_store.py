"""
Vector store configuration settings.

Manages Qdrant connection, collection geometry and retrieval depth.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field

from ragika.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Qdrant vector store configuration."""

    qdrant_url: str = Field(
        default="http://localhost:6333",
        description="Qdrant REST base URL",
    )
    collection_name: str = Field(default="ragika", description="Qdrant collection name")
    top_k: int = Field(default=20, gt=0, description="Number of top results to retrieve")
    qdrant_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout for search and upsert requests",
    )
    collection_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for collection existence checks and creation",
    )
