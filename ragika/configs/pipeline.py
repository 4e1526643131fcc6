"""
Pipeline configuration settings.

Chunking and context-selection limits shared by ingestion and query pipelines.

Dependencies: pydantic, pydantic_settings
System role: RAG pipeline tuning
"""

from pydantic import Field

from ragika.configs.base import BaseSettings


class PipelineSettings(BaseSettings):
    """Ingestion and query pipeline limits."""

    max_context: int = Field(
        default=8,
        gt=0,
        description="Maximum number of contexts placed into the prompt",
    )
    chunk_max_tokens: int = Field(
        default=500,
        gt=0,
        description="Maximum whitespace-delimited tokens per chunk",
    )
