"""
Embedding and rerank service configuration.

Base URLs and timeouts for the model-serving backends used by the pipeline.

Dependencies: pydantic, pydantic_settings
System role: Model backend configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ragika.configs.base import BaseSettings


class EmbeddingSettings(BaseSettings):
    """Embedding backend (TEI-style /embed endpoint) configuration."""

    model_config = SettingsConfigDict(env_prefix="EMBEDDINGS_")

    base_url: str = Field(
        default="http://localhost:8080",
        description="Embedding service base URL",
    )
    dimension: int = Field(
        default=1024,
        gt=0,
        description="Embedding vector dimension (1024 for BGE-M3)",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Embedding request timeout in seconds",
    )


class RerankSettings(BaseSettings):
    """Cross-encoder rerank backend configuration. Empty base_url disables reranking."""

    model_config = SettingsConfigDict(env_prefix="RERANK_")

    base_url: str = Field(default="", description="Rerank service base URL")
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Rerank request timeout in seconds",
    )

    @property
    def enabled(self) -> bool:
        """Whether a rerank backend is configured."""
        return bool(self.base_url.strip())
