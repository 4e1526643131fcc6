"""Embedding backend client."""

from ragika.boundary.embeddings.embedding_client import EmbeddingClient

__all__ = ["EmbeddingClient"]
