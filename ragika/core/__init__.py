"""
Core business logic module.

Contains the ingestion and query pipelines and the exception hierarchy.
"""

from ragika.core.exceptions import (
    EmbeddingServiceError,
    GenerationError,
    IndexProvisioningError,
    IngestionError,
    InvalidRequest,
    PipelineError,
    RagikaError,
    RetrievalError,
    VectorStoreError,
)

__all__ = [
    "RagikaError",
    "InvalidRequest",
    "EmbeddingServiceError",
    "VectorStoreError",
    "RetrievalError",
    "IndexProvisioningError",
    "IngestionError",
    "GenerationError",
    "PipelineError",
]
