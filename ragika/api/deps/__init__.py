"""API-specific dependencies."""

from .dependencies import (
    get_index_writer,
    get_query_orchestrator,
    get_service_cache,
)

__all__ = [
    "get_index_writer",
    "get_query_orchestrator",
    "get_service_cache",
]
