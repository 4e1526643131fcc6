"""
Observability module.

Provides structured logging, correlation ID tracking and request logging middleware.
"""

from ragika.observability.logger import configure_logging

__all__ = ["configure_logging"]
