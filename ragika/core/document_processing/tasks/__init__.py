"""
Ingestion pipeline tasks.

Exports: ChunkingTask
"""

from .chunking_task import ChunkingTask

__all__ = ["ChunkingTask"]
