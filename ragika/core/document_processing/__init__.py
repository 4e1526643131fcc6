"""
Document ingestion pipeline.

Chunking, embedding and indexing of raw text documents.
"""

from ragika.core.document_processing.index_writer import IndexWriter

__all__ = ["IndexWriter"]
