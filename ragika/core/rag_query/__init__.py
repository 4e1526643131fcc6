"""
RAG query pipeline.

Prompt composition, answer generation and query orchestration.
"""

from ragika.core.rag_query.generator import Generator
from ragika.core.rag_query.orchestrator import NO_INFORMATION_ANSWER, QueryOrchestrator
from ragika.core.rag_query.prompt import PromptComposer

__all__ = ["Generator", "PromptComposer", "QueryOrchestrator", "NO_INFORMATION_ANSWER"]
