"""
Query orchestrator for grounded question answering.

Sequences provisioning, retrieval, reranking, context selection, prompt
composition and generation for one query. Holds no state between queries.

Dependencies: ragika.core (retriever, reranker, citation builder, rag_query),
    ragika.core.document_processing
System role: Query pipeline orchestration
"""

import logging
import time

from ragika.core.citation_builder import CitationBuilder
from ragika.core.document_processing.index_writer import IndexWriter
from ragika.core.exceptions import InvalidRequest, PipelineError, RagikaError
from ragika.core.rag_query.generator import Generator
from ragika.core.rag_query.prompt import PromptComposer
from ragika.core.reranker import Reranker
from ragika.core.retriever import Retriever
from ragika.models.chat import ChatQueryRequest, ChatQueryResponse

logger = logging.getLogger(__name__)

NO_INFORMATION_ANSWER = "I'm sorry, I couldn't find any information relevant to your question."


class QueryOrchestrator:
    """
    Answer questions from indexed documents.

    Flow:
    1. Validate query text
    2. Ensure the collection exists
    3. Retrieve candidates (zero hits -> fixed answer, no generation)
    4. Rerank candidates
    5. Select the first max_context candidates and build citations
    6. Compose prompt and generate
    7. Return trimmed answer with citations
    """

    def __init__(
        self,
        index_writer: IndexWriter,
        retriever: Retriever,
        reranker: Reranker,
        prompt_composer: PromptComposer,
        generator: Generator,
        citation_builder: CitationBuilder,
        max_context: int = 8,
    ) -> None:
        self.index_writer = index_writer
        self.retriever = retriever
        self.reranker = reranker
        self.prompt_composer = prompt_composer
        self.generator = generator
        self.citation_builder = citation_builder
        self.max_context = max_context

    async def answer(self, request: ChatQueryRequest) -> ChatQueryResponse:
        """
        Run the query pipeline.

        Args:
            request: Query text and optional category filter

        Returns:
            ChatQueryResponse: Answer with citations in prompt marker order

        Raises:
            InvalidRequest: Query text missing or blank
            RagikaError: Provisioning, retrieval or generation failure
        """
        if not request.query or not request.query.strip():
            raise InvalidRequest("query is required", field="query")

        try:
            return await self._run(request.query, request.category)
        except RagikaError:
            raise
        except Exception as e:
            raise PipelineError(
                "Unexpected failure in query pipeline",
                details={"error_type": type(e).__name__, "error": str(e)},
            ) from e

    async def _run(self, query: str, category: str | None) -> ChatQueryResponse:
        start_time = time.perf_counter()

        await self.index_writer.ensure_collection()

        hits = await self.retriever.retrieve(query, category)
        if not hits:
            logger.info("No relevant chunks found", extra={"category": category})
            return ChatQueryResponse(answer=NO_INFORMATION_ANSWER, citations=[])

        contexts = [hit.text for hit in hits]
        order = await self.reranker.rerank(query, contexts)

        selected = [hits[i] for i in order[: self.max_context]]
        citations = self.citation_builder.build_citations(selected)

        prompt = self.prompt_composer.compose([hit.text for hit in selected], query)
        raw_answer = await self.generator.generate(prompt)

        logger.info(
            "Answered query",
            extra={
                "hit_count": len(hits),
                "context_count": len(selected),
                "processing_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        return ChatQueryResponse(answer=raw_answer.strip(), citations=citations)
