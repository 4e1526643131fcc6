"""Chat API endpoint.

Routes:
- POST /chat/query - Answer a question from indexed documents with citations

Dependencies: ragika.core.rag_query, ragika.models
System role: Grounded question answering HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ragika.api.deps import get_query_orchestrator
from ragika.core.exceptions import InvalidRequest
from ragika.core.rag_query import QueryOrchestrator
from ragika.models.chat import ChatQueryRequest, ChatQueryResponse
from ragika.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/query", response_model=ChatQueryResponse)
async def chat_query(
    request: ChatQueryRequest,
    orchestrator: QueryOrchestrator = Depends(get_query_orchestrator),
) -> ChatQueryResponse:
    """Answer a question using retrieved context.

    A query with no relevant chunks is answered with a fixed message and no
    citations (200, not 404).

    Args:
        request: Query text and optional category filter
        orchestrator: Injected QueryOrchestrator

    Returns:
        ChatQueryResponse: Answer with citations

    Raises:
        HTTPException(400): Query missing
        HTTPException(500): Pipeline failure (details are logged, not returned)
    """
    try:
        return await orchestrator.answer(request)
    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        log_exception_with_context(
            logger,
            "Chat query error",
            e,
            category=request.category,
        )
        raise HTTPException(status_code=500, detail="Failed to process chat query")
