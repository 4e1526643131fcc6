"""
Document ingestion API endpoint.

Routes: POST /ingest/text

Dependencies: ragika.core.document_processing, ragika.models
System role: Document ingestion HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ragika.api.deps import get_index_writer
from ragika.core.document_processing import IndexWriter
from ragika.core.exceptions import InvalidRequest
from ragika.models.document import IngestTextRequest, IngestTextResponse
from ragika.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ingest", tags=["documents"])


@router.post("/text", response_model=IngestTextResponse)
async def ingest_text(
    request: IngestTextRequest,
    index_writer: IndexWriter = Depends(get_index_writer),
) -> IngestTextResponse:
    """
    Chunk, embed and index a raw text document.

    Args:
        request: Text, category and optional title
        index_writer: Injected IndexWriter

    Returns:
        IngestTextResponse: Generated document ID and chunk count

    Raises:
        HTTPException(400): Text or category missing
        HTTPException(500): Ingestion pipeline failure
    """
    try:
        return await index_writer.ingest(request)
    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        log_exception_with_context(
            logger,
            "Ingest error",
            e,
            category=request.category,
            text_length=len(request.text or ""),
        )
        raise HTTPException(status_code=500, detail="Failed to ingest document")
