"""
Health check API endpoint.

Routes: GET /healthz

Dependencies: ragika.core.document_processing
System role: Liveness check that verifies collection provisioning
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ragika.api.deps import get_index_writer
from ragika.core.document_processing import IndexWriter
from ragika.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


router = APIRouter(tags=["health"])


@router.get("/healthz", response_model=HealthResponse)
async def health_check(
    index_writer: IndexWriter = Depends(get_index_writer),
):
    """Report ok when the collection exists or can be created."""
    try:
        await index_writer.ensure_collection()
    except Exception as e:
        log_exception_with_context(logger, "Health check failed", e)
        return JSONResponse(status_code=500, content={"status": "error"})
    return HealthResponse(status="ok")
