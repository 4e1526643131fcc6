"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, uvicorn, ragika.api.routers, ragika.observability
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ragika.api.deps import get_service_cache
from ragika.configs import get_settings
from ragika.observability.logger import configure_logging
from ragika.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import chat_router, documents_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the pipelines at startup and closes the shared HTTP client at shutdown.
    """
    cache = get_service_cache()
    _ = cache.index_writer
    _ = cache.query_orchestrator
    logger.info(
        "Pipelines ready",
        extra={
            "collection": cache.settings.vector_store.collection_name,
            "llm_provider": cache.settings.llm.provider.value,
            "rerank_enabled": cache.settings.rerank.enabled,
        },
    )

    yield

    await cache.aclose()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="Ragika RAG API",
        description="Grounded question answering over ingested text documents",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # CorrelationMiddleware is outermost so request logs carry the correlation ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router)
    app.include_router(documents_router)
    app.include_router(chat_router)

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "ragika.api.main:app",
        host=settings.host,
        port=settings.port,
    )
