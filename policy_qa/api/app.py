"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from policy_qa import __version__
from policy_qa.api.routes import router as documents_router

logger = logging.getLogger(__name__)

_DEFAULT_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


def _allowed_origins() -> list[str]:
    origins = list(_DEFAULT_ORIGINS)
    frontend_url = os.getenv("FRONTEND_URL")
    if frontend_url:
        origins.append(frontend_url.rstrip("/"))
    return origins


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    logger.info("Starting Policy QA API...")
    logger.info(f"Indexing service: {os.getenv('ML_API_URL') or '(ML_API_URL not set)'}")
    yield
    # Shutdown; sessions are in memory only and are dropped here
    logger.info("Shutting down Policy QA API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Policy QA API",
        description=(
            "Proxy for an external document-QA service. Uploads PDFs for "
            "indexing, keeps an in-memory session per indexed document, and "
            "answers natural-language questions against it."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept"],
    )

    application.include_router(documents_router)

    @application.get("/api/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "OK", "message": "Server is running"}

    @application.get("/api")
    async def api_summary(request: Request) -> dict[str, Any]:
        """Describe the available endpoints."""
        base_url = str(request.base_url).rstrip("/")
        return {
            "name": "Policy QA API",
            "version": __version__,
            "endpoints": {
                "GET /api/health": "Health check endpoint",
                "GET /api": "This endpoint - API summary",
                "POST /hackrx/upload": "Upload PDF and index it (returns pdf_id)",
                "POST /hackrx/query": "Query PDF using pdf_id and question",
                "POST /hackrx/analyze": "Upload PDF and answer several questions",
            },
            "ml_api": {"endpoint": os.getenv("ML_API_URL")},
            "examples": {
                "upload": f'curl -X POST -F "file=@policy.pdf" {base_url}/hackrx/upload',
                "query": (
                    'curl -X POST -F "pdf_id=<pdf_id>" '
                    f'-F "question=What is the waiting period?" {base_url}/hackrx/query'
                ),
            },
        }

    return application


app = create_app()
