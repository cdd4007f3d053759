"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, studybuddy.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studybuddy.api.deps import get_service_cache
from studybuddy.boundary.db import create_tables
from studybuddy.configs import get_settings
from studybuddy.observability import configure_logging, get_logger
from studybuddy.observability.middleware import RequestLoggingMiddleware

from .routers import chat_router, documents_router, health_router, resumes_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and, for SQLite development databases, creates
    the tables. Cached services are dropped on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.quiet_loggers)
    logger = get_logger(__name__)

    if settings.database.is_sqlite:
        await create_tables()

    logger.info("Application started", extra={"environment": settings.environment})
    yield

    get_service_cache().clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="StudyBuddy RAG API",
        description="Course PDF and resume indexing with grounded Q&A",
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
    app.add_middleware(RequestLoggingMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(resumes_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "studybuddy.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
