"""
FastAPI Application
===================

Main FastAPI app setup with all routes, middleware and exception handlers.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campsite_api.api.error_handlers import register_exception_handlers
from campsite_api.api.v1 import campsite_router, comment_router
from campsite_api.core.config import get_settings
from campsite_api.infrastructure.db.mongo_connection import close_mongo_client

SERVICE_NAME = "Campsite API"
SERVICE_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Nothing to start eagerly (Mongo connects lazily); close the client on shutdown."""
    logger.info(f"{SERVICE_NAME} {SERVICE_VERSION} started")
    yield
    close_mongo_client()
    logger.info(f"{SERVICE_NAME} stopped")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Domain error and store error handlers

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title=SERVICE_NAME,
        description="Campsites with user comments. Admins manage campsites; users manage their own comments.",
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(campsite_router, prefix="/api/v1/campsites")
    application.include_router(comment_router, prefix="/api/v1/campsites")

    @application.get("/")
    def root():
        """Root endpoint - service metadata."""
        return {
            "status": "running",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "docs": "/docs",
        }

    @application.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"Starting {SERVICE_NAME} on {settings.api_host}:{settings.api_port}")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
