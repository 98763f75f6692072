"""FastAPI application entry point.

Exposes field documentation over HTTP for clients that capture exchanges
outside of Python.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from payloaddocs import __version__
from payloaddocs.api.fields import router as fields_router
from payloaddocs.api.schemas import ErrorResponse
from payloaddocs.core.config import Settings, get_settings
from payloaddocs.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info(f"Starting payload documentation API, snippets go to {settings.output_dir}")
    yield
    logger.info("Shutting down payload documentation API...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings. If None, loads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Payload Documentation",
        description="Validates payloads against field descriptors and renders field snippets",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    app.include_router(fields_router)
    logger.info("Registered fields router")

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "service": "payloaddocs",
            "version": __version__,
        }

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        """Handle Pydantic validation errors."""
        logger.warning(f"Validation error: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(
                detail="Invalid request body",
                error_code="INVALID_REQUEST",
                extra={"errors": [error["msg"] for error in exc.errors()]},
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                detail="Internal server error",
                error_code="INTERNAL_ERROR",
            ).model_dump(),
        )

    logger.info("FastAPI application created successfully")
    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
