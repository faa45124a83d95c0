"""FastAPI application entry point.

Main application setup with middleware, routing, and lifecycle management.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from template_binder import __version__
from template_binder.api.resume import router as resume_router
from template_binder.api.schemas import ErrorResponse
from template_binder.api.templates import router as templates_router
from template_binder.core.config import Settings, get_settings
from template_binder.core.factory import ComponentFactory
from template_binder.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Builds the binding suggester up front so configuration errors
    surface at startup.
    """
    logger.info("Starting Template Binding API...")

    try:
        suggester = app.state.factory.get_suggester()
        logger.info(f"Binding suggester ready: {suggester.strategy_name}")
    except Exception as e:
        logger.error(f"Failed to create binding suggester: {e}", exc_info=True)
        raise

    yield

    logger.info("Shutting down Template Binding API...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings. If None, loads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    try:
        settings = settings or get_settings()
        setup_logging(settings)

        app = FastAPI(
            title="Template Binding API",
            description="Placeholder binding suggestions for resume templates",
            version=__version__,
            lifespan=lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        # Store settings and components in app state
        app.state.settings = settings
        app.state.factory = ComponentFactory(settings)

        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        try:
            app.include_router(templates_router)
            app.include_router(resume_router)
            logger.info("Registered templates and resume routers")
        except Exception as e:
            logger.error(f"Failed to include router: {e}", exc_info=True)
            raise

        @app.get("/health", tags=["health"])
        async def health_check():
            """Health check endpoint for load balancers and monitoring."""
            return {
                "status": "healthy",
                "service": "template-binding-api",
                "version": __version__,
            }

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(request, exc):
            """Handle Pydantic validation errors."""
            logger.warning(f"Validation error: {exc.errors()}")
            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content={
                    "detail": "Validation error",
                    "errors": jsonable_encoder(exc.errors()),
                },
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

    except Exception as e:
        logger.error(f"Failed to create FastAPI app: {e}", exc_info=True)
        raise


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"Starting uvicorn server on {settings.host}:{settings.port}...")
    uvicorn.run(
        "template_binder.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
