"""
Study Tracker - FastAPI Application
Main application entry point with middleware, error handlers and route configuration
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from study_tracker.api.v1 import api_router
from study_tracker.core.config import settings
from study_tracker.core.database import init_db
from study_tracker.core.exceptions import InvalidInputError, NotFoundError
from study_tracker.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    configure_logging()
    await init_db()
    logger.info("%s %s started (%s)", settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT)
    
    yield
    
    # Shutdown
    logger.info("%s shutting down", settings.APP_NAME)


def register_exception_handlers(app: FastAPI) -> None:
    """Translate service-layer errors into HTTP responses."""
    
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})
    
    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})
    
    @app.exception_handler(SQLAlchemyError)
    async def store_failure_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage temporarily unavailable"},
        )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Study planning and tracking: revisions, streaks, exams and writing practice",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )
    
    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(app)
    
    # Include API routes
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)
    
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        }
    
    @app.get(f"{settings.API_V1_PREFIX}/health", tags=["Health"])
    async def api_v1_health_check():
        """API V1 Health check."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
        }
    
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "study_tracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
