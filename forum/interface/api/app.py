"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.routes import comments, health, likes, replies, threads
from forum.interface.error import register_error_handlers
from forum.util.di.container import container_lifespan, create_container, setup_di
from forum.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Forum API",
        description="Backend API for a discussion forum of threads, comments, replies and likes",
        version=SERVICE_VERSION,
        lifespan=container_lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(replies.router)
    app_instance.include_router(likes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
