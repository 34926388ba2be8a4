"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (indexes, tasks, health)
- Error handlers (centralized error-to-HTTP mapping)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from gateway.core.config import settings
from gateway.interfaces.health import router as health_router
from gateway.interfaces.indexes.router import indexes_router, tasks_router
from gateway.shared.errors.handlers import register_error_handlers
from gateway.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers and error handlers.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(indexes_router)
    app.include_router(tasks_router)

    return app


app = create_app()
