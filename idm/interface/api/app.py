"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from idm.interface.api.errors import register_error_handlers
from idm.interface.api.routes import health, users
from idm.util.di.container import create_container, setup_di
from idm.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default
    """
    app_instance = FastAPI(
        title="IDM Directory API",
        description="Read queries over the user directory: lookups by ID, "
        "handle or either, and a public active-status check",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
