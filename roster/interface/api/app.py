"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.config import Settings
from roster.interface.api.errors import register_exception_handlers
from roster.interface.api.routes import follows, health, users
from roster.util.di.container import create_container, setup_di
from roster.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Release the store on shutdown.

    Closing the container runs the engine finalizer, which disposes the
    connection pool.
    """
    yield
    await app.state.dishka_container.close()
    logfire.info("Container closed")


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings to build the app from (loaded from environment if omitted)
        container: DI container to use instead of the production one
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Roster API",
        description="User directory with profiles and follow relationships",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # The CRUD UI is served from its own origin
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_exception_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(health.index_router, prefix=settings.api.prefix)
    app_instance.include_router(users.router, prefix=settings.api.prefix)
    app_instance.include_router(follows.router, prefix=settings.api.prefix)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
