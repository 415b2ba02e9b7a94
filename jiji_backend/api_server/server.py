"""
FastAPI server: app factory, pool lifecycle and error translation.

create_app() wires the routes, the request middleware and one exception
handler that turns every JijiError into its JSON response. The connection pool
is either injected (tests, custom embedding) or built from Settings on startup
and disposed on shutdown.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from jiji_backend import __version__
from jiji_backend.api_server.middleware import RequestContextMiddleware
from jiji_backend.api_server.routes import health_router, router as ask_router
from jiji_backend.config import Settings, get_settings
from jiji_backend.core.exceptions import ConfigurationInvalid, ConfigurationMissing, JijiError
from jiji_backend.database import ConnectionPool
from jiji_backend.jiji_logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the pool from settings unless one was injected; dispose what we built on shutdown."""
    owns_pool = False
    if app.state.pool is None:
        try:
            settings = app.state.settings or get_settings()
        except ConfigurationMissing as e:
            logger.error("missing_required_environment_variables", missing=e.missing)
            raise
        except ConfigurationInvalid as e:
            logger.error("invalid_configuration", variable=e.name, error=str(e))
            raise
        app.state.settings = settings
        app.state.pool = ConnectionPool.from_settings(settings)
        owns_pool = True

    yield

    if owns_pool:
        app.state.pool.dispose()
        app.state.pool = None


def jiji_error_handler(request: Any, exc: JijiError) -> JSONResponse:
    """Consistent JSON error response for JijiError."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


def create_app(pool: ConnectionPool | None = None, settings: Settings | None = None) -> FastAPI:
    """Return a configured FastAPI app. An injected pool is used as-is and never disposed here."""
    app = FastAPI(
        title="Jiji API",
        description="Answers user queries. The database pool is checked for liveness on every ask.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.pool = pool
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(JijiError, jiji_error_handler)
    app.include_router(ask_router)
    app.include_router(health_router)
    return app
