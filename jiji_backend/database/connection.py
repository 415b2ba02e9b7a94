"""
Database connection pool.

Responsibilities:
- Build the PostgreSQL engine (SQLAlchemy QueuePool over psycopg2) from Settings.
- Lend connections through a scoped acquire() that always returns them to the pool.
- Translate checkout failures into ConnectionUnavailable.

The engine is lazy: nothing connects until the first acquire(). pool_pre_ping
validates every checkout, so a connection handed out is live.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from jiji_backend.config.settings import Settings
from jiji_backend.core.exceptions import ConnectionUnavailable
from jiji_backend.jiji_logging import get_logger

logger = get_logger(__name__)

DRIVERNAME = "postgresql+psycopg2"


def build_database_url(settings: Settings) -> URL:
    """SQLAlchemy URL for the configured database. Credentials are escaped, never string-formatted."""
    return URL.create(
        drivername=DRIVERNAME,
        username=settings.postgres_user,
        password=settings.postgres_password,
        host=settings.postgres_host,
        port=settings.postgres_port,
        database=settings.postgres_database,
    )


class ConnectionPool:
    """Process-wide set of reusable database connections, safe for concurrent acquire()."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionPool":
        url = build_database_url(settings)
        engine = create_engine(
            url,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout_sec,
            pool_pre_ping=True,
            connect_args={"connect_timeout": settings.connect_timeout_sec},
        )
        logger.info(
            "pool_created",
            url=url.render_as_string(hide_password=True),
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
        )
        return cls(engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def acquire(self) -> Iterator[Connection]:
        """
        Yield a live connection; it goes back to the pool when the block exits,
        including on error. Raises ConnectionUnavailable if none can be obtained.
        """
        try:
            conn = self._engine.connect()
        except SQLAlchemyError as e:
            logger.warning("pool_acquire_failed", error_class=type(e).__name__)
            raise ConnectionUnavailable() from e
        try:
            yield conn
        finally:
            conn.close()

    def check_connectivity(self) -> None:
        """Acquire and release one connection to prove the database is reachable."""
        with self.acquire():
            pass

    def dispose(self) -> None:
        """Close all pooled connections."""
        self._engine.dispose()
        logger.info("pool_disposed")
