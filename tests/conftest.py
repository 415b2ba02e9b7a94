"""
Pytest fixtures for Jiji tests. Pools are real ConnectionPools over SQLite files
in tmp_path so tests run without PostgreSQL.
"""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine

VALID_ENV = {
    "POSTGRES_HOST": "db.internal",
    "POSTGRES_PORT": "5432",
    "POSTGRES_USER": "jiji",
    "POSTGRES_DATABASE": "jiji",
    "POSTGRES_PASSWORD": "s3cret",
}


@pytest.fixture
def reachable_pool(tmp_path):
    """Pool over a writable SQLite file; every acquire() succeeds."""
    from jiji_backend.database import ConnectionPool

    engine = create_engine(
        f"sqlite:///{tmp_path / 'jiji.db'}",
        connect_args={"check_same_thread": False},
        pool_pre_ping=True,
    )
    pool = ConnectionPool(engine)
    yield pool
    pool.dispose()


@pytest.fixture
def unreachable_pool(tmp_path):
    """Pool over a SQLite path whose directory does not exist; every acquire() fails."""
    from jiji_backend.database import ConnectionPool

    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'jiji.db'}")
    pool = ConnectionPool(engine)
    yield pool
    pool.dispose()


@pytest.fixture
def client(reachable_pool):
    """FastAPI TestClient with the reachable pool injected."""
    from fastapi.testclient import TestClient

    from jiji_backend.api_server.server import create_app

    with TestClient(create_app(pool=reachable_pool)) as c:
        yield c


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every POSTGRES_* variable and stop the project .env from filling them back in."""
    for name in VALID_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("jiji_backend.config.settings.load_jiji_env", lambda: None)
    return monkeypatch
