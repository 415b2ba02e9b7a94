"""
Database layer: the PostgreSQL connection pool.

No schema or queries live here; the pool is only checked for liveness.
"""

from jiji_backend.database.connection import ConnectionPool, build_database_url

__all__ = ["ConnectionPool", "build_database_url"]
