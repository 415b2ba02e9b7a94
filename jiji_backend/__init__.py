"""
Jiji backend: HTTP service answering user queries.

Exposes POST /api/v1/ask-jiji over FastAPI, backed by a PostgreSQL
connection pool that is checked for liveness on every request.
"""

__version__ = "0.1.0"
