"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn jiji_backend.api_server.app:app --host 0.0.0.0 --port 3000
Settings are resolved and the pool is built when the app starts, not on import.
"""

from jiji_backend.api_server.server import create_app

app = create_app()

__all__ = ["app"]
