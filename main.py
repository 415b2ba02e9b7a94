"""
Main entrypoint: resolve configuration, build the connection pool, serve the API.

Exits with status 1 before binding the port when any of POSTGRES_HOST,
POSTGRES_PORT, POSTGRES_USER, POSTGRES_DATABASE, POSTGRES_PASSWORD is missing.

Env: PORT (default 3000), API_HOST (default 0.0.0.0), LOG_LEVEL, LOG_FORMAT, POSTGRES_*.

Without this script: uvicorn jiji_backend.api_server.app:app --port 3000
"""

import os
import sys

# Configure structured JSON logging before other imports that may log
from jiji_backend.jiji_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Validate settings, then run the FastAPI server in the main thread."""
    from jiji_backend.config import get_settings
    from jiji_backend.core.exceptions import ConfigurationInvalid, ConfigurationMissing

    try:
        settings = get_settings()
    except ConfigurationMissing as e:
        logger.error("missing_required_environment_variables", missing=e.missing)
        sys.exit(1)
    except ConfigurationInvalid as e:
        logger.error("invalid_configuration", variable=e.name, error=str(e))
        sys.exit(1)

    from jiji_backend.api_server.server import create_app
    from jiji_backend.database import ConnectionPool
    import uvicorn

    pool = ConnectionPool.from_settings(settings)
    app = create_app(pool=pool, settings=settings)

    logger.info("server_starting", host=settings.api_host, port=settings.port)
    try:
        uvicorn.run(app, host=settings.api_host, port=settings.port, log_level=os.getenv("LOG_LEVEL", "info").lower())
    finally:
        pool.dispose()


if __name__ == "__main__":
    main()
