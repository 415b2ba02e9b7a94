"""
Application settings and environment configuration.

Responsibilities:
- Validate required database settings; report every missing name at once.
- Provide defaults for optional ones (HTTP port, pool sizing, timeouts).
- Expose a frozen Settings object for the connection pool and the server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from jiji_backend.config.env import REQUIRED_DATABASE_VARS, find_missing, load_jiji_env, read_env
from jiji_backend.core.exceptions import ConfigurationInvalid, ConfigurationMissing

DEFAULT_PORT = 3000
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_POOL_SIZE = 5
DEFAULT_MAX_OVERFLOW = 10
DEFAULT_POOL_TIMEOUT_SEC = 30.0
DEFAULT_CONNECT_TIMEOUT_SEC = 10


@dataclass(frozen=True)
class Settings:
    """Resolved process configuration."""

    postgres_host: str
    postgres_port: int
    postgres_user: str
    postgres_database: str
    postgres_password: str
    api_host: str = DEFAULT_API_HOST
    port: int = DEFAULT_PORT
    pool_size: int = DEFAULT_POOL_SIZE
    max_overflow: int = DEFAULT_MAX_OVERFLOW
    pool_timeout_sec: float = DEFAULT_POOL_TIMEOUT_SEC
    connect_timeout_sec: int = DEFAULT_CONNECT_TIMEOUT_SEC

    def __repr__(self) -> str:
        return (
            f"Settings(postgres_host={self.postgres_host!r}, postgres_port={self.postgres_port}, "
            f"postgres_user={self.postgres_user!r}, postgres_database={self.postgres_database!r}, "
            f"postgres_password='***', api_host={self.api_host!r}, port={self.port})"
        )


def _int_env(name: str, default: int, environ: Mapping[str, str] | None) -> int:
    raw = read_env(name, environ)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationInvalid(name, raw) from e


def _float_env(name: str, default: float, environ: Mapping[str, str] | None) -> float:
    raw = read_env(name, environ)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationInvalid(name, raw) from e


def get_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Return the current application settings.

    environ defaults to os.environ after loading the project .env. Raises
    ConfigurationMissing listing every required POSTGRES_* name that is unset or
    empty, and ConfigurationInvalid for unparseable numbers.
    """
    if environ is None:
        load_jiji_env()
    missing = find_missing(REQUIRED_DATABASE_VARS, environ)
    if missing:
        raise ConfigurationMissing(missing)

    return Settings(
        postgres_host=read_env("POSTGRES_HOST", environ),
        postgres_port=_int_env("POSTGRES_PORT", 0, environ),
        postgres_user=read_env("POSTGRES_USER", environ),
        postgres_database=read_env("POSTGRES_DATABASE", environ),
        postgres_password=read_env("POSTGRES_PASSWORD", environ),
        api_host=read_env("API_HOST", environ) or DEFAULT_API_HOST,
        port=_int_env("PORT", DEFAULT_PORT, environ),
        pool_size=_int_env("POSTGRES_POOL_SIZE", DEFAULT_POOL_SIZE, environ),
        max_overflow=_int_env("POSTGRES_MAX_OVERFLOW", DEFAULT_MAX_OVERFLOW, environ),
        pool_timeout_sec=_float_env("POSTGRES_POOL_TIMEOUT", DEFAULT_POOL_TIMEOUT_SEC, environ),
        connect_timeout_sec=_int_env("POSTGRES_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT_SEC, environ),
    )
