"""
Environment variable loading for the Jiji backend.

- POSTGRES_HOST, POSTGRES_PORT, POSTGRES_USER, POSTGRES_DATABASE, POSTGRES_PASSWORD: required
- PORT: HTTP port (default 3000)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

# Project root: config is jiji_backend/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_ROOT = _CONFIG_DIR.parent.parent
_ENV_PATH = _ROOT / ".env"

REQUIRED_DATABASE_VARS = (
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_USER",
    "POSTGRES_DATABASE",
    "POSTGRES_PASSWORD",
)


def load_jiji_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides the real env."""
    load_dotenv(_ENV_PATH, override=False)


def read_env(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the stripped value of name, or "" when unset."""
    source = os.environ if environ is None else environ
    return (source.get(name) or "").strip()


def find_missing(names: tuple[str, ...], environ: Mapping[str, str] | None = None) -> list[str]:
    """Names from `names` that are unset or empty, in declaration order."""
    return [name for name in names if not read_env(name, environ)]
