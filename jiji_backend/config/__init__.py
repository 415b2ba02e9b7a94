"""
Configuration management for the Jiji backend.

Loads and validates settings from environment variables and the optional
project .env file. Exposes a single source of truth for service configuration.
"""

from jiji_backend.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
