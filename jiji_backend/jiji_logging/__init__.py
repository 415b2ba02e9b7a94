"""
Structured logging for the Jiji backend.

JSON logs with timestamp, event_type and request context.
Use get_logger() in all modules.
"""

from jiji_backend.jiji_logging.logger import get_logger

__all__ = ["get_logger"]
