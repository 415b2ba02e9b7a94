"""
Application-level exceptions.

Each runtime error carries the HTTP status and JSON body it maps to, so the
API server translates them at a single exception handler. Configuration errors
are startup-time and fatal; they never reach a client.
"""

from __future__ import annotations

from typing import Any, Sequence


class JijiError(Exception):
    """Base class for all Jiji backend errors."""

    status_code: int = 500
    message: str = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_content(self) -> dict[str, Any]:
        """JSON body returned to the client."""
        return {"message": self.message}


# --- Startup ---


class ConfigurationError(JijiError):
    """Process configuration is unusable; the server must not start."""


class ConfigurationMissing(ConfigurationError):
    """One or more required environment variables are unset or empty."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"missing required environment variables: {','.join(self.missing)}")


class ConfigurationInvalid(ConfigurationError):
    """An environment variable is set but cannot be parsed."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"invalid value for {name}: {value!r}")


# --- Request handling ---


class MissingIdentity(JijiError):
    """The x-userid header is absent or empty."""

    status_code = 401
    message = "Missing x-userId header"


class InvalidBody(JijiError):
    """The request body does not match the ask schema."""

    status_code = 400
    message = "Invalid request body"

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = [e for e in errors if e] or ["Unknown error"]
        super().__init__()

    def to_content(self) -> dict[str, Any]:
        return {"message": self.message, "errors": self.errors[0]}


class ConnectionUnavailable(JijiError):
    """The pool could not hand out a live database connection."""

    status_code = 500
    message = "Failed to connect to the database"


class InternalFailure(JijiError):
    """Unclassified failure; the cause is logged, never returned."""

    status_code = 500

    def to_content(self) -> dict[str, Any]:
        return {"message": self.message, "error": "Internal server error"}
