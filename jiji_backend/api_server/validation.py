"""
Request validation for the ask endpoint.

Pure functions over headers and a decoded JSON payload. Failures raise
MissingIdentity or InvalidBody; nothing here touches the database.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from jiji_backend.core.exceptions import InvalidBody, MissingIdentity

IDENTITY_HEADER = "x-userid"


class AskBody(BaseModel):
    """POST /api/v1/ask-jiji body: a single non-empty query string."""

    query: StrictStr

    @field_validator("query")
    @classmethod
    def _query_not_empty(cls, value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError("string_too_short", "Query cannot be empty")
        return value


class AskRequest(BaseModel):
    """Validated request envelope. Built per request, never mutated."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    query: str


def validate_identity(headers: Mapping[str, str]) -> str:
    """
    Return the x-userid value as sent (header name matched case-insensitively)
    or raise MissingIdentity. Blank values count as missing.
    """
    for key, value in headers.items():
        if key.lower() == IDENTITY_HEADER and value and value.strip():
            return value
    raise MissingIdentity()


def parse_query_body(payload: Any) -> AskBody:
    """Validate a decoded JSON payload; raise InvalidBody with every message, first one reported."""
    try:
        return AskBody.model_validate(payload)
    except ValidationError as e:
        raise InvalidBody([err["msg"] for err in e.errors()]) from e
