"""
API route definitions: the ask endpoint and health checks.

The ask handler runs its checks in a fixed order (identity, body, database)
and raises typed JijiError subclasses; server.py turns them into responses.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from jiji_backend.api_server.validation import AskRequest, parse_query_body, validate_identity
from jiji_backend.core.exceptions import InternalFailure, InvalidBody, JijiError
from jiji_backend.database import ConnectionPool
from jiji_backend.jiji_logging import get_logger

logger = get_logger(__name__)

MOCK_ANSWER = "This is a mock answer from Jiji."
FORM_MEDIA_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

router = APIRouter(prefix="/api/v1", tags=["Ask"])
health_router = APIRouter(tags=["Health"])


class AskResponse(BaseModel):
    """POST /api/v1/ask-jiji response."""

    answer: str = Field(..., description="Answer to the user's query")


def get_pool(request: Request) -> ConnectionPool:
    """Dependency: the app-scoped pool built at startup or injected into create_app()."""
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise InternalFailure("Connection pool not initialized")
    return pool


def _media_type(request: Request) -> str:
    return (request.headers.get("content-type") or "").split(";")[0].strip().lower()


async def _read_payload(request: Request) -> Any:
    """
    Decoded body by content type: JSON (application/json, */*+json) or form
    (urlencoded, multipart). Empty or other content types yield None.
    Undecodable bodies are invalid bodies.
    """
    media_type = _media_type(request)
    if media_type in FORM_MEDIA_TYPES:
        try:
            form = await request.form()
        except StarletteHTTPException as e:
            raise InvalidBody(["Request body is not a valid form"]) from e
        return dict(form)

    if media_type != "application/json" and not media_type.endswith("+json"):
        return None
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise InvalidBody(["Request body is not valid JSON"]) from e


@router.post("/ask-jiji", response_model=AskResponse)
async def ask_jiji(request: Request, pool: ConnectionPool = Depends(get_pool)) -> AskResponse:
    """
    Answer a user query.

    Requires the x-userid header and a body {"query": "<non-empty string>"},
    sent as JSON or as a form.
    A pooled connection is acquired and released to prove the database is
    reachable. The answer is currently a fixed placeholder.
    """
    try:
        user_id = validate_identity(request.headers)
        body = parse_query_body(await _read_payload(request))
        envelope = AskRequest(user_id=user_id, query=body.query)
        logger.info("ask_received", user_id=envelope.user_id, query_length=len(envelope.query))

        await run_in_threadpool(pool.check_connectivity)
        return AskResponse(answer=MOCK_ANSWER)
    except JijiError as e:
        logger.info("ask_rejected", reason=type(e).__name__, status_code=e.status_code)
        raise
    except Exception as e:
        logger.exception("ask_failed", error_class=type(e).__name__)
        raise InternalFailure() from e


@health_router.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@health_router.get("/health/db")
def health_db(pool: ConnectionPool = Depends(get_pool)) -> dict[str, str]:
    """Readiness probe: a connection can be acquired from the pool."""
    pool.check_connectivity()
    return {"status": "ok"}
