"""
Search API routes.

This module provides the natural-language artwork search endpoint:
1. Validates the request body (``query`` and optional ``after`` cursor)
2. Runs the search pipeline with per-request clients
3. Answers with the canonical result or ``{"error": ...}``
"""

import json
import logging
import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.dependencies import get_pipeline_clients
from entities.search_controller.pipeline import (
    INVALID_QUERY_MESSAGE,
    parse_search_request,
    process_search,
)
from entities.workflow.clients import PipelineClients
from models import ErrorKind, SearchFailure

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search", tags=["search"])


def _error_response(failure: SearchFailure) -> JSONResponse:
    """Render a ``SearchFailure`` as an ``{"error": ...}`` response."""
    return JSONResponse(status_code=failure.status_code, content={"error": failure.message})


def _sanitized_error_response(error: Exception) -> JSONResponse:
    """Build a sanitized 500 payload with a correlation ID.

    Logs the full exception server-side and returns a generic message
    to the client so internal details are never leaked.
    """
    correlation_id = uuid.uuid4().hex[:12]
    logger.error("Search handler error [%s]: %s", correlation_id, error, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "An internal server error occurred",
            "correlation_id": correlation_id,
        },
    )


@router.post("")
async def search_artworks(
    request: Request,
    clients: PipelineClients | SearchFailure = Depends(get_pipeline_clients),
) -> JSONResponse:
    """Search Artsy for artworks matching a natural-language description.

    Body: ``{"query": "red paintings by picasso", "after": "<endCursor>"}``
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _error_response(
            SearchFailure(kind=ErrorKind.INPUT_VALIDATION, message=INVALID_QUERY_MESSAGE)
        )

    parsed = parse_search_request(payload)
    if isinstance(parsed, SearchFailure):
        return _error_response(parsed)

    if isinstance(clients, SearchFailure):
        return _error_response(clients)

    try:
        result = await process_search(parsed, clients)
    except (ValueError, RuntimeError, OSError, TypeError) as e:
        return _sanitized_error_response(e)

    if isinstance(result, SearchFailure):
        return _error_response(result)
    return JSONResponse(content=result.to_response())
