"""Search pipeline: single-function entry point for artwork searches.

``process_search()`` runs the four stages strictly in order:
intent extraction, parameter sanitization, query compilation and
result normalization. All routing is plain if/else; the only awaits
are the model call and the catalog call.
"""

from __future__ import annotations

import logging
from typing import Any

from entities.intent_extractor.extractor import extract_intent
from entities.parameter_sanitizer.sanitizer import sanitize_parameters
from entities.query_builder.builder import build_query
from entities.result_normalizer.normalizer import fetch_artworks
from entities.workflow.clients import PipelineClients
from models import (
    ErrorKind,
    PageRequest,
    SearchFailure,
    SearchRequest,
    SearchResult,
)

logger = logging.getLogger(__name__)

INVALID_QUERY_MESSAGE = "Invalid or empty query provided"
INVALID_CURSOR_MESSAGE = "Invalid pagination cursor provided"


def _input_failure(message: str) -> SearchFailure:
    return SearchFailure(kind=ErrorKind.INPUT_VALIDATION, message=message)


def parse_search_request(payload: Any) -> SearchRequest | SearchFailure:  # noqa: ANN401
    """Validate a decoded request body.

    ``query`` must be a string that is not blank; ``after``, when
    present and not null, must be a string. A blank ``after`` is
    treated as no cursor.

    Args:
        payload: The decoded JSON body.

    Returns:
        A ``SearchRequest``, or an input-validation ``SearchFailure``.
    """
    if not isinstance(payload, dict):
        return _input_failure(INVALID_QUERY_MESSAGE)

    query = payload.get("query")
    if not isinstance(query, str) or not query.strip():
        return _input_failure(INVALID_QUERY_MESSAGE)

    after = payload.get("after")
    if after is not None and not isinstance(after, str):
        return _input_failure(INVALID_CURSOR_MESSAGE)

    return SearchRequest(query=query, after=after if after and after.strip() else None)


async def process_search(
    request: SearchRequest,
    clients: PipelineClients,
) -> SearchResult | SearchFailure:
    """Run one search through the full pipeline.

    Extraction problems never fail the request: the sanitizer falls
    back to a raw-keyword search. Only catalog transport and GraphQL
    errors come back as ``SearchFailure``.

    Args:
        request: The validated search request.
        clients: I/O dependencies and tuning values.

    Returns:
        ``SearchResult`` on success, ``SearchFailure`` otherwise.
    """
    if not request.query.strip():
        return _input_failure(INVALID_QUERY_MESSAGE)

    logger.info(
        "Processing search: %s (cursor=%s)",
        request.query[:100],
        "yes" if request.after else "no",
    )

    extraction = await extract_intent(
        request.query,
        clients.intent_model,
        system_prompt=clients.extraction_prompt,
        timeout_seconds=clients.extraction_timeout_seconds,
        reporter=clients.reporter,
    )

    clients.reporter.step_start("Sanitizing parameters")
    filters = sanitize_parameters(extraction, request.query)
    clients.reporter.step_end("Sanitizing parameters")

    clients.reporter.step_start("Compiling query")
    document = build_query(filters, PageRequest(size=clients.page_size, cursor=request.after))
    clients.reporter.step_end("Compiling query")

    logger.info("Search filters: %s", dict(filters))

    result = await fetch_artworks(
        document,
        clients.catalog,
        clients.reporter,
        timeout_seconds=clients.catalog_timeout_seconds,
    )

    if isinstance(result, SearchFailure):
        logger.error("Search failed (%s): %s", result.kind.value, result.message)
    else:
        connection = result.artworks_connection
        logger.info(
            "Search returned %d artwork(s), has_next_page=%s",
            len(connection.edges),
            connection.page_info.has_next_page,
        )
    return result
