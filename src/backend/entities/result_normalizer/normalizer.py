"""Result normalization logic.

Executes a compiled query against the catalog and turns the response
into the canonical ``SearchResult`` shape. Transport and GraphQL errors
become ``SearchFailure``; a response that merely lacks the expected
structure becomes the canonical empty result.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx

from entities.shared.protocols import CatalogTransport, NoOpReporter, ProgressReporter
from models import (
    ArtworkEdge,
    ArtworksConnection,
    CompiledQuery,
    ErrorKind,
    PageInfo,
    SearchFailure,
    SearchResult,
)

logger = logging.getLogger(__name__)

MAX_DIAGNOSTIC_BODY_CHARS = 2000
DEFAULT_CATALOG_TIMEOUT_SECONDS = 15.0


def _transport_failure(reason: str, detail: str | None = None) -> SearchFailure:
    return SearchFailure(
        kind=ErrorKind.UPSTREAM_TRANSPORT,
        message=f"Failed to fetch from Artsy: {reason}",
        detail=detail,
    )


def _shape_edges(raw: Any) -> list[ArtworkEdge]:  # noqa: ANN401
    """Return the upstream edges, skipping ``null`` and non-object entries."""
    if not isinstance(raw, list):
        return []
    edges = [edge for edge in raw if isinstance(edge, dict)]
    if len(edges) != len(raw):
        logger.warning("Dropped %d malformed edge(s) from Artsy response", len(raw) - len(edges))
    return edges


def _shape_page_info(raw: Any) -> PageInfo:  # noqa: ANN401
    """Return page info with both fields defined."""
    if not isinstance(raw, dict):
        return PageInfo(has_next_page=False, end_cursor=None)
    has_next_page = raw.get("hasNextPage")
    end_cursor = raw.get("endCursor")
    return PageInfo(
        has_next_page=has_next_page if isinstance(has_next_page, bool) else False,
        end_cursor=end_cursor if isinstance(end_cursor, str) else None,
    )


def shape_result(body: Any) -> SearchResult | SearchFailure:  # noqa: ANN401
    """Validate a decoded GraphQL body and shape it.

    Args:
        body: The decoded JSON response body.

    Returns:
        ``SearchFailure`` whenever an ``errors`` collection is present
        (even an empty one), the
        canonical empty result when ``data.artworksConnection`` is
        missing, otherwise the upstream edges and page info.
    """
    if isinstance(body, dict) and body.get("errors") is not None:
        errors_json = json.dumps(body["errors"])
        logger.error("Artsy GraphQL errors: %s", errors_json)
        return SearchFailure(
            kind=ErrorKind.UPSTREAM_PROTOCOL,
            message=f"GraphQL errors: {errors_json}",
            detail=errors_json,
        )

    data = body.get("data") if isinstance(body, dict) else None
    connection = data.get("artworksConnection") if isinstance(data, dict) else None
    if not isinstance(connection, dict):
        logger.warning("Artsy response has no artworksConnection; returning empty result")
        return SearchResult.empty()

    return SearchResult(
        artworks_connection=ArtworksConnection(
            edges=_shape_edges(connection.get("edges")),
            page_info=_shape_page_info(connection.get("pageInfo")),
        )
    )


def normalize_response(response: httpx.Response) -> SearchResult | SearchFailure:
    """Validate the transport status and body of a catalog response.

    Args:
        response: The catalog's HTTP response.

    Returns:
        The shaped result, or a ``SearchFailure`` for a non-2xx status,
        an undecodable body or GraphQL errors.
    """
    if not response.is_success:
        body = response.text[:MAX_DIAGNOSTIC_BODY_CHARS]
        logger.error("Artsy API Error (%d): %s", response.status_code, body)
        return _transport_failure(
            response.reason_phrase or f"HTTP {response.status_code}",
            detail=body,
        )

    try:
        body = response.json()
    except ValueError:
        snippet = response.text[:MAX_DIAGNOSTIC_BODY_CHARS]
        logger.error("Artsy returned a non-JSON body: %s", snippet)
        return SearchFailure(
            kind=ErrorKind.UPSTREAM_PROTOCOL,
            message="Artsy returned a response that is not valid JSON",
            detail=snippet,
        )

    return shape_result(body)


async def fetch_artworks(
    document: CompiledQuery,
    catalog: CatalogTransport,
    reporter: ProgressReporter = NoOpReporter(),
    timeout_seconds: float = DEFAULT_CATALOG_TIMEOUT_SECONDS,
) -> SearchResult | SearchFailure:
    """Execute a compiled query and return the canonical result.

    The whole call, body included, runs under one deadline. Timeouts and
    connection failures are reported as upstream transport failures,
    exactly like a non-2xx status.

    Args:
        document: The compiled GraphQL document.
        catalog: Transport to the catalog endpoint.
        reporter: Progress reporter for UI updates.
        timeout_seconds: Deadline for the catalog call.

    Returns:
        ``SearchResult`` or ``SearchFailure``.
    """
    step_name = "Querying Artsy"
    reporter.step_start(step_name)

    try:
        response = await asyncio.wait_for(catalog.execute(document), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        logger.error("Artsy request exceeded its %.1fs deadline", timeout_seconds)
        return _transport_failure("request timed out")
    except httpx.TimeoutException as exc:
        logger.error("Artsy request timed out: %s", exc)
        return _transport_failure("request timed out", detail=str(exc))
    except httpx.HTTPError as exc:
        logger.error("Artsy request failed: %s", exc)
        return _transport_failure(type(exc).__name__, detail=str(exc))
    finally:
        reporter.step_end(step_name)

    return normalize_response(response)
