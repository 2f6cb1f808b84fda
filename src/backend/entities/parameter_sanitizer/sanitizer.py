"""Pure parameter sanitization logic.

Turns whatever the model extracted into a non-empty ``FilterSpec`` that
is anchored by at least one primary field. No I/O, no framework
dependencies, suitable for direct unit testing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from models import (
    FILTER_FIELDS,
    PRIMARY_FILTER_FIELDS,
    ExtractionFailed,
    ExtractionResult,
    FilterSpec,
)

logger = logging.getLogger(__name__)


def is_empty_value(value: Any) -> bool:  # noqa: ANN401
    """Check whether an extracted value carries no information.

    ``None``, empty sequences and blank strings are empty. ``False`` and
    ``0`` are *not* empty: they are deliberate values.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sequence):
        return len(value) == 0
    return False


def _is_truthy(value: Any) -> bool:  # noqa: ANN401
    """Check whether a surviving value could constrain a search."""
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def keyword_fallback(raw_query: str) -> FilterSpec:
    """Return the raw-keyword filter used whenever extraction is unusable."""
    return {"keyword": raw_query}


def drop_empty_fields(arguments: Mapping[str, Any]) -> dict[str, Any]:
    """Remove empty and unrecognised fields from extracted arguments.

    Surviving values are kept exactly as extracted.

    Args:
        arguments: Raw tool-call arguments.

    Returns:
        A new dict holding only recognised, non-empty fields.
    """
    cleaned: dict[str, Any] = {}
    for name, value in arguments.items():
        if name not in FILTER_FIELDS:
            logger.info("Ignoring unrecognised search argument '%s'", name)
            continue
        if is_empty_value(value):
            continue
        cleaned[name] = value
    return cleaned


def sanitize_parameters(extraction: ExtractionResult, raw_query: str) -> FilterSpec:
    """Derive the filter specification for one search.

    1. Failed extraction → keyword fallback.
    2. Drop null, empty-sequence and blank-string fields.
    3. Nothing (truthy) left → keyword fallback.
    4. No primary field left → add ``keyword = raw_query`` to the rest.

    Args:
        extraction: Result of the intent extraction step.
        raw_query: The user's original request text.

    Returns:
        A non-empty ``FilterSpec`` containing at least one primary field.
    """
    if isinstance(extraction, ExtractionFailed):
        logger.info("Extraction failed (%s); searching by raw keyword", extraction.reason)
        return keyword_fallback(raw_query)

    cleaned = drop_empty_fields(extraction.arguments)

    if not cleaned or not any(_is_truthy(v) for v in cleaned.values()):
        logger.warning("Model returned empty or null args, falling back to keyword.")
        return keyword_fallback(raw_query)

    if not any(name in cleaned for name in PRIMARY_FILTER_FIELDS):
        logger.info(
            "Adding query as keyword fallback since no primary field survived: %s",
            sorted(cleaned),
        )
        cleaned["keyword"] = raw_query

    return FilterSpec(**cleaned)  # type: ignore[typeddict-item]

