"""Query builder logic.

Compiles a ``FilterSpec`` and a ``PageRequest`` into a GraphQL document
for Artsy's ``artworksConnection`` field. Filter values are written as
GraphQL literals; page size and cursor travel as variables.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from models import CompiledQuery, FilterSpec, PageRequest

logger = logging.getLogger(__name__)

_GRAPHQL_NAME = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

# Connection arguments owned by pagination; filters may never set them.
_RESERVED_ARGUMENTS = frozenset({"first", "after", "last", "before"})

ARTWORK_NODE_SELECTION = (
    "internalID title slug date medium "
    "artists { name slug } "
    'image { url(version: "large") aspectRatio }'
)

PAGE_INFO_SELECTION = "pageInfo { hasNextPage endCursor }"


def quote_string(text: str) -> str:
    """Render *text* as a GraphQL string literal.

    Every escape JSON emits (``\\"``, ``\\\\``, ``\\n``, ``\\uXXXX`` ...) is
    also a valid GraphQL escape, so JSON encoding yields a well-formed
    literal. Non-ASCII text is written as ``\\u`` escapes, so lone
    surrogates never reach the request body unencoded.
    """
    return json.dumps(text)


def format_value(value: Any) -> str:  # noqa: ANN401
    """Render a filter value as a GraphQL input literal.

    Strings are quoted and escaped, booleans and finite numbers are
    written bare, lists and tuples become bracketed lists with each
    element rendered by the same rules. Anything else is quoted as text
    so the document stays well-formed.

    Args:
        value: A FilterSpec value.

    Returns:
        GraphQL literal text.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value) if math.isfinite(value) else quote_string(str(value))
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return quote_string(str(value))


def _is_empty(value: Any) -> bool:  # noqa: ANN401
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def build_filter_arguments(filters: Mapping[str, Any]) -> list[str]:
    """Render each non-empty filter as a ``name: literal`` argument.

    Args:
        filters: The sanitized filter specification.

    Returns:
        Argument strings in the filter's own order.
    """
    arguments: list[str] = []
    for name, value in filters.items():
        if _is_empty(value):
            continue
        if not _GRAPHQL_NAME.match(name) or name in _RESERVED_ARGUMENTS:
            logger.warning("Skipping filter with unusable argument name %r", name)
            continue
        arguments.append(f"{name}: {format_value(value)}")
    return arguments


def build_query(filters: FilterSpec, page: PageRequest) -> CompiledQuery:
    """Compile a filter specification into an ``artworksConnection`` query.

    ``$size`` is always declared and bound to ``page.size``. ``$after`` is
    declared, passed to the connection and bound only when ``page.cursor``
    is set. ``pageInfo`` is requested on every page.

    Args:
        filters: A non-empty, sanitized filter specification.
        page: Page size and optional opaque cursor.

    Returns:
        A ``CompiledQuery`` with query text and variable bindings.

    Raises:
        ValueError: If *filters* has no non-empty field.
    """
    filter_arguments = build_filter_arguments(filters)
    if not filter_arguments:
        raise ValueError("Cannot compile a query from an empty filter specification")

    variable_definitions = ["$size: Int"]
    connection_arguments = ["first: $size"]
    variables: dict[str, Any] = {"size": page.size}

    if page.cursor is not None:
        variable_definitions.append("$after: String")
        connection_arguments.append("after: $after")
        variables["after"] = page.cursor

    connection_arguments.extend(filter_arguments)

    query = (
        f"query SearchArtworks({', '.join(variable_definitions)}) {{\n"
        f"  artworksConnection({', '.join(connection_arguments)}) {{\n"
        f"    edges {{ node {{ {ARTWORK_NODE_SELECTION} }} }}\n"
        f"    {PAGE_INFO_SELECTION}\n"
        "  }\n"
        "}"
    )

    logger.info(
        "Compiled artworks query with %d filter(s)%s",
        len(filter_arguments),
        " (next page)" if page.cursor is not None else "",
    )
    return CompiledQuery(query=query, variables=variables)
