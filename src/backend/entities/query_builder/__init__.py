"""Query Builder package for compiling filters into GraphQL."""

from .builder import build_query, format_value

__all__ = ["build_query", "format_value"]
