"""
Search Controller - entry point for natural-language artwork searches.

This module validates inbound requests and runs them through the
extraction, sanitization, compilation and normalization stages.
"""

from .pipeline import parse_search_request, process_search

__all__ = ["parse_search_request", "process_search"]
