"""
Intent Extractor - turns a free-text request into search tool arguments.

This module asks a function-calling language model to fill the
artwork search tool from the user's request.
"""

from .extractor import extract_intent, load_prompt
from .tool_schema import SEARCH_TOOL_NAME, build_search_tool

__all__ = ["SEARCH_TOOL_NAME", "build_search_tool", "extract_intent", "load_prompt"]
