"""Shared utilities for pipeline stages."""

from .clients import ArtsyCatalogClient, OpenAIToolCaller, create_openai_client
from .protocols import (
    CatalogTransport,
    NoOpReporter,
    ProgressReporter,
    ToolCallingModel,
    ToolInvocation,
)

__all__ = [
    "ArtsyCatalogClient",
    "CatalogTransport",
    "NoOpReporter",
    "OpenAIToolCaller",
    "ProgressReporter",
    "ToolCallingModel",
    "ToolInvocation",
    "create_openai_client",
]
