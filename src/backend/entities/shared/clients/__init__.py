"""Shared clients for the model and catalog services."""

from .catalog_client import ArtsyCatalogClient
from .model_client import OpenAIToolCaller, create_azure_credential, create_openai_client

__all__ = [
    "ArtsyCatalogClient",
    "OpenAIToolCaller",
    "create_azure_credential",
    "create_openai_client",
]
