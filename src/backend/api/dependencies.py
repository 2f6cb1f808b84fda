"""
FastAPI dependencies for configuration and pipeline wiring.
"""

import logging

from fastapi import Depends

from config.settings import Settings, get_settings
from entities.workflow.clients import PipelineClients, create_pipeline_clients
from models import ConfigurationError, ErrorKind, SearchFailure

logger = logging.getLogger(__name__)

CONFIGURATION_ERROR_MESSAGE = "The search service is not configured. Please try again later."

# Clients built from the current settings, shared by every request
_pipeline_clients: PipelineClients | None = None
_pipeline_settings: Settings | None = None


def get_app_settings() -> Settings:
    """Return the process-wide settings."""
    return get_settings()


async def get_pipeline_clients(
    settings: Settings = Depends(get_app_settings),
) -> PipelineClients | SearchFailure:
    """
    Return the pipeline clients for *settings*, building them on first use.

    The model client and its credential hold connection pools, so one
    bundle is shared across requests and released by
    ``close_pipeline_clients()`` at shutdown. A different settings object
    replaces (and closes) the cached bundle.

    Missing credentials are reported as a configuration ``SearchFailure``
    rather than raised, so the route decides when to surface it (after
    input validation, before any external call).
    """
    global _pipeline_clients, _pipeline_settings

    if _pipeline_clients is not None and settings is _pipeline_settings:
        return _pipeline_clients

    try:
        clients = create_pipeline_clients(settings)
    except ConfigurationError as exc:
        logger.error("Search pipeline misconfigured: %s", exc)
        return SearchFailure(
            kind=ErrorKind.CONFIGURATION,
            message=CONFIGURATION_ERROR_MESSAGE,
            detail=str(exc),
        )

    await close_pipeline_clients()
    _pipeline_clients, _pipeline_settings = clients, settings
    logger.info("Pipeline clients created (model=%s)", settings.intent_model)
    return clients


async def close_pipeline_clients() -> None:
    """Close the cached pipeline clients, if any."""
    global _pipeline_clients, _pipeline_settings

    clients = _pipeline_clients
    _pipeline_clients, _pipeline_settings = None, None
    if clients is not None:
        await clients.aclose()
        logger.info("Pipeline clients closed")
