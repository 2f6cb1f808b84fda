"""Pipeline client container for dependency injection.

``PipelineClients`` bundles every I/O dependency and tuning value the
search pipeline needs. Production code constructs it via
``create_pipeline_clients()`` from ``Settings``; tests construct it from
in-memory fakes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from config.settings import Settings
from entities.intent_extractor.extractor import DEFAULT_EXTRACTION_TIMEOUT_SECONDS, load_prompt
from entities.result_normalizer.normalizer import DEFAULT_CATALOG_TIMEOUT_SECONDS
from entities.shared.clients import (
    ArtsyCatalogClient,
    OpenAIToolCaller,
    create_azure_credential,
    create_openai_client,
)
from entities.shared.protocols import (
    CatalogTransport,
    NoOpReporter,
    ProgressReporter,
    ToolCallingModel,
)
from models import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class PipelineClients:
    """Immutable bundle of all I/O dependencies for the search pipeline.

    All I/O fields use Protocol types, enabling full dependency injection.
    Production code passes real OpenAI / httpx adapters; tests pass fakes.

    Args:
        intent_model: Tool-calling model used for intent extraction.
        catalog: Transport that executes GraphQL documents.
        extraction_prompt: System prompt for the intent extractor.
        page_size: Artworks requested per page.
        extraction_timeout_seconds: Deadline for the model call.
        catalog_timeout_seconds: Deadline for the catalog call.
        reporter: Progress reporter for UI updates.
    """

    intent_model: ToolCallingModel
    catalog: CatalogTransport
    extraction_prompt: str
    page_size: int = DEFAULT_PAGE_SIZE
    extraction_timeout_seconds: float = DEFAULT_EXTRACTION_TIMEOUT_SECONDS
    catalog_timeout_seconds: float = DEFAULT_CATALOG_TIMEOUT_SECONDS
    reporter: ProgressReporter = NoOpReporter()

    async def aclose(self) -> None:
        """Close the underlying HTTP clients of the production adapters.

        Fakes without an ``aclose`` coroutine are left alone.
        """
        for resource in (self.intent_model, self.catalog):
            close = getattr(resource, "aclose", None)
            if close is not None:
                await close()


def create_pipeline_clients(
    settings: Settings,
    reporter: ProgressReporter | None = None,
) -> PipelineClients:
    """Build a ``PipelineClients`` from application ``Settings``.

    Validates that every required credential is present, loads the
    extraction prompt from disk and wraps the OpenAI and httpx clients in
    Protocol adapters. No module-level singletons are created; each call
    produces a fresh, self-contained bundle that the caller owns and must
    release with ``PipelineClients.aclose()``.

    Args:
        settings: Centralised application configuration.
        reporter: Optional progress reporter.  Defaults to ``NoOpReporter``.

    Returns:
        Fully-initialised ``PipelineClients`` ready for ``process_search()``.

    Raises:
        ConfigurationError: If required settings are missing.
    """
    missing = settings.missing_credentials()
    if missing:
        raise ConfigurationError(missing)

    credential = create_azure_credential(settings)
    intent_model = OpenAIToolCaller(
        client=create_openai_client(settings, credential),
        model=settings.intent_model,
        credential=credential,
    )
    catalog = ArtsyCatalogClient(
        api_url=settings.artsy_api_url,
        access_token=settings.artsy_access_token,
        user_id=settings.artsy_user_id,
        timeout_seconds=settings.catalog_timeout_seconds,
    )

    return PipelineClients(
        intent_model=intent_model,
        catalog=catalog,
        extraction_prompt=load_prompt(),
        page_size=settings.search_page_size,
        extraction_timeout_seconds=settings.extraction_timeout_seconds,
        catalog_timeout_seconds=settings.catalog_timeout_seconds,
        reporter=reporter or NoOpReporter(),
    )
