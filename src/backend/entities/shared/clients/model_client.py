"""
OpenAI function-calling client used for intent extraction.

Wraps ``AsyncOpenAI`` / ``AsyncAzureOpenAI`` so the extractor only ever
sees the ``ToolCallingModel`` protocol.
"""

import logging
from typing import Any

from azure.identity.aio import DefaultAzureCredential, get_bearer_token_provider
from openai import AsyncAzureOpenAI, AsyncOpenAI

from config.settings import Settings
from entities.shared.protocols import ToolInvocation

logger = logging.getLogger(__name__)

_COGNITIVE_SERVICES_SCOPE = "https://cognitiveservices.azure.com/.default"


def create_azure_credential(settings: Settings) -> DefaultAzureCredential | None:
    """
    Create the Entra ID credential the model client needs, if any.

    Only an Azure OpenAI endpoint without an API key authenticates through
    ``DefaultAzureCredential`` (managed identity in Container Apps, CLI
    credentials locally). The caller owns the credential and must close it.

    Args:
        settings: Centralised application configuration.

    Returns:
        A credential, or ``None`` when key-based auth is used.
    """
    if not settings.azure_openai_endpoint or settings.azure_openai_api_key:
        return None

    # Use AZURE_CLIENT_ID for user-assigned managed identity
    if settings.azure_client_id:
        return DefaultAzureCredential(managed_identity_client_id=settings.azure_client_id)
    return DefaultAzureCredential()


def create_openai_client(
    settings: Settings,
    credential: DefaultAzureCredential | None = None,
) -> AsyncOpenAI:
    """
    Create the async OpenAI client described by *settings*.

    An Azure OpenAI endpoint wins over a plain OpenAI key. Without an
    Azure key, Entra ID tokens are obtained through *credential* (one is
    created when not supplied).

    Args:
        settings: Centralised application configuration.
        credential: Entra ID credential for the keyless Azure path.

    Returns:
        A configured ``AsyncOpenAI`` (or ``AsyncAzureOpenAI``) instance.
    """
    if settings.azure_openai_endpoint:
        if settings.azure_openai_api_key:
            return AsyncAzureOpenAI(
                azure_endpoint=settings.azure_openai_endpoint,
                api_key=settings.azure_openai_api_key,
                api_version=settings.azure_openai_api_version,
                timeout=settings.extraction_timeout_seconds,
            )

        if credential is None:
            credential = create_azure_credential(settings)
        return AsyncAzureOpenAI(
            azure_endpoint=settings.azure_openai_endpoint,
            azure_ad_token_provider=get_bearer_token_provider(
                credential, _COGNITIVE_SERVICES_SCOPE
            ),
            api_version=settings.azure_openai_api_version,
            timeout=settings.extraction_timeout_seconds,
        )

    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.extraction_timeout_seconds,
    )


class OpenAIToolCaller:
    """
    ``ToolCallingModel`` backed by the chat-completions API.

    Every call is a fresh, single-turn conversation; nothing is kept
    between requests.

    Args:
        client: Async OpenAI client.
        model: Model name (deployment name on Azure).
        credential: Entra ID credential behind *client*, closed with it.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        credential: DefaultAzureCredential | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._credential = credential

    async def aclose(self) -> None:
        """Close the HTTP client and the credential session, if any."""
        await self._client.close()
        if self._credential is not None:
            await self._credential.close()

    async def invoke_tools(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        tools: list[dict[str, Any]],
    ) -> list[ToolInvocation]:
        """Run one completion and return the function calls it made."""
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            tools=tools,
            tool_choice="auto",
            temperature=0,
        )

        if not response.choices:
            logger.warning("Model returned no choices")
            return []

        message = response.choices[0].message
        invocations = [
            ToolInvocation(name=call.function.name, arguments=call.function.arguments)
            for call in message.tool_calls or []
            if call.type == "function"
        ]
        if not invocations and message.content:
            logger.info("Model answered in prose: %s", message.content[:200])
        return invocations
