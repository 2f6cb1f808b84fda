"""Centralized application settings loaded from environment variables.

All configuration is defined once here. Other modules should import
``get_settings()`` rather than calling ``os.getenv()`` directly.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ARTSY_API_URL = "https://metaphysics-production.artsy.net/v2"


class Settings(BaseSettings):
    """Application-wide configuration backed by environment variables.

    Field names are **lowercased** versions of the env-var names.
    ``pydantic-settings`` maps them automatically (case-insensitive).

    Example::

        settings = Settings()  # reads .env + real env
        endpoint = settings.artsy_api_url
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- Artsy catalog -----------------------------------------------------

    artsy_api_url: str = DEFAULT_ARTSY_API_URL
    """GraphQL endpoint of the Artsy catalog."""

    artsy_access_token: str = ""
    """Value sent in the ``x-access-token`` header."""

    artsy_user_id: str = ""
    """Value sent in the ``x-user-id`` header."""

    # -- Language model ----------------------------------------------------

    openai_api_key: str = ""
    """API key for the public OpenAI endpoint."""

    openai_base_url: str | None = None
    """Optional OpenAI-compatible base URL (proxies, local gateways)."""

    azure_openai_endpoint: str = ""
    """Azure OpenAI resource endpoint. Takes precedence over ``openai_api_key``."""

    azure_openai_api_version: str = "2024-06-01"
    """Azure OpenAI REST API version."""

    azure_openai_api_key: str | None = None
    """Azure OpenAI key (None → Entra ID via ``DefaultAzureCredential``)."""

    azure_client_id: str | None = None
    """Managed-identity client ID (None → system-assigned)."""

    intent_model: str = "gpt-4o-mini"
    """Model name (or Azure deployment name) used for intent extraction."""

    # -- Pipeline tuning ---------------------------------------------------

    search_page_size: int = 20
    """Number of artworks requested per page."""

    extraction_timeout_seconds: float = 10.0
    """Deadline for the intent-extraction model call."""

    catalog_timeout_seconds: float = 15.0
    """Overall deadline for the catalog GraphQL call, response body included."""

    # -- Operational -------------------------------------------------------

    cors_allow_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    """Origins allowed to call the API from a browser."""

    log_level: str = "INFO"
    """Root log level for the API process."""

    def missing_credentials(self) -> list[str]:
        """Return the env-var names of required settings that are empty.

        The catalog needs its URL and both credential headers; the model
        needs either an OpenAI key or an Azure OpenAI endpoint.

        Returns:
            Upper-case env-var names, in declaration order.
        """
        missing: list[str] = []
        if not self.artsy_api_url:
            missing.append("ARTSY_API_URL")
        if not self.artsy_access_token:
            missing.append("ARTSY_ACCESS_TOKEN")
        if not self.artsy_user_id:
            missing.append("ARTSY_USER_ID")
        if not (self.openai_api_key or self.azure_openai_endpoint):
            missing.append("OPENAI_API_KEY")
        return missing


def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    Uses ``lru_cache`` semantics via a module-level singleton so the
    ``.env`` file is read at most once per process.

    Returns:
        The global ``Settings`` object.
    """
    return _settings


_settings = Settings()
