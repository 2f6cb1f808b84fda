"""
Artsy GraphQL client for executing compiled artwork queries.

This module provides a thin async client that posts GraphQL documents
to the Artsy catalog with the deployment's access credentials.
"""

import logging

import httpx

from models import CompiledQuery

logger = logging.getLogger(__name__)


class ArtsyCatalogClient:
    """
    ``CatalogTransport`` that POSTs GraphQL documents over HTTPS.

    Each ``execute()`` call opens and closes its own ``httpx.AsyncClient``,
    so concurrent requests never share connection state.

    Usage:
        client = ArtsyCatalogClient(api_url, access_token, user_id)
        response = await client.execute(document)
    """

    def __init__(
        self,
        api_url: str,
        access_token: str,
        user_id: str,
        timeout_seconds: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the catalog client.

        Args:
            api_url: GraphQL endpoint URL.
            access_token: Value for the ``x-access-token`` header.
            user_id: Value for the ``x-user-id`` header.
            timeout_seconds: Connect, read, write and pool timeout for each
                network operation. The overall deadline is enforced by the
                caller.
            transport: Optional httpx transport (tests pass a ``MockTransport``).
        """
        self.api_url = api_url
        self._access_token = access_token
        self._user_id = user_id
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-access-token": self._access_token,
            "x-user-id": self._user_id,
        }

    async def execute(self, document: CompiledQuery) -> httpx.Response:
        """
        Execute a compiled query against the catalog.

        Args:
            document: The GraphQL query text and variables.

        Returns:
            The HTTP response with its body already read.
        """
        logger.info("Executing Artsy query: %s", document.query[:500])

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(
                self.api_url,
                json=document.to_payload(),
                headers=self._headers(),
            )

        logger.info("Artsy responded with HTTP %d", response.status_code)
        return response
