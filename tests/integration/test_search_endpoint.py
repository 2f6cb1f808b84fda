"""Integration tests for the search HTTP endpoint.

Drives the FastAPI app through ``httpx.AsyncClient`` + ``ASGITransport``
with the pipeline-clients dependency overridden by in-memory fakes.
No credentials, no network.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
from httpx import ASGITransport

from api.dependencies import CONFIGURATION_ERROR_MESSAGE, get_app_settings, get_pipeline_clients
from api.main import app
from config.settings import Settings
from entities.workflow.clients import PipelineClients
from tests.conftest import (
    ARTWORK_EDGE,
    FakeCatalog,
    FakeToolCallingModel,
    artsy_body,
    make_clients,
)

# ── Fixtures ─────────────────────────────────────────────────────────────


@pytest.fixture
async def client() -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the app; clears overrides afterwards."""
    transport = ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def _use_clients(clients: PipelineClients) -> None:
    """Serve *clients* to the search route instead of building real ones."""
    app.dependency_overrides[get_pipeline_clients] = lambda: clients


# ── POST /api/search ─────────────────────────────────────────────────────


class TestSearchEndpointSuccess:
    """Requests that reach the catalog."""

    async def test_returns_canonical_result(self, client: httpx.AsyncClient) -> None:
        catalog = FakeCatalog(body=artsy_body(has_next_page=True, end_cursor="YXJyYXk6MTk="))
        _use_clients(
            make_clients(
                model=FakeToolCallingModel.returning('{"artistIDs": ["pablo-picasso"]}'),
                catalog=catalog,
            )
        )

        response = await client.post("/api/search", json={"query": "picasso"})

        assert response.status_code == 200
        assert response.json() == {
            "artworksConnection": {
                "edges": [ARTWORK_EDGE],
                "pageInfo": {"hasNextPage": True, "endCursor": "YXJyYXk6MTk="},
            }
        }
        assert len(catalog.calls) == 1

    async def test_cursor_is_forwarded(self, client: httpx.AsyncClient) -> None:
        catalog = FakeCatalog()
        _use_clients(make_clients(catalog=catalog))

        response = await client.post(
            "/api/search", json={"query": "red", "after": "YXJyYXk6MTk="}
        )

        assert response.status_code == 200
        assert catalog.calls[0].variables["after"] == "YXJyYXk6MTk="

    async def test_no_matches_still_has_page_info(self, client: httpx.AsyncClient) -> None:
        _use_clients(make_clients(catalog=FakeCatalog(body={"data": {}})))

        response = await client.post("/api/search", json={"query": "zzz"})

        assert response.status_code == 200
        assert response.json()["artworksConnection"]["pageInfo"] == {
            "hasNextPage": False,
            "endCursor": None,
        }


class TestSearchEndpointInputValidation:
    """Bad request bodies are rejected before any upstream call."""

    @pytest.mark.parametrize(
        "body",
        [{}, {"query": ""}, {"query": "   "}, {"query": 7}, ["red"]],
    )
    async def test_invalid_query(self, client: httpx.AsyncClient, body: object) -> None:
        model = FakeToolCallingModel.returning("{}")
        catalog = FakeCatalog()
        _use_clients(make_clients(model=model, catalog=catalog))

        response = await client.post("/api/search", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid or empty query provided"}
        assert model.calls == []
        assert catalog.calls == []

    async def test_malformed_json(self, client: httpx.AsyncClient) -> None:
        _use_clients(make_clients())

        response = await client.post(
            "/api/search",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid or empty query provided"}

    async def test_get_is_not_allowed(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/search")
        assert response.status_code == 405


class TestSearchEndpointFailures:
    """Configuration and upstream failures surface as 500."""

    async def test_missing_configuration(self, client: httpx.AsyncClient) -> None:
        app.dependency_overrides[get_app_settings] = lambda: Settings(
            _env_file=None,
            artsy_access_token="",
            artsy_user_id="",
            openai_api_key="",
            azure_openai_endpoint="",
        )

        response = await client.post("/api/search", json={"query": "red"})

        assert response.status_code == 500
        assert response.json() == {"error": CONFIGURATION_ERROR_MESSAGE}

    async def test_invalid_query_wins_over_missing_configuration(
        self, client: httpx.AsyncClient
    ) -> None:
        app.dependency_overrides[get_app_settings] = lambda: Settings(
            _env_file=None, artsy_access_token="", openai_api_key="", azure_openai_endpoint=""
        )

        response = await client.post("/api/search", json={"query": ""})

        assert response.status_code == 400

    async def test_upstream_status_error(self, client: httpx.AsyncClient) -> None:
        _use_clients(make_clients(catalog=FakeCatalog(status_code=500, body={"x": 1})))

        response = await client.post("/api/search", json={"query": "red"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch from Artsy: Internal Server Error"}

    async def test_graphql_errors(self, client: httpx.AsyncClient) -> None:
        _use_clients(make_clients(catalog=FakeCatalog(body={"errors": [{"message": "nope"}]})))

        response = await client.post("/api/search", json={"query": "red"})

        assert response.status_code == 500
        assert response.json()["error"].startswith("GraphQL errors: ")

    async def test_catalog_timeout(self, client: httpx.AsyncClient) -> None:
        _use_clients(make_clients(catalog=FakeCatalog(error=httpx.ReadTimeout("slow"))))

        response = await client.post("/api/search", json={"query": "red"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch from Artsy: request timed out"}


# ── GET /health ──────────────────────────────────────────────────────────


class TestHealth:
    """Liveness endpoint."""

    async def test_health(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert isinstance(body["credentials_configured"], bool)
