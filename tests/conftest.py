"""Shared test fixtures for artwork search."""

import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

# Ensure src/backend/ is on the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src" / "backend"))

from config.settings import Settings
from entities.shared.protocols import NoOpReporter, ToolInvocation
from entities.workflow.clients import PipelineClients
from models import CompiledQuery

# ---------------------------------------------------------------------------
# Canned data
# ---------------------------------------------------------------------------

ARTWORK_EDGE: dict[str, Any] = {
    "node": {
        "internalID": "5f1a",
        "title": "Guernica Study",
        "slug": "pablo-picasso-guernica-study",
        "date": "1937",
        "medium": "Oil on canvas",
        "artists": [{"name": "Pablo Picasso", "slug": "pablo-picasso"}],
        "image": {"url": "https://d32dm0rphc51dk.cloudfront.net/x/large.jpg", "aspectRatio": 1.3},
    }
}


def artsy_body(
    edges: list[Any] | None = None,
    *,
    has_next_page: bool = False,
    end_cursor: str | None = None,
) -> dict[str, Any]:
    """Build a well-formed ``artworksConnection`` response body."""
    return {
        "data": {
            "artworksConnection": {
                "edges": [ARTWORK_EDGE] if edges is None else edges,
                "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
            }
        }
    }


# ---------------------------------------------------------------------------
# Protocol fakes
# ---------------------------------------------------------------------------


class FakeToolCallingModel:
    """In-memory fake satisfying the ``ToolCallingModel`` protocol.

    Returns canned invocations (or raises a canned error) and records
    every call for assertions.
    """

    def __init__(
        self,
        invocations: list[ToolInvocation] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.invocations: list[ToolInvocation] = invocations or []
        self.error: Exception | None = error
        self.calls: list[dict[str, Any]] = []

    @classmethod
    def returning(cls, arguments: str | dict[str, Any] | None) -> "FakeToolCallingModel":
        """Return a fake that calls the search tool with *arguments*."""
        return cls(invocations=[ToolInvocation(name="searchArtsyArtworks", arguments=arguments)])

    async def invoke_tools(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        tools: list[dict[str, Any]],
    ) -> list[ToolInvocation]:
        """Record the call, then return or raise the canned outcome."""
        self.calls.append(
            {"system_prompt": system_prompt, "user_prompt": user_prompt, "tools": tools}
        )
        if self.error is not None:
            raise self.error
        return list(self.invocations)


class FakeCatalog:
    """In-memory fake satisfying the ``CatalogTransport`` protocol.

    Answers with a canned ``httpx.Response`` (or raises a canned error)
    and records every executed document.
    """

    def __init__(
        self,
        body: Any = None,  # noqa: ANN401
        status_code: int = 200,
        error: Exception | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.body = artsy_body() if body is None else body
        self.status_code = status_code
        self.error = error
        self.response = response
        self.calls: list[CompiledQuery] = []

    async def execute(self, document: CompiledQuery) -> httpx.Response:
        """Record the document, then return or raise the canned outcome."""
        self.calls.append(document)
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        return httpx.Response(self.status_code, json=self.body)


class SpyReporter:
    """Spy satisfying the ``ProgressReporter`` protocol.

    Captures every ``step_start`` / ``step_end`` call for assertions.
    """

    def __init__(self) -> None:
        self.events: list[dict[str, str]] = []

    def step_start(self, step: str) -> None:
        """Record a step-start event."""
        self.events.append({"step": step, "status": "started"})

    def step_end(self, step: str) -> None:
        """Record a step-end event."""
        self.events.append({"step": step, "status": "completed"})


def make_clients(
    *,
    model: FakeToolCallingModel | None = None,
    catalog: FakeCatalog | None = None,
    reporter: SpyReporter | None = None,
    page_size: int = 20,
) -> PipelineClients:
    """Build a ``PipelineClients`` with fakes for all I/O."""
    return PipelineClients(
        intent_model=model or FakeToolCallingModel(),
        catalog=catalog or FakeCatalog(),
        extraction_prompt="Test extraction prompt",
        page_size=page_size,
        extraction_timeout_seconds=1.0,
        catalog_timeout_seconds=1.0,
        reporter=reporter or NoOpReporter(),
    )


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Return a ``Settings`` instance populated with safe test defaults."""
    return Settings(
        _env_file=None,
        artsy_api_url="https://metaphysics.test/v2",
        artsy_access_token="test-token",
        artsy_user_id="test-user",
        openai_api_key="sk-test",
        azure_openai_endpoint="",
    )


@pytest.fixture
def spy_reporter() -> SpyReporter:
    """Return a fresh ``SpyReporter`` instance."""
    return SpyReporter()
