"""Protocol interfaces for I/O boundaries.

These protocols enable dependency injection for testability.
Production implementations wrap the OpenAI and httpx clients; test
fakes return canned data with zero network access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

from models import CompiledQuery


@dataclass(frozen=True)
class ToolInvocation:
    """One tool call as reported by the model.

    ``arguments`` is whatever the provider returned: usually a JSON
    string, sometimes an already-decoded mapping.
    """

    name: str
    arguments: str | dict[str, Any] | None


@runtime_checkable
class ToolCallingModel(Protocol):
    """A language model that can answer with structured tool calls."""

    async def invoke_tools(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        tools: list[dict[str, Any]],
    ) -> list[ToolInvocation]:
        """Send one prompt together with the callable tool declarations.

        Args:
            system_prompt: Instructions for the model.
            user_prompt: The user turn.
            tools: Tool declarations in function-calling format.

        Returns:
            The tool calls the model made, in order (possibly empty).
        """
        ...


@runtime_checkable
class CatalogTransport(Protocol):
    """Posts compiled GraphQL documents to the artwork catalog."""

    async def execute(self, document: CompiledQuery) -> httpx.Response:
        """Execute a compiled query.

        Args:
            document: Query text plus variable bindings.

        Returns:
            The raw HTTP response, whatever its status.

        Raises:
            httpx.TimeoutException: The deadline elapsed.
            httpx.TransportError: The request never got a response.
        """
        ...


@runtime_checkable
class ProgressReporter(Protocol):
    """Reports step-level progress of one search request."""

    def step_start(self, step: str) -> None:
        """Signal that a named step has started.

        Args:
            step: Human-readable step label.
        """
        ...

    def step_end(self, step: str) -> None:
        """Signal that a named step has completed.

        Args:
            step: Human-readable step label (must match a prior start).
        """
        ...


# ---------------------------------------------------------------------------
# Concrete implementations
# ---------------------------------------------------------------------------


class NoOpReporter:
    """ProgressReporter that silently discards all events.

    Useful in tests and in the plain JSON endpoint where no streaming
    UI exists.
    """

    def step_start(self, step: str) -> None:
        """No-op."""

    def step_end(self, step: str) -> None:
        """No-op."""
