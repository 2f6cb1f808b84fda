"""Intent extraction logic.

Asks the language model to fill the artwork search tool from a free-text
request. Every way the model can misbehave collapses into
``ExtractionFailed``; nothing is raised to the caller. Reports progress
via the ``ProgressReporter`` protocol.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from entities.shared.protocols import NoOpReporter, ProgressReporter, ToolCallingModel
from models import ExtractedArgs, ExtractionFailed, ExtractionResult

from .tool_schema import SEARCH_TOOL_NAME, build_search_tool

logger = logging.getLogger(__name__)

DEFAULT_EXTRACTION_TIMEOUT_SECONDS = 10.0


def load_prompt() -> str:
    """Load the system prompt from prompt.md in this folder."""
    return (Path(__file__).parent / "prompt.md").read_text(encoding="utf-8")


def build_user_prompt(user_query: str) -> str:
    """Wrap the raw request in the extraction instruction."""
    return (
        "Please analyze this user request and extract the relevant parameters "
        f'for searching artworks on Artsy: "{user_query}"'
    )


def _decode_arguments(raw: str | dict[str, Any] | None) -> dict[str, Any] | None:
    """Decode tool-call arguments into a mapping.

    Args:
        raw: JSON text or an already-decoded mapping.

    Returns:
        The decoded mapping, or ``None`` when it is not a JSON object.
    """
    if raw is None or raw == "":
        return {}
    if isinstance(raw, dict):
        return dict(raw)
    try:
        decoded = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return None
    return decoded if isinstance(decoded, dict) else None


async def extract_intent(
    user_query: str,
    model: ToolCallingModel,
    *,
    system_prompt: str,
    timeout_seconds: float = DEFAULT_EXTRACTION_TIMEOUT_SECONDS,
    reporter: ProgressReporter = NoOpReporter(),
) -> ExtractionResult:
    """Extract search arguments from a natural-language request.

    Sends the request with the search tool declaration, then inspects
    the first tool call. Only a call to ``searchArtsyArtworks`` with an
    object of arguments counts as a successful extraction.

    Args:
        user_query: The raw request text (already checked non-blank).
        model: Tool-calling language model.
        system_prompt: Instructions for the model.
        timeout_seconds: Deadline for the model call.
        reporter: Progress reporter for UI updates.

    Returns:
        ``ExtractedArgs`` with the raw arguments, or ``ExtractionFailed``.
    """
    step_name = "Extracting search intent"
    reporter.step_start(step_name)

    try:
        invocations = await asyncio.wait_for(
            model.invoke_tools(
                system_prompt=system_prompt,
                user_prompt=build_user_prompt(user_query),
                tools=[build_search_tool()],
            ),
            timeout=timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning("Intent extraction timed out after %.1fs", timeout_seconds)
        return ExtractionFailed(reason="timeout")
    except Exception as exc:  # noqa: BLE001
        logger.warning("Error during intent extraction: %s", exc, exc_info=True)
        return ExtractionFailed(reason=f"model error: {type(exc).__name__}")
    finally:
        reporter.step_end(step_name)

    if not invocations:
        logger.warning("Model did not return a tool call")
        return ExtractionFailed(reason="no tool call")

    invocation = invocations[0]
    if invocation.name != SEARCH_TOOL_NAME:
        logger.warning("Model called unexpected tool %r", invocation.name)
        return ExtractionFailed(reason=f"unexpected tool: {invocation.name}")

    arguments = _decode_arguments(invocation.arguments)
    if arguments is None:
        logger.warning("Model returned undecodable tool arguments: %r", invocation.arguments)
        return ExtractionFailed(reason="undecodable arguments")

    logger.info("Model extracted parameters: %s", arguments)
    return ExtractedArgs(arguments=arguments, tool_name=invocation.name)
