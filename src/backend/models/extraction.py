"""
Intent extraction and filter models.

These models describe what the language model hands back and the
filter specification the sanitizer derives from it.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict

PRIMARY_FILTER_FIELDS: tuple[str, ...] = ("keyword", "artistIDs", "medium", "color")
"""Fields that can anchor a search on their own."""

SECONDARY_FILTER_FIELDS: tuple[str, ...] = (
    "partnerIDs",
    "forSale",
    "attributionClass",
    "priceRange",
)
"""Fields that only narrow a search anchored by a primary field."""

FILTER_FIELDS: tuple[str, ...] = PRIMARY_FILTER_FIELDS + SECONDARY_FILTER_FIELDS


class FilterSpec(TypedDict, total=False):
    """
    Structured search constraints, keyed by catalog argument name.

    Keys match the ``artworksConnection`` filter arguments verbatim, so a
    ``FilterSpec`` can be compiled without any renaming.
    """

    keyword: str
    artistIDs: list[str]
    medium: str
    color: str
    partnerIDs: list[str]
    forSale: bool
    attributionClass: list[str]
    priceRange: str


@dataclass(frozen=True)
class ExtractedArgs:
    """
    Arguments the model supplied when it invoked the search tool.

    Values are exactly what the model produced: they may be empty,
    malformed, or carry names the tool never declared.
    """

    arguments: dict[str, Any] = field(default_factory=dict)
    """Decoded tool-call arguments."""

    tool_name: str = ""
    """Name of the tool the model invoked."""


@dataclass(frozen=True)
class ExtractionFailed:
    """
    Signal that the model produced nothing usable.

    Covers a model that answered in prose, called an unknown tool,
    returned undecodable arguments, errored, or timed out.
    """

    reason: str
    """Short human-readable cause, for logs."""


ExtractionResult = ExtractedArgs | ExtractionFailed
