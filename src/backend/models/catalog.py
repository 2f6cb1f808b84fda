"""
Catalog query and result models.

These models cover the compiled GraphQL document sent to the catalog
and the canonical result shape returned to callers.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ArtworkEdge = dict[str, Any]
"""One ``edges[]`` entry from the catalog, forwarded untouched."""


@dataclass(frozen=True)
class PageRequest:
    """Page size plus the opaque cursor of the page to fetch (if any)."""

    size: int
    cursor: str | None = None


class CompiledQuery(BaseModel):
    """A GraphQL document ready to POST to the catalog."""

    query: str = Field(description="GraphQL query text")
    variables: dict[str, Any] = Field(
        default_factory=dict, description="Bindings for the declared query variables"
    )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body expected by a GraphQL endpoint."""
        return {"query": self.query, "variables": dict(self.variables)}


class PageInfo(BaseModel):
    """Pagination metadata for one result page."""

    model_config = ConfigDict(populate_by_name=True)

    has_next_page: bool = Field(
        default=False, alias="hasNextPage", description="Whether another page exists"
    )
    end_cursor: str | None = Field(
        default=None, alias="endCursor", description="Cursor to request the next page"
    )


class ArtworksConnection(BaseModel):
    """Edge objects of one result page (null entries dropped) plus its pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    edges: list[ArtworkEdge] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")


class SearchResult(BaseModel):
    """
    Canonical search response.

    Always carries ``pageInfo``, whatever shape the catalog answered with.
    Null and non-object edges are filtered out, so ``edges`` only holds
    edge objects as returned by the catalog.
    """

    model_config = ConfigDict(populate_by_name=True)

    artworks_connection: ArtworksConnection = Field(
        default_factory=ArtworksConnection, alias="artworksConnection"
    )

    @classmethod
    def empty(cls) -> "SearchResult":
        """Return the canonical no-matches result."""
        return cls(
            artworks_connection=ArtworksConnection(
                edges=[],
                page_info=PageInfo(has_next_page=False, end_cursor=None),
            )
        )

    def to_response(self) -> dict[str, Any]:
        """Serialize with the catalog's camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)
