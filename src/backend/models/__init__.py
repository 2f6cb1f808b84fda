"""
Shared models for entities.

These models are used across the pipeline stages and the API.
All models are re-exported here.
"""

from .catalog import (
    ArtworkEdge,
    ArtworksConnection,
    CompiledQuery,
    PageInfo,
    PageRequest,
    SearchResult,
)
from .extraction import (
    FILTER_FIELDS,
    PRIMARY_FILTER_FIELDS,
    SECONDARY_FILTER_FIELDS,
    ExtractedArgs,
    ExtractionFailed,
    ExtractionResult,
    FilterSpec,
)
from .search import (
    ConfigurationError,
    ErrorKind,
    SearchFailure,
    SearchRequest,
)

__all__ = [
    # Extraction (model output and filters)
    "FILTER_FIELDS",
    "PRIMARY_FILTER_FIELDS",
    "SECONDARY_FILTER_FIELDS",
    "ExtractedArgs",
    "ExtractionFailed",
    "ExtractionResult",
    "FilterSpec",
    # Catalog (compiled query and canonical result)
    "ArtworkEdge",
    "ArtworksConnection",
    "CompiledQuery",
    "PageInfo",
    "PageRequest",
    "SearchResult",
    # Search (inbound request and failures)
    "ConfigurationError",
    "ErrorKind",
    "SearchFailure",
    "SearchRequest",
]
