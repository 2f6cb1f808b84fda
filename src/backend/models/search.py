"""
Inbound search request and failure models.

``SearchFailure`` is the explicit "fatal, surface to caller" half of the
pipeline's result type; recoverable anomalies never produce one.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Failure classes that reach the caller."""

    INPUT_VALIDATION = "input_validation"
    CONFIGURATION = "configuration"
    UPSTREAM_TRANSPORT = "upstream_transport"
    UPSTREAM_PROTOCOL = "upstream_protocol"


class SearchRequest(BaseModel):
    """A validated search request."""

    query: str = Field(description="Free-text description of the desired artwork")
    after: str | None = Field(
        default=None, description="endCursor of the previous page, to fetch the next one"
    )


class SearchFailure(BaseModel):
    """A failure that is reported to the caller instead of a result."""

    kind: ErrorKind = Field(description="Failure classification")
    message: str = Field(description="Caller-facing error message")
    detail: str | None = Field(
        default=None, description="Diagnostic detail for logs; never sent to the caller"
    )

    @property
    def status_code(self) -> int:
        """HTTP status the API answers with for this failure."""
        return 400 if self.kind is ErrorKind.INPUT_VALIDATION else 500


class ConfigurationError(ValueError):
    """Raised when required settings are absent at wiring time."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f"Missing required configuration: {', '.join(self.missing)}. "
            "Set these environment variables (or add them to .env)."
        )
