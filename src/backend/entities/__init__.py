"""
Entities package.

Each subdirectory represents one pipeline stage:
- intent_extractor/: Turns free text into search tool arguments via an LLM
- parameter_sanitizer/: Cleans extracted arguments into a FilterSpec
- query_builder/: Compiles a FilterSpec into an Artsy GraphQL query
- result_normalizer/: Executes the query and shapes the response
- search_controller/: Runs the stages in order for one request
- workflow/: Dependency-injection container and factory
- shared/: Protocols and external service clients

Shared models are available at the package level.
"""

from models import SearchFailure, SearchResult

__all__ = ["SearchFailure", "SearchResult"]
