"""
Search workflow wiring.

``PipelineClients`` / ``create_pipeline_clients`` provide dependency
injection for ``process_search``, the plain async entry point of the
search pipeline in ``entities.search_controller``.
"""

from .clients import PipelineClients, create_pipeline_clients

__all__ = [
    "PipelineClients",
    "create_pipeline_clients",
]
