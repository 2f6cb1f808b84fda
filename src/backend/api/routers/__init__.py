"""
API routers package.
"""

from api.routers.search import router as search_router

__all__ = ["search_router"]
