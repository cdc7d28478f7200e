"""API routers."""

from .health import router as health_router
from .index import router as index_router
from .search import router as search_router

__all__ = [
    "health_router",
    "index_router",
    "search_router",
]
