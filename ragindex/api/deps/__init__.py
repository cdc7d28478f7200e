"""FastAPI dependencies."""

from .dependencies import (
    ServiceCache,
    get_rag_service,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "get_rag_service",
    "get_service_cache",
]
