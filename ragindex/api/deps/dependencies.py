"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: ragindex.configs, ragindex.application
System role: DI container for service injection
"""

import logging
import threading

from ragindex.application.services import RagService
from ragindex.configs import get_settings

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for the cached RAG service."""

    def __init__(self) -> None:
        self._rag_service: RagService | None = None
        self._lock = threading.Lock()

    @property
    def rag_service(self) -> RagService:
        """Get cached RAG service, built from settings on first access."""
        if self._rag_service is None:
            with self._lock:
                if self._rag_service is None:
                    self._rag_service = RagService.from_settings(get_settings())
        return self._rag_service

    def clear(self) -> None:
        """Close and drop the cached service."""
        with self._lock:
            if self._rag_service is not None:
                self._rag_service.close()
                logger.info("RAG service closed")
            self._rag_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_rag_service() -> RagService:
    """
    Get RAG service instance.

    Returns:
        RagService: Shared service with the SQLite store and Ollama client
    """
    return get_service_cache().rag_service
