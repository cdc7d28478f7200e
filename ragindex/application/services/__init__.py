"""Service orchestrators."""

from .rag_service import RagService

__all__ = [
    "RagService",
]
