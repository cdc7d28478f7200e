"""
Embedding service boundary.

Dependencies: httpx
System role: HTTP adapter for the Ollama-compatible embedding API
"""

from ragindex.boundary.ollama.embedding_client import EmbeddingClient, OllamaEmbeddingClient

__all__ = [
    "EmbeddingClient",
    "OllamaEmbeddingClient",
]
