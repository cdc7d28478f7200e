"""
Ollama embedding client.

Single-shot HTTP client for an Ollama-compatible embeddings endpoint.
One POST per call with {"model", "prompt"}; the response must carry a
numeric "embedding" array. Retry and pacing belong to the indexing
pipeline, not to this client.

Dependencies: httpx, ragindex.configs
System role: Embedding provider for indexing and query time
"""

import logging
from typing import Any, Protocol

import httpx

from ragindex.configs import EmbeddingSettings
from ragindex.core.exceptions import EmbeddingServiceError

logger = logging.getLogger(__name__)


class EmbeddingClient(Protocol):
    """Anything that turns a text span into a vector."""

    def embed(self, text: str) -> list[float]: ...


class OllamaEmbeddingClient:
    """
    Embedding client for the Ollama /api/embeddings endpoint.

    Usage:
        with OllamaEmbeddingClient() as client:
            vector = client.embed("hello world")
    """

    def __init__(
        self,
        settings: EmbeddingSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client and its connection pool.

        Args:
            settings: Endpoint, model and timeouts (defaults to environment)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self._settings = settings or EmbeddingSettings()
        self._client = httpx.Client(
            base_url=self._settings.base_url,
            timeout=httpx.Timeout(
                self._settings.request_timeout_seconds,
                connect=self._settings.connect_timeout_seconds,
            ),
            transport=transport,
        )

    @property
    def model(self) -> str:
        return self._settings.model

    def embed(self, text: str) -> list[float]:
        """
        Request the embedding vector of one text span.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingServiceError: On timeout, network failure, non-2xx status
                or a response without a numeric "embedding" array
        """
        payload = {"model": self._settings.model, "prompt": text}

        try:
            response = self._client.post(self._settings.endpoint_path, json=payload)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise EmbeddingServiceError(
                f"Embedding request timed out: {e}",
                details={"model": self._settings.model},
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise EmbeddingServiceError(
                f"Embedding service returned {status}: {self._error_text(e.response)}",
                status_code=status,
            ) from e
        except httpx.RequestError as e:
            raise EmbeddingServiceError(
                f"Embedding service unreachable: {e}",
                details={"base_url": self._settings.base_url},
            ) from e

        return self._parse_embedding(response)

    @staticmethod
    def _error_text(response: httpx.Response) -> str:
        """Prefer the {"error": ...} message of an error body over raw text."""
        try:
            body = response.json()
        except ValueError:
            return response.text[:200] or response.reason_phrase
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return response.text[:200]

    @staticmethod
    def _parse_embedding(response: httpx.Response) -> list[float]:
        try:
            body: Any = response.json()
        except ValueError as e:
            raise EmbeddingServiceError(
                "Embedding response is not valid JSON",
                status_code=response.status_code,
            ) from e

        embedding = body.get("embedding") if isinstance(body, dict) else None
        if not isinstance(embedding, list) or not embedding:
            raise EmbeddingServiceError(
                "Embedding response has no embedding array",
                status_code=response.status_code,
            )
        if not all(
            isinstance(value, (int, float)) and not isinstance(value, bool)
            for value in embedding
        ):
            raise EmbeddingServiceError(
                "Embedding array contains non-numeric values",
                status_code=response.status_code,
            )
        return [float(value) for value in embedding]

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def __enter__(self) -> "OllamaEmbeddingClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
