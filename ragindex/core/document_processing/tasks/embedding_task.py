"""
Embedding generation task with pacing and retry.

Wraps an embedding client for indexing: a fixed delay separates
consecutive calls, and failed calls are retried with exponential
backoff when retries are enabled. Client errors (4xx) are not retried.

Dependencies: tenacity, ragindex.boundary.ollama
System role: Third stage of document ingestion pipeline
"""

import logging
import time
from collections.abc import Callable

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ragindex.boundary.ollama import EmbeddingClient
from ragindex.core.exceptions import EmbeddingServiceError

logger = logging.getLogger(__name__)


def _is_retryable(error: BaseException) -> bool:
    """Network failures, timeouts and 5xx answers are worth another attempt."""
    if not isinstance(error, EmbeddingServiceError):
        return False
    return error.status_code is None or error.status_code >= 500


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning(
        f"{__name__}:embed - Attempt {retry_state.attempt_number} failed, "
        f"retrying in {retry_state.next_action.sleep:.2f}s: "
        f"{retry_state.outcome.exception()}"
    )


class EmbeddingTask:
    """Generate chunk embeddings through a rate-limited client."""

    def __init__(
        self,
        client: EmbeddingClient,
        delay_seconds: float = 0.1,
        max_retries: int = 0,
        backoff_seconds: float = 1.0,
        max_backoff_seconds: float = 10.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            client: Embedding client
            delay_seconds: Pause before every call except the first (0 disables)
            max_retries: Extra attempts after a retryable failure
            backoff_seconds: Base of the exponential backoff
            max_backoff_seconds: Cap for a single backoff sleep
            sleep: Sleep function, replaceable in tests
        """
        if delay_seconds < 0 or backoff_seconds < 0 or max_backoff_seconds < 0:
            raise ValueError("Delays must not be negative")
        if max_retries < 0:
            raise ValueError(f"max_retries must not be negative, got {max_retries}")

        self._client = client
        self._delay_seconds = delay_seconds
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds
        self._max_backoff_seconds = max_backoff_seconds
        self._sleep = sleep
        self._calls = 0

    def embed(self, text: str) -> list[float]:
        """
        Embed one chunk.

        Args:
            text: Chunk content

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingServiceError: When the last attempt fails or the vector is empty
        """
        retrying = Retrying(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(self._max_retries + 1),
            wait=wait_exponential(
                multiplier=self._backoff_seconds,
                max=self._max_backoff_seconds,
            ),
            sleep=self._sleep,
            before_sleep=_log_retry,
            reraise=True,
        )
        vector = retrying(self._embed_once, text)
        if not vector:
            raise EmbeddingServiceError("Embedding service returned an empty vector")
        return vector

    def _embed_once(self, text: str) -> list[float]:
        if self._calls and self._delay_seconds > 0:
            self._sleep(self._delay_seconds)
        self._calls += 1
        return self._client.embed(text)
