"""
Exception hierarchy for the RAG index.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ragindex.models.indexing import FileIndexResult


class RagIndexError(Exception):
    """Base exception for all RAG index errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ParseError(RagIndexError):
    """Raised when a file is missing, unsupported, or cannot be parsed."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parse error.

        Args:
            message: Error message
            file_path: Path of the file that failed
            file_type: Extension of the file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        if file_type:
            details["file_type"] = file_type
        self.file_path = file_path
        super().__init__(message, details)


class EmbeddingServiceError(RagIndexError):
    """Raised when the embedding service call fails (network, status, timeout, body)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize embedding service error.

        Args:
            message: Error message
            status_code: HTTP status code when the service answered
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class PartialIndexingError(RagIndexError):
    """Raised after a file was indexed with at least one failed chunk."""

    def __init__(self, result: "FileIndexResult") -> None:
        """
        Initialize partial indexing error.

        Args:
            result: Per-file outcome carrying successful/failed chunk counts
        """
        self.result = result
        super().__init__(
            f"Indexed {result.successful_chunks} of {result.total_chunks} chunks "
            f"for {result.path}",
            {
                "path": result.path,
                "successful_chunks": result.successful_chunks,
                "failed_chunks": result.failed_chunks,
            },
        )

    @property
    def successful_chunks(self) -> int:
        return self.result.successful_chunks

    @property
    def failed_chunks(self) -> int:
        return self.result.failed_chunks


class DimensionMismatchError(RagIndexError):
    """Raised when vectors from incompatible embedding spaces are combined."""

    def __init__(self, expected: int, actual: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize dimension mismatch error.

        Args:
            expected: Dimensionality of the reference vector
            actual: Dimensionality of the offending vector
            details: Additional context
        """
        details = details or {}
        details.update({"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Vector dimension mismatch: expected {expected}, got {actual}",
            details,
        )


class StoreError(RagIndexError):
    """Raised when vector store persistence operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Operation that failed (insert_chunk, clear_index, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class DocumentNotFoundError(RagIndexError):
    """Raised when a chunk's owning document no longer exists."""

    def __init__(
        self,
        document_id: int,
        chunk_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document not found error.

        Args:
            document_id: ID of the missing document
            chunk_id: ID of the chunk that referenced it
            details: Additional context
        """
        details = details or {}
        details["document_id"] = document_id
        if chunk_id is not None:
            details["chunk_id"] = chunk_id
        self.document_id = document_id
        super().__init__(f"Document not found: {document_id}", details)
