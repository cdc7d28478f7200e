"""
Core business logic layer.

Exports:
  - Exception hierarchy (RagIndexError and subclasses)

The indexing pipeline, similarity ranking and the retriever live in
ragindex.core.document_processing, ragindex.core.similarity and
ragindex.core.retriever.

Dependencies: None
System role: Domain rules shared by indexing and search
"""

from ragindex.core.exceptions import (
    DimensionMismatchError,
    DocumentNotFoundError,
    EmbeddingServiceError,
    ParseError,
    PartialIndexingError,
    RagIndexError,
    StoreError,
)

__all__ = [
    "DimensionMismatchError",
    "DocumentNotFoundError",
    "EmbeddingServiceError",
    "ParseError",
    "PartialIndexingError",
    "RagIndexError",
    "StoreError",
]
