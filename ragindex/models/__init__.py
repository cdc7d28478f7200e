"""
Domain models for the RAG index.

Exports pydantic models shared by the store, the pipelines and the API.

Dependencies: pydantic
System role: Data contracts across layers
"""

from ragindex.models.chunk import Chunk
from ragindex.models.common import MessageResponse
from ragindex.models.document import (
    Document,
    DocumentKind,
    DocumentMetadata,
    DocumentSummary,
)
from ragindex.models.embedding import Embedding
from ragindex.models.indexing import (
    FileIndexResult,
    FileIndexStatus,
    IndexDirectoryRequest,
    IndexFileRequest,
    IndexingReport,
)
from ragindex.models.search import (
    SearchRequest,
    SearchResponse,
    SearchResult,
    SearchResultItem,
)
from ragindex.models.stats import IndexStatistics

__all__ = [
    "Chunk",
    "Document",
    "DocumentKind",
    "DocumentMetadata",
    "DocumentSummary",
    "Embedding",
    "FileIndexResult",
    "FileIndexStatus",
    "IndexDirectoryRequest",
    "IndexFileRequest",
    "IndexStatistics",
    "IndexingReport",
    "MessageResponse",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    "SearchResultItem",
]
