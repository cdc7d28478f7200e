"""
Search domain models and schemas.

SearchResult is built at query time only; the request/response pair is
the HTTP contract of the search endpoint.

Dependencies: pydantic, ragindex.models
System role: Semantic search data contracts
"""

from pydantic import BaseModel, Field

from ragindex.models.chunk import Chunk
from ragindex.models.document import Document


class SearchResult(BaseModel):
    """One ranked match: the chunk, its source document and the score."""

    chunk: Chunk
    document: Document
    similarity: float = Field(ge=-1.0, le=1.0, description="Cosine similarity")


class SearchRequest(BaseModel):
    """Request schema for semantic search."""

    query: str = Field(min_length=1, description="Natural language query")
    top_k: int | None = Field(default=None, ge=1, description="Maximum results to return")
    threshold: float | None = Field(
        default=None,
        ge=-1.0,
        le=1.0,
        description="Minimum cosine similarity",
    )


class SearchResultItem(BaseModel):
    """Flattened search hit returned by the API."""

    document_id: int
    path: str
    chunk_index: int
    content: str
    similarity: float

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultItem":
        return cls(
            document_id=result.document.id,
            path=result.document.path,
            chunk_index=result.chunk.chunk_index,
            content=result.chunk.content,
            similarity=result.similarity,
        )


class SearchResponse(BaseModel):
    """Response schema for semantic search."""

    query: str
    results: list[SearchResultItem]
    total: int
