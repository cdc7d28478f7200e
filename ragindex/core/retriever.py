"""
Semantic retrieval over the vector store.

Embeds the query, ranks every stored chunk vector by cosine similarity
and attaches each surviving chunk's source document.

Dependencies: ragindex.boundary, ragindex.core.similarity
System role: Search orchestration business logic
"""

import logging

from ragindex.boundary.ollama import EmbeddingClient
from ragindex.boundary.vdb import SQLiteVectorStore
from ragindex.core.exceptions import DocumentNotFoundError
from ragindex.core.similarity import rank_and_filter
from ragindex.models import Document, SearchResult

logger = logging.getLogger(__name__)


class SemanticRetriever:
    """Retrieval business logic."""

    def __init__(self, store: SQLiteVectorStore, embedding_client: EmbeddingClient) -> None:
        """Initialize retriever with the store and the embedding client."""
        self._store = store
        self._embedding_client = embedding_client

    def search(self, query: str, top_k: int = 5, threshold: float = 0.7) -> list[SearchResult]:
        """
        Find the chunks most similar to a query.

        Args:
            query: Natural language query
            top_k: Maximum number of results
            threshold: Minimum cosine similarity

        Returns:
            list[SearchResult]: Best matches first; empty when nothing passes the threshold

        Raises:
            ValueError: When top_k < 1
            EmbeddingServiceError: When the query cannot be embedded
            DimensionMismatchError: When stored vectors come from another model
            DocumentNotFoundError: When a matching chunk's document is gone
        """
        if top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {top_k}")

        query_vector = self._embedding_client.embed(query)
        candidates = self._store.get_all_chunks_with_embeddings()
        ranked = rank_and_filter(query_vector, candidates, top_k, threshold)

        documents: dict[int, Document] = {}
        results = []
        for chunk, similarity in ranked:
            document = documents.get(chunk.document_id)
            if document is None:
                document = self._store.get_document(chunk.document_id)
                if document is None:
                    raise DocumentNotFoundError(chunk.document_id, chunk_id=chunk.id)
                documents[chunk.document_id] = document
            results.append(SearchResult(chunk=chunk, document=document, similarity=similarity))

        logger.info(
            f"Search returned {len(results)} of {len(candidates)} candidates "
            f"(top_k={top_k}, threshold={threshold})"
        )
        return results
