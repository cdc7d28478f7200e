"""
RAG service facade.

Single entry point used by the CLI and the HTTP API: indexing of files
and directories, semantic search, statistics, listing and clearing.
Wires the store, the embedding client, the indexing pipeline and the
retriever from settings.

Dependencies: ragindex.boundary, ragindex.core, ragindex.configs
System role: Application service orchestration
"""

import logging
import threading
import time
from collections.abc import Callable
from pathlib import Path

from ragindex.boundary.ollama import EmbeddingClient, OllamaEmbeddingClient
from ragindex.boundary.vdb import SQLiteVectorStore
from ragindex.configs import IndexingSettings, SearchSettings, Settings, get_settings
from ragindex.core.document_processing import IndexingPipeline
from ragindex.core.retriever import SemanticRetriever
from ragindex.models import (
    DocumentSummary,
    FileIndexResult,
    IndexingReport,
    IndexStatistics,
    SearchResult,
)

logger = logging.getLogger(__name__)


class RagService:
    """
    RAG service facade.

    Owns its store and embedding client; close() releases both.
    """

    def __init__(
        self,
        store: SQLiteVectorStore,
        embedding_client: EmbeddingClient,
        indexing_settings: IndexingSettings | None = None,
        search_settings: SearchSettings | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize the service.

        Args:
            store: Vector store
            embedding_client: Client used for chunks and queries
            indexing_settings: Chunking, pacing and retry settings
            search_settings: Default top_k and threshold
            sleep: Sleep function used by the pipeline for pacing
        """
        settings = None
        if indexing_settings is None or search_settings is None:
            settings = get_settings()
        self._store = store
        self._embedding_client = embedding_client
        self._search_settings = search_settings or settings.search
        self._pipeline = IndexingPipeline(
            store,
            embedding_client,
            settings=indexing_settings or settings.indexing,
            sleep=sleep,
        )
        self._retriever = SemanticRetriever(store, embedding_client)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RagService":
        """
        Build a service with the SQLite store and the Ollama client.

        Args:
            settings: Application settings (cached settings if None)

        Returns:
            RagService: Ready-to-use service
        """
        settings = settings or get_settings()
        return cls(
            store=SQLiteVectorStore.from_settings(settings.database),
            embedding_client=OllamaEmbeddingClient(settings.embedding),
            indexing_settings=settings.indexing,
            search_settings=settings.search,
        )

    @property
    def store(self) -> SQLiteVectorStore:
        return self._store

    def index(
        self,
        directory: str | Path,
        cancel_event: threading.Event | None = None,
    ) -> IndexingReport:
        """Index every supported file below a directory."""
        return self._pipeline.index_directory(directory, cancel_event=cancel_event)

    def index_file(self, file_path: str | Path, force: bool = False) -> FileIndexResult:
        """
        Index one file.

        Raises:
            ParseError: The file could not be read or parsed
            PartialIndexingError: Some chunks could not be embedded
        """
        return self._pipeline.index_file(file_path, force=force)

    def search(
        self,
        query: str,
        top_k: int | None = None,
        threshold: float | None = None,
    ) -> list[SearchResult]:
        """
        Semantic search over indexed chunks.

        Args:
            query: Natural language query
            top_k: Maximum results (settings default if None)
            threshold: Minimum similarity (settings default if None)

        Returns:
            list[SearchResult]: Best matches first
        """
        return self._retriever.search(
            query,
            top_k=top_k if top_k is not None else self._search_settings.top_k,
            threshold=(
                threshold
                if threshold is not None
                else self._search_settings.similarity_threshold
            ),
        )

    def stats(self) -> IndexStatistics:
        return self._store.get_statistics()

    def list_documents(self) -> list[DocumentSummary]:
        return self._store.list_documents()

    def incomplete_documents(self) -> list[DocumentSummary]:
        return self._store.get_incomplete_documents()

    def clear(self) -> None:
        self._store.clear_index()

    def ping(self) -> bool:
        return self._store.ping()

    def close(self) -> None:
        """Close the embedding client (when closeable) and the store."""
        close = getattr(self._embedding_client, "close", None)
        if callable(close):
            close()
        self._store.close()

    def __enter__(self) -> "RagService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
