"""
Indexing pipeline orchestrator.

Coordinates parsing, chunking, embedding and persistence per file, and
walks directory trees file by file.

Per file: skip when the path is already indexed, otherwise parse,
persist the document, then persist and embed each chunk in order. A
failed embedding is logged and counted, never fatal for the file; the
file ends INDEXED or raises PartialIndexingError with the accounting.
A forced re-index parses the file before the old document is deleted.

One run at a time per pipeline: index_file and index_directory hold a
lock for their whole run, so embedding calls never overlap.

Dependencies: All task modules, ragindex.boundary.vdb, configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import threading
import time
from collections.abc import Callable
from pathlib import Path

from ragindex.boundary.ollama import EmbeddingClient
from ragindex.boundary.vdb import SQLiteVectorStore
from ragindex.configs import IndexingSettings, get_settings
from ragindex.core.exceptions import (
    EmbeddingServiceError,
    ParseError,
    PartialIndexingError,
)
from ragindex.models import (
    Chunk,
    Embedding,
    FileIndexResult,
    FileIndexStatus,
    IndexingReport,
)
from ragindex.observability import log_exception_with_context, log_with_context

from .tasks import ChunkingTask, EmbeddingTask, ParsingTask

logger = logging.getLogger(__name__)


class IndexingPipeline:
    """Orchestrate document ingestion: parse -> chunk -> embed -> store."""

    def __init__(
        self,
        store: SQLiteVectorStore,
        embedding_client: EmbeddingClient,
        settings: IndexingSettings | None = None,
        parsing_task: ParsingTask | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            store: Vector store receiving documents, chunks and embeddings
            embedding_client: Client producing chunk vectors
            settings: Indexing settings (uses application settings if None)
            parsing_task: Parser dispatcher (Markdown and PDF if None)
            sleep: Sleep function used for pacing and backoff
        """
        self._settings = settings or get_settings().indexing
        self._store = store
        self._parsing_task = parsing_task or ParsingTask()
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )
        self._embedding_task = EmbeddingTask(
            embedding_client,
            delay_seconds=self._settings.embedding_delay_seconds,
            max_retries=self._settings.embedding_max_retries,
            backoff_seconds=self._settings.retry_backoff_seconds,
            max_backoff_seconds=self._settings.max_retry_backoff_seconds,
            sleep=sleep,
        )
        self._extensions = {ext.lower() for ext in self._settings.supported_extensions}
        self._run_lock = threading.Lock()

    def index_file(self, file_path: str | Path, force: bool = False) -> FileIndexResult:
        """
        Index a single file.

        Args:
            file_path: Path to the document
            force: Replace an existing document for this path once the file
                has parsed, so a partially indexed file can be completed

        Returns:
            FileIndexResult: INDEXED, or SKIPPED when the path is known

        Raises:
            ParseError: File missing, unsupported or unparsable (nothing stored)
            PartialIndexingError: Some chunk embeddings failed
            StoreError: Persistence failed
            DimensionMismatchError: Model returned vectors of another size
        """
        with self._run_lock:
            return self._index_file(file_path, force)

    def _index_file(self, file_path: str | Path, force: bool) -> FileIndexResult:
        path = Path(file_path).expanduser()
        if not path.is_file():
            raise ParseError(f"File not found: {file_path}", file_path=str(file_path))
        resolved = str(path.resolve())

        existing = self._store.get_document_by_path(resolved)
        if existing is not None:
            if not force:
                log_with_context(
                    logger, logging.INFO, "Skipping already indexed file",
                    path=resolved, document_id=existing.id,
                )
                return FileIndexResult(
                    path=resolved,
                    status=FileIndexStatus.SKIPPED,
                    document_id=existing.id,
                )

        document = self._parsing_task.parse(resolved)
        texts = self._chunking_task.chunk(document.content)

        if existing is not None:
            logger.info(f"Re-indexing {resolved}, removing document {existing.id}")
            self._store.delete_document(existing.id)
        document_id = self._store.insert_document(document)

        successful = 0
        failed = 0
        for chunk_index, text in enumerate(texts):
            chunk_id = self._store.insert_chunk(
                Chunk(document_id=document_id, content=text, chunk_index=chunk_index)
            )
            try:
                vector = self._embedding_task.embed(text)
            except EmbeddingServiceError as e:
                failed += 1
                log_exception_with_context(
                    logger, "Chunk embedding failed", e,
                    path=resolved, chunk_index=chunk_index, preview=text[:80],
                )
                continue
            self._store.insert_embedding(Embedding(chunk_id=chunk_id, vector=vector))
            successful += 1

        result = FileIndexResult(
            path=resolved,
            status=FileIndexStatus.INDEXED if failed == 0 else FileIndexStatus.PARTIALLY_INDEXED,
            document_id=document_id,
            total_chunks=len(texts),
            successful_chunks=successful,
            failed_chunks=failed,
        )
        if failed:
            log_with_context(
                logger, logging.WARNING, "File partially indexed",
                path=resolved, successful=successful, failed=failed,
            )
            raise PartialIndexingError(result)

        log_with_context(
            logger, logging.INFO, "Indexed file",
            path=resolved, document_id=document_id, chunks=len(texts),
        )
        return result

    def index_directory(
        self,
        directory: str | Path,
        cancel_event: threading.Event | None = None,
    ) -> IndexingReport:
        """
        Index every supported file under a directory, in sorted path order.

        Parse failures and partial files are recorded and the run moves on.
        The cancel event is checked before each file.

        Args:
            directory: Root directory to walk recursively
            cancel_event: Optional event that stops the run between files

        Returns:
            IndexingReport: Per-file results and aggregated counts

        Raises:
            ValueError: When directory does not exist or is not a directory
            StoreError: Persistence failed
            DimensionMismatchError: Model returned vectors of another size
        """
        root = Path(directory).expanduser()
        if not root.is_dir():
            raise ValueError(f"Not a directory: {directory}")

        report = IndexingReport(directory=str(root.resolve()))
        files = self.discover_files(root)
        logger.info(f"Found {len(files)} supported files under {report.directory}")

        with self._run_lock:
            for path in files:
                if cancel_event is not None and cancel_event.is_set():
                    logger.warning("Indexing cancelled, stopping before next file")
                    report.cancelled = True
                    break

                try:
                    result = self._index_file(path, force=False)
                except PartialIndexingError as e:
                    result = e.result
                except ParseError as e:
                    log_with_context(
                        logger, logging.WARNING, "Failed to parse file",
                        path=str(path), error=e.message,
                    )
                    result = FileIndexResult(
                        path=str(path.resolve()),
                        status=FileIndexStatus.FAILED,
                        error=e.message,
                    )
                report.results.append(result)

        logger.info(
            f"Indexing finished: {report.indexed} indexed, "
            f"{report.partially_indexed} partial, {report.skipped} skipped, "
            f"{report.failed} failed"
        )
        return report

    def discover_files(self, root: Path) -> list[Path]:
        """
        List supported files under root.

        Args:
            root: Directory to walk

        Returns:
            list[Path]: Files with a supported extension, sorted by path
        """
        return sorted(
            path
            for path in root.rglob("*")
            if path.is_file() and path.suffix.lower() in self._extensions
        )
