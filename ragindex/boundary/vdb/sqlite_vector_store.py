"""
SQLite-backed vector store.

Persists documents, chunks and embedding vectors and serves the full
(chunk, embedding) scan used by brute-force similarity search.

Each insert is its own committed transaction; a chunk whose embedding
failed stays in the store and shows up as a shortfall in statistics.
Writes go through one in-process lock; readers rely on WAL mode and the
busy timeout configured on the engine.

Dependencies: sqlalchemy, numpy, ragindex.boundary.db
System role: Vector store adapter for indexing and retrieval
"""

import logging
import threading
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ragindex.boundary.db.connection import (
    get_engine,
    get_session_factory,
    session_scope,
)
from ragindex.boundary.db.create_tables import create_all_tables
from ragindex.boundary.db.CRUD import chunk_crud, document_crud, embedding_crud
from ragindex.boundary.db.models import ChunkModel, DocumentModel
from ragindex.boundary.vdb.vector_codec import decode_vector, encode_vector
from ragindex.configs import DatabaseSettings
from ragindex.core.exceptions import DimensionMismatchError, StoreError
from ragindex.models import (
    Chunk,
    Document,
    DocumentKind,
    DocumentMetadata,
    DocumentSummary,
    Embedding,
    IndexStatistics,
)

logger = logging.getLogger(__name__)


class SQLiteVectorStore:
    """
    Document, chunk and embedding store on SQLite.

    Attributes:
        engine: SQLAlchemy engine bound to the index database
    """

    def __init__(self, engine: Engine, create_schema: bool = True) -> None:
        """
        Initialize the store on an existing engine.

        Args:
            engine: Engine from ragindex.boundary.db.get_engine()
            create_schema: Create missing tables on startup
        """
        self.engine = engine
        self._session_factory = get_session_factory(engine)
        self._write_lock = threading.RLock()

        if create_schema:
            try:
                create_all_tables(engine)
            except SQLAlchemyError as e:
                raise StoreError(
                    f"Failed to initialize schema: {e}",
                    operation="create_schema",
                ) from e

    @classmethod
    def from_settings(cls, db_config: DatabaseSettings | None = None) -> "SQLiteVectorStore":
        """
        Build a store from database settings.

        Args:
            db_config: Database settings (defaults to application settings)

        Returns:
            SQLiteVectorStore: Store with schema created
        """
        return cls(get_engine(db_config))

    @contextmanager
    def _session(self, operation: str, write: bool = False) -> Generator[Session, None, None]:
        """Open a committed session scope, mapping SQLAlchemy errors to StoreError."""
        lock = self._write_lock if write else None
        if lock is not None:
            lock.acquire()
        try:
            with session_scope(self._session_factory) as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Store operation {operation} failed: {e}")
            raise StoreError(f"{operation} failed: {e}", operation=operation) from e
        finally:
            if lock is not None:
                lock.release()

    # ------------------------------------------------------------------
    # Row conversion
    # ------------------------------------------------------------------

    @staticmethod
    def _to_document(model: DocumentModel) -> Document:
        return Document(
            id=model.id,
            path=model.path,
            kind=DocumentKind(model.type),
            content=model.content,
            metadata=DocumentMetadata.model_validate(model.metadata_json or {}),
            created_at=model.created_at,
        )

    @staticmethod
    def _to_chunk(model: ChunkModel) -> Chunk:
        return Chunk(
            id=model.id,
            document_id=model.document_id,
            content=model.content,
            chunk_index=model.chunk_index,
            metadata=model.metadata_json or {},
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert_document(self, document: Document) -> int:
        """
        Persist a parsed document.

        Args:
            document: Unsaved document (id is ignored)

        Returns:
            int: Assigned document id

        Raises:
            StoreError: On constraint violation (duplicate path) or I/O failure
        """
        with self._session("insert_document", write=True) as session:
            row = document_crud.create(
                session,
                path=document.path,
                type=document.kind.value,
                content=document.content,
                metadata_json=document.metadata.to_json_dict(),
                created_at=document.created_at,
            )
            document_id = row.id
        logger.debug(f"Inserted document {document_id} for {document.path}")
        return document_id

    def insert_chunk(self, chunk: Chunk) -> int:
        """
        Persist one chunk.

        Args:
            chunk: Chunk referencing an existing document

        Returns:
            int: Assigned chunk id

        Raises:
            StoreError: If the owning document does not exist or I/O fails
        """
        with self._session("insert_chunk", write=True) as session:
            row = chunk_crud.create(
                session,
                document_id=chunk.document_id,
                content=chunk.content,
                chunk_index=chunk.chunk_index,
                metadata_json=dict(chunk.metadata),
            )
            return row.id

    def insert_embedding(self, embedding: Embedding) -> None:
        """
        Persist the vector of one chunk.

        The first stored vector fixes the dimensionality of the index.

        Args:
            embedding: Vector for an existing chunk

        Raises:
            ValueError: If the vector is empty
            DimensionMismatchError: If its length differs from stored vectors
            StoreError: If the chunk does not exist, already has a vector, or I/O fails
        """
        if not embedding.vector:
            raise ValueError("Embedding vector must not be empty")

        with self._session("insert_embedding", write=True) as session:
            reference = embedding_crud.get_any(session)
            if reference is not None:
                expected = len(decode_vector(reference.vector))
                if expected != embedding.dimension:
                    raise DimensionMismatchError(
                        expected,
                        embedding.dimension,
                        details={"chunk_id": embedding.chunk_id},
                    )
            embedding_crud.create(
                session,
                chunk_id=embedding.chunk_id,
                vector=encode_vector(embedding.vector),
            )

    def delete_document(self, document_id: int) -> bool:
        """
        Delete one document with its chunks and embeddings.

        Args:
            document_id: Document to remove

        Returns:
            bool: True if the document existed
        """
        with self._session("delete_document", write=True) as session:
            embeddings = embedding_crud.delete_by_document_id(session, document_id)
            chunks = chunk_crud.delete_by_document_id(session, document_id)
            deleted = document_crud.delete_by_id(session, document_id)
        if deleted:
            logger.info(
                f"Deleted document {document_id} "
                f"({chunks} chunks, {embeddings} embeddings)"
            )
        return deleted

    def clear_index(self) -> None:
        """Delete all embeddings, then all chunks, then all documents."""
        with self._session("clear_index", write=True) as session:
            embeddings = embedding_crud.delete_all(session)
            chunks = chunk_crud.delete_all(session)
            documents = document_crud.delete_all(session)
        logger.info(
            f"Cleared index: {documents} documents, {chunks} chunks, "
            f"{embeddings} embeddings"
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_document_by_path(self, path: str) -> Document | None:
        with self._session("get_document_by_path") as session:
            row = document_crud.get_by_path(session, path)
            return self._to_document(row) if row is not None else None

    def get_document(self, document_id: int) -> Document | None:
        with self._session("get_document") as session:
            row = document_crud.get_by_id(session, document_id)
            return self._to_document(row) if row is not None else None

    def get_all_documents(self) -> list[Document]:
        with self._session("get_all_documents") as session:
            return [self._to_document(row) for row in document_crud.get_all(session)]

    def get_chunks_by_document_id(self, document_id: int) -> list[Chunk]:
        """
        Retrieve a document's chunks.

        Args:
            document_id: Owning document id

        Returns:
            list[Chunk]: Chunks ordered by chunk_index
        """
        with self._session("get_chunks_by_document_id") as session:
            rows = chunk_crud.get_by_document_id(session, document_id)
            return [self._to_chunk(row) for row in rows]

    def get_all_chunks_with_embeddings(self) -> list[tuple[Chunk, Embedding]]:
        """
        Scan every embedded chunk with its vector.

        Returns:
            list[tuple[Chunk, Embedding]]: Pairs ordered by chunk id
        """
        with self._session("get_all_chunks_with_embeddings") as session:
            return [
                (
                    self._to_chunk(chunk_row),
                    Embedding(
                        chunk_id=embedding_row.chunk_id,
                        vector=decode_vector(embedding_row.vector),
                    ),
                )
                for chunk_row, embedding_row in chunk_crud.get_all_with_embeddings(session)
            ]

    def list_documents(self) -> list[DocumentSummary]:
        """
        List documents with chunk and embedding counts.

        Returns:
            list[DocumentSummary]: One entry per document ordered by id
        """
        with self._session("list_documents") as session:
            return [
                DocumentSummary(
                    id=row.id,
                    path=row.path,
                    kind=DocumentKind(row.type),
                    created_at=row.created_at,
                    chunk_count=chunk_count,
                    embedding_count=embedding_count,
                )
                for row, chunk_count, embedding_count in document_crud.get_with_counts(session)
            ]

    def get_incomplete_documents(self) -> list[DocumentSummary]:
        """
        List documents that have chunks without an embedding.

        Returns:
            list[DocumentSummary]: Partially indexed documents
        """
        return [summary for summary in self.list_documents() if not summary.is_complete]

    def get_statistics(self) -> IndexStatistics:
        with self._session("get_statistics") as session:
            return IndexStatistics(
                document_count=document_crud.count(session),
                chunk_count=chunk_crud.count(session),
                embedding_count=embedding_crud.count(session),
            )

    def ping(self) -> bool:
        """
        Check that the database answers a trivial query.

        Returns:
            bool: True when SELECT 1 succeeds

        Raises:
            StoreError: If the database is unreachable
        """
        with self._session("ping") as session:
            return session.execute(text("SELECT 1")).scalar_one() == 1

    def close(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()
