"""
Tests for SQLiteVectorStore.

Runs against a temp-file database so WAL and foreign key pragmas apply.
"""

import pytest

from ragindex.boundary.vdb import SQLiteVectorStore
from ragindex.configs import DatabaseSettings
from ragindex.core.exceptions import DimensionMismatchError, StoreError
from ragindex.models import (
    Chunk,
    Document,
    DocumentKind,
    DocumentMetadata,
    Embedding,
    IndexStatistics,
)


def make_document(path: str = "/docs/a.md", content: str = "alpha beta") -> Document:
    return Document(
        path=path,
        kind=DocumentKind.MARKDOWN,
        content=content,
        metadata=DocumentMetadata(filename=path.rsplit("/", 1)[-1], size=len(content)),
    )


@pytest.fixture
def document_id(store: SQLiteVectorStore) -> int:
    return store.insert_document(make_document())


class TestSchemaAndConnection:
    def test_pragmas_should_be_applied_to_connections(self, store: SQLiteVectorStore) -> None:
        with store.engine.connect() as conn:
            journal_mode = conn.exec_driver_sql("PRAGMA journal_mode").scalar()
            foreign_keys = conn.exec_driver_sql("PRAGMA foreign_keys").scalar()

        assert journal_mode.lower() == "wal"
        assert foreign_keys == 1

    def test_reopening_should_keep_existing_rows(
        self, store: SQLiteVectorStore, db_settings: DatabaseSettings
    ) -> None:
        store.insert_document(make_document())

        reopened = SQLiteVectorStore.from_settings(db_settings)
        try:
            assert reopened.get_statistics().document_count == 1
        finally:
            reopened.close()

    def test_ping_should_return_true(self, store: SQLiteVectorStore) -> None:
        assert store.ping() is True

    def test_memory_database_should_share_one_connection(self) -> None:
        memory_store = SQLiteVectorStore.from_settings(DatabaseSettings(path=":memory:"))
        try:
            memory_store.insert_document(make_document())
            assert memory_store.get_document_by_path("/docs/a.md") is not None
        finally:
            memory_store.close()


class TestDocuments:
    def test_insert_document_should_assign_id_and_roundtrip_metadata(
        self, store: SQLiteVectorStore
    ) -> None:
        # Arrange
        document = make_document()

        # Act
        document_id = store.insert_document(document)
        stored = store.get_document(document_id)

        # Assert
        assert document_id > 0
        assert stored is not None
        assert stored.path == "/docs/a.md"
        assert stored.kind == DocumentKind.MARKDOWN
        assert stored.metadata.filename == "a.md"
        assert stored.metadata.pages is None

    def test_get_document_by_path_should_return_none_when_unknown(
        self, store: SQLiteVectorStore
    ) -> None:
        assert store.get_document_by_path("/nowhere.md") is None
        assert store.get_document(12345) is None

    def test_duplicate_path_should_raise_store_error(
        self, store: SQLiteVectorStore, document_id: int
    ) -> None:
        with pytest.raises(StoreError) as exc_info:
            store.insert_document(make_document())

        assert exc_info.value.details["operation"] == "insert_document"

    def test_get_all_documents_should_be_ordered_by_id(self, store: SQLiteVectorStore) -> None:
        first = store.insert_document(make_document("/docs/b.md"))
        second = store.insert_document(make_document("/docs/a.md"))

        assert [doc.id for doc in store.get_all_documents()] == [first, second]


class TestChunksAndEmbeddings:
    def test_chunks_should_be_returned_in_chunk_index_order(
        self, store: SQLiteVectorStore, document_id: int
    ) -> None:
        # Arrange
        for index in (2, 0, 1):
            store.insert_chunk(
                Chunk(document_id=document_id, content=f"part {index}", chunk_index=index)
            )

        # Act
        chunks = store.get_chunks_by_document_id(document_id)

        # Assert
        assert [chunk.chunk_index for chunk in chunks] == [0, 1, 2]
        assert chunks[0].content == "part 0"

    def test_chunk_for_missing_document_should_raise_store_error(
        self, store: SQLiteVectorStore
    ) -> None:
        with pytest.raises(StoreError):
            store.insert_chunk(Chunk(document_id=999, content="orphan", chunk_index=0))

    def test_scan_should_skip_chunks_without_embedding(
        self, store: SQLiteVectorStore, document_id: int
    ) -> None:
        # Arrange
        embedded = store.insert_chunk(Chunk(document_id=document_id, content="a", chunk_index=0))
        store.insert_chunk(Chunk(document_id=document_id, content="b", chunk_index=1))
        store.insert_embedding(Embedding(chunk_id=embedded, vector=[1.0, 0.5]))

        # Act
        pairs = store.get_all_chunks_with_embeddings()

        # Assert
        assert len(pairs) == 1
        chunk, embedding = pairs[0]
        assert chunk.id == embedded
        assert embedding.vector == [1.0, 0.5]

    def test_dimension_mismatch_should_be_rejected(
        self, store: SQLiteVectorStore, document_id: int
    ) -> None:
        first = store.insert_chunk(Chunk(document_id=document_id, content="a", chunk_index=0))
        second = store.insert_chunk(Chunk(document_id=document_id, content="b", chunk_index=1))
        store.insert_embedding(Embedding(chunk_id=first, vector=[1.0, 2.0, 3.0]))

        with pytest.raises(DimensionMismatchError) as exc_info:
            store.insert_embedding(Embedding(chunk_id=second, vector=[1.0, 2.0]))

        assert (exc_info.value.expected, exc_info.value.actual) == (3, 2)
        assert store.get_statistics().embedding_count == 1

    def test_empty_vector_should_raise_value_error(
        self, store: SQLiteVectorStore, document_id: int
    ) -> None:
        chunk_id = store.insert_chunk(Chunk(document_id=document_id, content="a", chunk_index=0))

        with pytest.raises(ValueError):
            store.insert_embedding(Embedding(chunk_id=chunk_id, vector=[]))

    def test_second_embedding_for_chunk_should_raise_store_error(
        self, store: SQLiteVectorStore, document_id: int
    ) -> None:
        chunk_id = store.insert_chunk(Chunk(document_id=document_id, content="a", chunk_index=0))
        store.insert_embedding(Embedding(chunk_id=chunk_id, vector=[1.0]))

        with pytest.raises(StoreError):
            store.insert_embedding(Embedding(chunk_id=chunk_id, vector=[2.0]))


class TestStatisticsAndDeletion:
    @pytest.fixture
    def partial_document(self, store: SQLiteVectorStore, document_id: int) -> int:
        """Document with two chunks, only the first embedded."""
        first = store.insert_chunk(Chunk(document_id=document_id, content="a", chunk_index=0))
        store.insert_chunk(Chunk(document_id=document_id, content="b", chunk_index=1))
        store.insert_embedding(Embedding(chunk_id=first, vector=[1.0, 0.0]))
        return document_id

    def test_statistics_should_report_missing_embeddings(
        self, store: SQLiteVectorStore, partial_document: int
    ) -> None:
        stats = store.get_statistics()

        assert stats == IndexStatistics(document_count=1, chunk_count=2, embedding_count=1)
        assert stats.missing_embeddings == 1

    def test_incomplete_documents_should_list_partial_document(
        self, store: SQLiteVectorStore, partial_document: int
    ) -> None:
        # Arrange
        complete_id = store.insert_document(make_document("/docs/complete.md"))
        chunk_id = store.insert_chunk(Chunk(document_id=complete_id, content="c", chunk_index=0))
        store.insert_embedding(Embedding(chunk_id=chunk_id, vector=[0.0, 1.0]))

        # Act
        summaries = store.list_documents()
        incomplete = store.get_incomplete_documents()

        # Assert
        assert [(s.chunk_count, s.embedding_count) for s in summaries] == [(2, 1), (1, 1)]
        assert [s.id for s in incomplete] == [partial_document]

    def test_delete_document_should_remove_its_rows(
        self, store: SQLiteVectorStore, partial_document: int
    ) -> None:
        # Act
        deleted = store.delete_document(partial_document)

        # Assert
        assert deleted is True
        assert store.get_document(partial_document) is None
        assert store.get_statistics() == IndexStatistics(
            document_count=0, chunk_count=0, embedding_count=0
        )

    def test_delete_unknown_document_should_return_false(self, store: SQLiteVectorStore) -> None:
        assert store.delete_document(4242) is False

    def test_clear_index_should_empty_every_table(
        self, store: SQLiteVectorStore, partial_document: int
    ) -> None:
        store.clear_index()

        assert store.get_statistics() == IndexStatistics(
            document_count=0, chunk_count=0, embedding_count=0
        )
        assert store.get_all_chunks_with_embeddings() == []
