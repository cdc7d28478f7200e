"""
Tests for RagService.

Exercises the facade end to end against a temp SQLite index and the
keyword embedding client from conftest.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ragindex.application.services import RagService
from ragindex.boundary.ollama import OllamaEmbeddingClient
from ragindex.boundary.vdb import SQLiteVectorStore
from ragindex.configs import DatabaseSettings, SearchSettings, Settings
from ragindex.core.exceptions import PartialIndexingError
from ragindex.models import FileIndexStatus, IndexStatistics


class TestRagServiceIndexing:
    def test_index_should_report_every_supported_file(
        self, rag_service: RagService, docs_dir: Path
    ) -> None:
        # Act
        report = rag_service.index(docs_dir)

        # Assert
        assert report.indexed == 2
        assert report.skipped == 0
        assert report.has_errors is False
        assert rag_service.stats().document_count == 2

    def test_index_twice_should_skip_known_files(
        self, rag_service: RagService, docs_dir: Path
    ) -> None:
        rag_service.index(docs_dir)
        stats_before = rag_service.stats()

        report = rag_service.index(docs_dir)

        assert report.skipped == 2
        assert report.indexed == 0
        assert rag_service.stats() == stats_before

    def test_index_file_should_return_indexed_result(
        self, rag_service: RagService, long_markdown: Path
    ) -> None:
        result = rag_service.index_file(long_markdown)

        assert result.status == FileIndexStatus.INDEXED
        assert result.total_chunks == 3
        assert result.successful_chunks == 3

    def test_partial_file_should_be_listed_as_incomplete_then_forced(
        self,
        store: SQLiteVectorStore,
        indexing_settings,
        search_settings: SearchSettings,
        long_markdown: Path,
        faulty_client_factory,
    ) -> None:
        # Arrange
        client = faulty_client_factory({1})
        service = RagService(store, client, indexing_settings, search_settings)

        # Act
        with pytest.raises(PartialIndexingError):
            service.index_file(long_markdown)
        incomplete = service.incomplete_documents()
        result = service.index_file(long_markdown, force=True)

        # Assert
        assert [summary.path for summary in incomplete] == [str(long_markdown.resolve())]
        assert result.status == FileIndexStatus.INDEXED
        assert service.incomplete_documents() == []
        assert service.stats() == IndexStatistics(
            document_count=1, chunk_count=3, embedding_count=3
        )


class TestRagServiceSearch:
    def test_search_should_use_settings_defaults(
        self, rag_service: RagService, docs_dir: Path
    ) -> None:
        rag_service.index(docs_dir)

        results = rag_service.search("garden cooking")

        assert len(results) == 1
        assert results[0].document.path.endswith("garden.markdown")

    def test_search_arguments_should_override_defaults(
        self, rag_service: RagService, docs_dir: Path
    ) -> None:
        rag_service.index(docs_dir)

        results = rag_service.search("python garden", top_k=1, threshold=0.0)

        assert len(results) == 1

    def test_search_on_empty_index_should_return_empty(self, rag_service: RagService) -> None:
        assert rag_service.search("python") == []


class TestRagServiceMaintenance:
    def test_list_documents_should_include_counts(
        self, rag_service: RagService, docs_dir: Path
    ) -> None:
        rag_service.index(docs_dir)

        summaries = rag_service.list_documents()

        assert len(summaries) == 2
        assert all(summary.is_complete for summary in summaries)

    def test_clear_should_empty_the_index(self, rag_service: RagService, docs_dir: Path) -> None:
        rag_service.index(docs_dir)

        rag_service.clear()

        assert rag_service.stats() == IndexStatistics(
            document_count=0, chunk_count=0, embedding_count=0
        )

    def test_ping_should_report_reachable_database(self, rag_service: RagService) -> None:
        assert rag_service.ping() is True

    def test_close_should_close_client_and_store(
        self, indexing_settings, search_settings: SearchSettings
    ) -> None:
        # Arrange
        store = MagicMock()
        client = MagicMock()
        service = RagService(store, client, indexing_settings, search_settings)

        # Act
        with service:
            pass

        # Assert
        client.close.assert_called_once()
        store.close.assert_called_once()

    def test_from_settings_should_wire_sqlite_and_ollama(self, tmp_path: Path) -> None:
        settings = Settings(database=DatabaseSettings(path=str(tmp_path / "rag.db")))

        with RagService.from_settings(settings) as service:
            assert isinstance(service.store, SQLiteVectorStore)
            assert isinstance(service._embedding_client, OllamaEmbeddingClient)
            assert service.stats().document_count == 0
