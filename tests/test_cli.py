"""
Tests for the ragindex command line interface.
"""

import logging
from pathlib import Path

import pytest

from ragindex.application.services import RagService
from ragindex.main import EXIT_ERROR, EXIT_OK, EXIT_PARTIAL, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put pytest's handlers back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def run_cli(rag_service: RagService):
    """Run main() against the temp-store service."""

    def _run(*argv: str, service: RagService | None = None) -> int:
        return main(list(argv), service_factory=lambda: service or rag_service)

    return _run


class TestIndexCommands:
    def test_index_should_print_summary_and_exit_ok(
        self, run_cli, docs_dir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        # Act
        exit_code = run_cli("index", str(docs_dir))

        # Assert
        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert "Indexed: 2, partial: 0, skipped: 0, failed: 0" in out

    def test_second_index_should_report_skips(
        self, run_cli, docs_dir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        run_cli("index", str(docs_dir))
        capsys.readouterr()

        exit_code = run_cli("index", str(docs_dir))

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert out.count("Skipped (already indexed)") == 2

    def test_missing_directory_should_exit_with_error(
        self, run_cli, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        exit_code = run_cli("index", str(tmp_path / "missing"))

        assert exit_code == EXIT_ERROR
        assert capsys.readouterr().err.startswith("Error:")

    def test_partial_file_should_exit_with_partial_status(
        self,
        run_cli,
        store,
        indexing_settings,
        search_settings,
        faulty_client_factory,
        long_markdown: Path,
        capsys: pytest.CaptureFixture,
    ) -> None:
        # Arrange
        service = RagService(store, faulty_client_factory({2}), indexing_settings, search_settings)

        # Act
        exit_code = run_cli("index-file", str(long_markdown), service=service)

        # Assert
        out = capsys.readouterr().out
        assert exit_code == EXIT_PARTIAL
        assert "(2/3 chunks embedded)" in out
        assert "--force" in out

    def test_partial_directory_should_exit_with_partial_status(
        self,
        run_cli,
        store,
        indexing_settings,
        search_settings,
        faulty_client_factory,
        docs_dir: Path,
    ) -> None:
        service = RagService(store, faulty_client_factory({0}), indexing_settings, search_settings)

        assert run_cli("index", str(docs_dir), service=service) == EXIT_PARTIAL

    def test_unsupported_file_should_exit_with_error(
        self, run_cli, docs_dir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        exit_code = run_cli("index-file", str(docs_dir / "notes.txt"))

        assert exit_code == EXIT_ERROR
        assert "Unsupported" in capsys.readouterr().err


class TestQueryCommands:
    def test_search_should_print_ranked_results(
        self, run_cli, docs_dir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        run_cli("index", str(docs_dir))
        capsys.readouterr()

        exit_code = run_cli("search", "python", "database", "--threshold", "0.5")

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert out.startswith("1. [")
        assert "python.md #0" in out

    def test_search_without_matches_should_say_so(
        self, run_cli, docs_dir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        run_cli("index", str(docs_dir))
        capsys.readouterr()

        exit_code = run_cli("search", "music")

        assert exit_code == EXIT_OK
        assert "No results" in capsys.readouterr().out

    def test_search_with_invalid_top_k_should_exit_with_error(self, run_cli) -> None:
        assert run_cli("search", "python", "--top-k", "0") == EXIT_ERROR

    def test_stats_and_list_should_print_counts(
        self, run_cli, docs_dir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        run_cli("index", str(docs_dir))
        capsys.readouterr()

        run_cli("stats")
        run_cli("list")

        out = capsys.readouterr().out
        assert "Documents:  2" in out
        assert "Missing embeddings" not in out
        assert "2 document(s)" in out


class TestClearCommand:
    def test_clear_with_yes_should_empty_index(
        self, run_cli, rag_service: RagService, docs_dir: Path
    ) -> None:
        run_cli("index", str(docs_dir))

        assert run_cli("clear", "--yes") == EXIT_OK
        assert rag_service.stats().document_count == 0

    def test_clear_declined_should_keep_index(
        self,
        run_cli,
        rag_service: RagService,
        docs_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        run_cli("index", str(docs_dir))
        monkeypatch.setattr("builtins.input", lambda prompt: "n")

        assert run_cli("clear") == EXIT_OK
        assert rag_service.stats().document_count == 2


class TestNoCommand:
    def test_no_command_should_print_help_and_fail(self, capsys: pytest.CaptureFixture) -> None:
        assert main([]) == EXIT_ERROR
        assert "usage: ragindex" in capsys.readouterr().out
