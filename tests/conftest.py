"""
Shared test fixtures and configuration for entire test suite.

Provides: temp-file SQLite store, fake and faulty embedding clients,
sample document trees, a wired RagService
Dependencies: pytest, sqlalchemy, httpx
System role: Test infrastructure and fixture management
"""

from pathlib import Path

import pytest

from ragindex.application.services import RagService
from ragindex.boundary.vdb import SQLiteVectorStore
from ragindex.configs import DatabaseSettings, IndexingSettings, SearchSettings
from ragindex.core.exceptions import EmbeddingServiceError

VOCABULARY = ("python", "database", "vector", "cooking", "garden", "music")


class KeywordEmbeddingClient:
    """Deterministic embedding: one dimension per vocabulary word, valued by its count."""

    def __init__(self, vocabulary: tuple[str, ...] = VOCABULARY) -> None:
        self.vocabulary = vocabulary
        self.calls: list[str] = []

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        lowered = text.lower()
        return [float(lowered.count(word)) for word in self.vocabulary]


class FaultyEmbeddingClient(KeywordEmbeddingClient):
    """Fails on the given 0-based call numbers with a server error."""

    def __init__(self, failing_calls: set[int], status_code: int | None = 500) -> None:
        super().__init__()
        self.failing_calls = failing_calls
        self.status_code = status_code

    def embed(self, text: str) -> list[float]:
        call_number = len(self.calls)
        vector = super().embed(text)
        if call_number in self.failing_calls:
            raise EmbeddingServiceError("simulated failure", status_code=self.status_code)
        return vector


@pytest.fixture
def db_settings(tmp_path: Path) -> DatabaseSettings:
    """Database settings pointing at a temp-file SQLite index."""
    return DatabaseSettings(path=str(tmp_path / "index" / "rag.db"))


@pytest.fixture
def store(db_settings: DatabaseSettings):
    """Provide a fresh SQLite vector store with schema created."""
    vector_store = SQLiteVectorStore.from_settings(db_settings)
    yield vector_store
    vector_store.close()


@pytest.fixture
def indexing_settings() -> IndexingSettings:
    """Small chunks, no pacing delay, no retries."""
    return IndexingSettings(
        chunk_size=200,
        chunk_overlap=5,
        embedding_delay_seconds=0.0,
        embedding_max_retries=0,
    )


@pytest.fixture
def search_settings() -> SearchSettings:
    return SearchSettings(top_k=5, similarity_threshold=0.5)


@pytest.fixture
def embedding_client() -> KeywordEmbeddingClient:
    return KeywordEmbeddingClient()


@pytest.fixture
def rag_service(
    store: SQLiteVectorStore,
    embedding_client: KeywordEmbeddingClient,
    indexing_settings: IndexingSettings,
    search_settings: SearchSettings,
) -> RagService:
    """RagService wired to the temp store and the keyword embedding client."""
    return RagService(
        store=store,
        embedding_client=embedding_client,
        indexing_settings=indexing_settings,
        search_settings=search_settings,
    )


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """
    Sample document tree.

    docs/
      python.md            python + database
      nested/garden.markdown  garden + cooking
      notes.txt            unsupported, ignored
    """
    root = tmp_path / "docs"
    (root / "nested").mkdir(parents=True)
    (root / "python.md").write_text(
        "# Python Guide\n\nPython talks to a database through drivers.\n\n"
        "## Vectors\n\nA vector database stores python embeddings.\n",
        encoding="utf-8",
    )
    (root / "nested" / "garden.markdown").write_text(
        "# Garden\n\nThe garden grows herbs for cooking.\n",
        encoding="utf-8",
    )
    (root / "notes.txt").write_text("python python python", encoding="utf-8")
    return root


@pytest.fixture
def long_markdown(tmp_path: Path) -> Path:
    """Markdown file that splits into exactly three 200-char chunks."""
    paragraphs = [
        ("python " * 20).strip() + " " + "a" * 50,
        ("database " * 15).strip() + " " + "b" * 50,
        ("music " * 20).strip() + " " + "c" * 50,
    ]
    path = tmp_path / "long.md"
    path.write_text("\n\n".join(paragraphs), encoding="utf-8")
    return path


@pytest.fixture
def faulty_client_factory():
    """Build a FaultyEmbeddingClient failing on the given call numbers."""

    def _factory(failing_calls: set[int], status_code: int | None = 500) -> FaultyEmbeddingClient:
        return FaultyEmbeddingClient(failing_calls, status_code=status_code)

    return _factory
