"""
Indexing result models and schemas.

Per-file outcomes of the indexing pipeline and the aggregated report of
a directory run, plus the HTTP request schemas that trigger them.

Dependencies: pydantic
System role: Indexing pipeline reporting contracts
"""

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class FileIndexStatus(str, Enum):
    """Terminal state of one file in an indexing run."""

    INDEXED = "INDEXED"
    PARTIALLY_INDEXED = "PARTIALLY_INDEXED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


class FileIndexResult(BaseModel):
    """Outcome of indexing a single file."""

    path: str
    status: FileIndexStatus
    document_id: int | None = None
    total_chunks: int = Field(default=0, ge=0)
    successful_chunks: int = Field(default=0, ge=0)
    failed_chunks: int = Field(default=0, ge=0)
    error: str | None = Field(default=None, description="Failure reason when FAILED")


class IndexingReport(BaseModel):
    """Aggregated outcome of a directory indexing run."""

    directory: str
    results: list[FileIndexResult] = Field(default_factory=list)
    cancelled: bool = False

    def _count(self, status: FileIndexStatus) -> int:
        return sum(1 for result in self.results if result.status == status)

    @computed_field
    @property
    def indexed(self) -> int:
        return self._count(FileIndexStatus.INDEXED)

    @computed_field
    @property
    def partially_indexed(self) -> int:
        return self._count(FileIndexStatus.PARTIALLY_INDEXED)

    @computed_field
    @property
    def skipped(self) -> int:
        return self._count(FileIndexStatus.SKIPPED)

    @computed_field
    @property
    def failed(self) -> int:
        return self._count(FileIndexStatus.FAILED)

    @property
    def has_errors(self) -> bool:
        return self.failed > 0 or self.partially_indexed > 0


class IndexDirectoryRequest(BaseModel):
    """Request schema for indexing a directory tree."""

    directory: str = Field(min_length=1, description="Directory to walk recursively")


class IndexFileRequest(BaseModel):
    """Request schema for indexing one file."""

    path: str = Field(min_length=1, description="File to index")
    force: bool = Field(
        default=False,
        description="Delete an existing document for this path and re-index it",
    )
