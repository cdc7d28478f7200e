"""
Document domain models.

A Document is one parsed source file. Its path is the identity used for
the "already indexed" check; rows are never updated in place.

Dependencies: pydantic
System role: Document data contract shared by parsers, store and API
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DocumentKind(str, Enum):
    """Supported source formats."""

    MARKDOWN = "MARKDOWN"
    PDF = "PDF"


class DocumentMetadata(BaseModel):
    """
    Typed metadata extracted by parsers.

    Markdown parsers fill headers_count/first_header, PDF parsers fill
    pages/title/author/subject. Unset keys are omitted when persisted.
    """

    model_config = ConfigDict(extra="ignore")

    filename: str | None = Field(default=None, description="Base name of the source file")
    size: int | None = Field(default=None, ge=0, description="File size in bytes")
    headers_count: int | None = Field(default=None, ge=0, description="Markdown header count")
    first_header: str | None = Field(default=None, description="Text of the first Markdown header")
    pages: int | None = Field(default=None, ge=0, description="PDF page count")
    title: str | None = Field(default=None, description="PDF title")
    author: str | None = Field(default=None, description="PDF author")
    subject: str | None = Field(default=None, description="PDF subject")

    def to_json_dict(self) -> dict:
        """Return the metadata as a JSON-ready dict without null keys."""
        return self.model_dump(exclude_none=True)


class Document(BaseModel):
    """Parsed source document, unsaved when id is None."""

    id: int | None = Field(default=None, description="Store-assigned identifier")
    path: str = Field(description="Absolute path of the source file (unique)")
    kind: DocumentKind = Field(description="Source format")
    content: str = Field(description="Full extracted text")
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DocumentSummary(BaseModel):
    """Document listing entry with indexing progress."""

    id: int
    path: str
    kind: DocumentKind
    created_at: datetime
    chunk_count: int = Field(ge=0)
    embedding_count: int = Field(ge=0)

    @property
    def is_complete(self) -> bool:
        return self.embedding_count >= self.chunk_count
