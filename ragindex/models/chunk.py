"""
Chunk domain model.

A Chunk is one fragment emitted by the chunker for a document, numbered
by its 0-based position in emission order.

Dependencies: pydantic
System role: Document chunk data structure
"""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Document chunk model."""

    id: int | None = Field(default=None, description="Store-assigned identifier")
    document_id: int = Field(description="Owning document identifier")
    content: str = Field(description="Chunk text content, overlap included")
    chunk_index: int = Field(ge=0, description="Position within the document")
    metadata: dict[str, str] = Field(default_factory=dict, description="Chunk metadata")
