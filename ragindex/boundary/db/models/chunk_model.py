"""
Chunk ORM model.

Dependencies: sqlalchemy, ragindex.boundary.db.base
System role: Chunk persistence for the index
"""

from sqlalchemy import JSON, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ragindex.boundary.db.base import Base, IntegerIdMixin


class ChunkModel(Base, IntegerIdMixin):
    """
    Chunk ORM model.

    Attributes:
        id: Integer primary key
        document_id: Owning document (foreign key)
        content: Chunk text including overlap
        chunk_index: 0-based position within the document
        metadata_json: Optional string map

    Relationships:
        document: Many-to-one with DocumentModel
        embedding: One-to-one with EmbeddingModel
    """

    __tablename__ = "chunks"

    document_id: Mapped[int] = mapped_column(
        ForeignKey("documents.id"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)
    metadata_json: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    document = relationship("DocumentModel", back_populates="chunks")
    embedding = relationship(
        "EmbeddingModel",
        back_populates="chunk",
        uselist=False,
        passive_deletes=True,
    )
