"""
Document ORM model.

One row per successfully parsed source file, keyed by its unique path.

Dependencies: sqlalchemy, ragindex.boundary.db.base
System role: Document persistence for the index
"""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ragindex.boundary.db.base import Base, CreatedAtMixin, IntegerIdMixin


class DocumentModel(Base, IntegerIdMixin, CreatedAtMixin):
    """
    Document ORM model.

    Attributes:
        id: Integer primary key
        path: Absolute source path (unique, basis of the skip check)
        type: Source format (MARKDOWN, PDF)
        content: Full extracted text
        metadata_json: Parser metadata without null keys
        created_at: Insert timestamp (UTC)

    Relationships:
        chunks: One-to-many with ChunkModel
    """

    __tablename__ = "documents"

    path: Mapped[str] = mapped_column(
        String(4096),
        unique=True,
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    metadata_json: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Parser metadata (filename, size, headers, pages, ...)",
    )

    chunks = relationship(
        "ChunkModel",
        back_populates="document",
        order_by="ChunkModel.chunk_index",
        passive_deletes=True,
    )
