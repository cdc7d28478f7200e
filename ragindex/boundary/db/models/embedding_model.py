"""
Embedding ORM model.

The vector is stored as a big-endian blob, see
ragindex.boundary.vdb.vector_codec.

Dependencies: sqlalchemy, ragindex.boundary.db.base
System role: Vector persistence for the index
"""

from sqlalchemy import ForeignKey, LargeBinary
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ragindex.boundary.db.base import Base


class EmbeddingModel(Base):
    """
    Embedding ORM model (1:1 with ChunkModel).

    Attributes:
        chunk_id: Owning chunk, also the primary key
        vector: Encoded float32 vector
    """

    __tablename__ = "embeddings"

    chunk_id: Mapped[int] = mapped_column(
        ForeignKey("chunks.id"),
        primary_key=True,
    )
    vector: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    chunk = relationship("ChunkModel", back_populates="embedding")
