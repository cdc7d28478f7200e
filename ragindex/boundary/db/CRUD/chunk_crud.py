"""
Chunk CRUD operations.

Dependencies: sqlalchemy, ragindex.boundary.db.models
System role: Chunk persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ragindex.boundary.db.CRUD.base_crud import BaseCRUD
from ragindex.boundary.db.models.chunk_model import ChunkModel
from ragindex.boundary.db.models.embedding_model import EmbeddingModel


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """CRUD operations for ChunkModel."""

    def __init__(self) -> None:
        """Initialize ChunkCRUD with ChunkModel."""
        super().__init__(ChunkModel)

    def get_by_document_id(
        self,
        session: Session,
        document_id: int,
    ) -> Sequence[ChunkModel]:
        """
        Retrieve a document's chunks in chunk_index order.

        Args:
            session: Database session
            document_id: Owning document id

        Returns:
            Sequence of ChunkModels ordered by chunk_index
        """
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.document_id == document_id)
            .order_by(ChunkModel.chunk_index)
        )
        return session.execute(stmt).scalars().all()

    def get_all_with_embeddings(
        self,
        session: Session,
    ) -> Sequence[tuple[ChunkModel, EmbeddingModel]]:
        """
        Retrieve every chunk that has an embedding, paired with it.

        Full table scan; chunks without an embedding are left out.

        Args:
            session: Database session

        Returns:
            Sequence of (ChunkModel, EmbeddingModel) ordered by chunk id
        """
        stmt = (
            select(ChunkModel, EmbeddingModel)
            .join(EmbeddingModel, EmbeddingModel.chunk_id == ChunkModel.id)
            .order_by(ChunkModel.id)
        )
        return [tuple(row) for row in session.execute(stmt).all()]

    def delete_by_document_id(self, session: Session, document_id: int) -> int:
        """
        Delete all chunks of one document.

        Embeddings must be removed first (see EmbeddingCRUD).

        Args:
            session: Database session
            document_id: Owning document id

        Returns:
            Number of chunks deleted
        """
        stmt = (
            delete(ChunkModel)
            .where(ChunkModel.document_id == document_id)
            .execution_options(synchronize_session=False)
        )
        return session.execute(stmt).rowcount


chunk_crud = ChunkCRUD()
