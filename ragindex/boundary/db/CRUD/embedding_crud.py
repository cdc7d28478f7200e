"""
Embedding CRUD operations.

Dependencies: sqlalchemy, ragindex.boundary.db.models
System role: Embedding persistence operations
"""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ragindex.boundary.db.CRUD.base_crud import BaseCRUD
from ragindex.boundary.db.models.chunk_model import ChunkModel
from ragindex.boundary.db.models.embedding_model import EmbeddingModel


class EmbeddingCRUD(BaseCRUD[EmbeddingModel]):
    """CRUD operations for EmbeddingModel, keyed by chunk_id."""

    def __init__(self) -> None:
        """Initialize EmbeddingCRUD with EmbeddingModel."""
        super().__init__(EmbeddingModel, pk_name="chunk_id")

    def get_any(self, session: Session) -> EmbeddingModel | None:
        """
        Retrieve one stored embedding, used to learn the index dimension.

        Args:
            session: Database session

        Returns:
            The embedding with the lowest chunk_id, None when the table is empty
        """
        stmt = select(EmbeddingModel).order_by(EmbeddingModel.chunk_id).limit(1)
        return session.execute(stmt).scalar_one_or_none()

    def delete_by_document_id(self, session: Session, document_id: int) -> int:
        """
        Delete the embeddings of every chunk owned by one document.

        Args:
            session: Database session
            document_id: Owning document id

        Returns:
            Number of embeddings deleted
        """
        chunk_ids = select(ChunkModel.id).where(ChunkModel.document_id == document_id)
        stmt = (
            delete(EmbeddingModel)
            .where(EmbeddingModel.chunk_id.in_(chunk_ids))
            .execution_options(synchronize_session=False)
        )
        return session.execute(stmt).rowcount


embedding_crud = EmbeddingCRUD()
