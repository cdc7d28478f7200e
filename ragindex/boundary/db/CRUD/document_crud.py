"""
Document CRUD operations.

Extends the generic CRUD with path lookup and per-document progress
counts used for the incomplete-document listing.

Dependencies: sqlalchemy, ragindex.boundary.db.models
System role: Document persistence operations
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ragindex.boundary.db.CRUD.base_crud import BaseCRUD
from ragindex.boundary.db.models.chunk_model import ChunkModel
from ragindex.boundary.db.models.document_model import DocumentModel
from ragindex.boundary.db.models.embedding_model import EmbeddingModel


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """CRUD operations for DocumentModel."""

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    def get_by_path(self, session: Session, path: str) -> DocumentModel | None:
        """
        Retrieve a document by its unique source path.

        Args:
            session: Database session
            path: Absolute source path

        Returns:
            DocumentModel if the path was indexed, None otherwise
        """
        stmt = select(DocumentModel).where(DocumentModel.path == path)
        return session.execute(stmt).scalar_one_or_none()

    def get_with_counts(
        self,
        session: Session,
    ) -> Sequence[tuple[DocumentModel, int, int]]:
        """
        Retrieve every document with its chunk and embedding counts.

        Args:
            session: Database session

        Returns:
            Sequence of (DocumentModel, chunk_count, embedding_count) ordered by id
        """
        stmt = (
            select(
                DocumentModel,
                func.count(ChunkModel.id),
                func.count(EmbeddingModel.chunk_id),
            )
            .outerjoin(ChunkModel, ChunkModel.document_id == DocumentModel.id)
            .outerjoin(EmbeddingModel, EmbeddingModel.chunk_id == ChunkModel.id)
            .group_by(DocumentModel.id)
            .order_by(DocumentModel.id)
        )
        return [tuple(row) for row in session.execute(stmt).all()]


document_crud = DocumentCRUD()
