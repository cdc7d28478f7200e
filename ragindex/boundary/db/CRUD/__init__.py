"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from ragindex.boundary.db.CRUD import document_crud, chunk_crud

    # Use singleton instances
    document = document_crud.get_by_path(db, "/notes/a.md")

    # Or instantiate classes directly for custom behavior
    from ragindex.boundary.db.CRUD import ChunkCRUD
    custom_crud = ChunkCRUD()
"""

from ragindex.boundary.db.CRUD.base_crud import BaseCRUD
from ragindex.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from ragindex.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from ragindex.boundary.db.CRUD.embedding_crud import EmbeddingCRUD, embedding_crud

__all__ = [
    "BaseCRUD",
    "DocumentCRUD",
    "document_crud",
    "ChunkCRUD",
    "chunk_crud",
    "EmbeddingCRUD",
    "embedding_crud",
]
