"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIdMixin, CreatedAtMixin: Model building blocks
  - get_engine(), get_session_factory(), session_scope(): Connection management
  - create_all_tables(): Idempotent schema creation
  - DocumentModel, ChunkModel, EmbeddingModel: Index tables
  - document_crud, chunk_crud, embedding_crud: CRUD operation singletons

Dependencies: sqlalchemy, ragindex.configs
System role: Database adapter providing persistent storage for documents,
chunks and embedding vectors.
"""

from ragindex.boundary.db.base import Base, CreatedAtMixin, IntegerIdMixin
from ragindex.boundary.db.connection import (
    get_engine,
    get_session_factory,
    session_scope,
)
from ragindex.boundary.db.create_tables import create_all_tables, drop_all_tables
from ragindex.boundary.db.models import ChunkModel, DocumentModel, EmbeddingModel
from ragindex.boundary.db.CRUD import (
    BaseCRUD,
    ChunkCRUD,
    DocumentCRUD,
    EmbeddingCRUD,
    chunk_crud,
    document_crud,
    embedding_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "IntegerIdMixin",
    # Connection
    "get_engine",
    "get_session_factory",
    "session_scope",
    "create_all_tables",
    "drop_all_tables",
    # Models
    "DocumentModel",
    "ChunkModel",
    "EmbeddingModel",
    # CRUD classes
    "BaseCRUD",
    "DocumentCRUD",
    "ChunkCRUD",
    "EmbeddingCRUD",
    # CRUD singletons
    "document_crud",
    "chunk_crud",
    "embedding_crud",
]
