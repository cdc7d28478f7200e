"""
Database models package.

Exports:
  - DocumentModel: Parsed source file row
  - ChunkModel: Text fragment row owned by a document
  - EmbeddingModel: Vector blob row owned by a chunk

Dependencies: sqlalchemy, ragindex.boundary.db.base
System role: Database model definitions for the index tables
"""

from ragindex.boundary.db.models.document_model import DocumentModel
from ragindex.boundary.db.models.chunk_model import ChunkModel
from ragindex.boundary.db.models.embedding_model import EmbeddingModel

__all__ = [
    "DocumentModel",
    "ChunkModel",
    "EmbeddingModel",
]
