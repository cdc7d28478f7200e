"""
Vector database boundary layer.

Provides the SQLite vector store used for indexing and brute-force
similarity search, and the blob codec for stored vectors.

Dependencies: sqlalchemy, numpy
System role: Vector store adapter for RAG retrieval
"""

from ragindex.boundary.vdb.sqlite_vector_store import SQLiteVectorStore
from ragindex.boundary.vdb.vector_codec import decode_vector, encode_vector

__all__ = [
    "SQLiteVectorStore",
    "decode_vector",
    "encode_vector",
]
