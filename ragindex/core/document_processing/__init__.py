"""
Document processing pipeline for indexing.

Parsing, chunking, embedding and persistence of local documents.

Dependencies: pypdf, httpx, sqlalchemy, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .entrypoint import IndexingPipeline
from .tasks import ChunkingTask, EmbeddingTask, MarkdownParser, ParsingTask, PdfParser

__all__ = [
    "IndexingPipeline",
    "ChunkingTask",
    "EmbeddingTask",
    "MarkdownParser",
    "ParsingTask",
    "PdfParser",
]
