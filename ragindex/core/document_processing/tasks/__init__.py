"""
Task modules for document processing pipeline.

Exports: ParsingTask, ChunkingTask, EmbeddingTask and the individual parsers
"""

from .chunking_task import SEPARATORS, ChunkingTask
from .embedding_task import EmbeddingTask
from .parsing_task import DocumentParser, MarkdownParser, ParsingTask, PdfParser

__all__ = [
    "SEPARATORS",
    "ChunkingTask",
    "DocumentParser",
    "EmbeddingTask",
    "MarkdownParser",
    "ParsingTask",
    "PdfParser",
]
