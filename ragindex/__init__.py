"""
ragindex: local document indexing and semantic search.

Markdown and PDF files are chunked, embedded through an Ollama-compatible
service and stored in SQLite; queries are answered by cosine ranking.
"""

__version__ = "0.1.0"
