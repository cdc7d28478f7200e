"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from ragindex.configs.database import DatabaseSettings
from ragindex.configs.embedding import EmbeddingSettings
from ragindex.configs.indexing import IndexingSettings
from ragindex.configs.search import SearchSettings
from ragindex.configs.settings import Settings, get_settings

__all__ = [
    "DatabaseSettings",
    "EmbeddingSettings",
    "IndexingSettings",
    "SearchSettings",
    "Settings",
    "get_settings",
]
