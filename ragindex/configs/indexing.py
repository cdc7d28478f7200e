"""
Indexing pipeline configuration settings.

Chunking geometry, embedding rate limit, and retry policy for index runs.

Dependencies: pydantic, pydantic_settings
System role: Indexing orchestrator configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ragindex.configs.base import BaseSettings


class IndexingSettings(BaseSettings):
    """Settings for the document indexing pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_INDEXING_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=500,
        gt=0,
        description="Maximum chunk size in characters (before overlap)",
    )
    chunk_overlap: int = Field(
        default=50,
        ge=0,
        description="Number of words carried over from the previous chunk",
    )

    # Embedding call pacing
    embedding_delay_seconds: float = Field(
        default=0.1,
        ge=0,
        description="Fixed pause between consecutive embedding calls (0 disables)",
    )
    embedding_max_retries: int = Field(
        default=0,
        ge=0,
        description="Extra attempts per chunk after a failed embedding call",
    )
    retry_backoff_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Base delay for exponential retry backoff",
    )
    max_retry_backoff_seconds: float = Field(
        default=10.0,
        ge=0,
        description="Upper bound for a single retry backoff",
    )

    supported_extensions: list[str] = Field(
        default=[".md", ".markdown", ".pdf"],
        description="File extensions picked up by directory indexing",
    )
