"""
Search configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Default ranking parameters for semantic search
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ragindex.configs.base import BaseSettings


class SearchSettings(BaseSettings):
    """Default top-K and similarity threshold for search."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_SEARCH_",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=5, ge=1, description="Number of top results to retrieve")
    similarity_threshold: float = Field(
        default=0.7,
        ge=-1.0,
        le=1.0,
        description="Minimum cosine similarity for a result to be returned",
    )
