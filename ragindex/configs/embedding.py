"""
Embedding service configuration settings.

Points the embedding client at an Ollama-compatible HTTP endpoint.
Timeouts are split so slow model cold-starts do not mask connection failures.

Dependencies: pydantic, pydantic_settings
System role: Embedding client configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ragindex.configs.base import BaseSettings


class EmbeddingSettings(BaseSettings):
    """Embedding service configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:11434",
        description="Embedding service base URL",
    )
    endpoint_path: str = Field(
        default="/api/embeddings",
        description="Path appended to base_url for embedding requests",
    )
    model: str = Field(
        default="nomic-embed-text",
        description="Embedding model name sent with every request",
    )
    request_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Read/write timeout for a single embedding request",
    )
    connect_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for establishing the connection",
    )
