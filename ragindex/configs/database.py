"""
Database configuration settings.

Manages the SQLite file that holds documents, chunks, and embeddings.
Journal mode and busy timeout let searches read while an index run writes.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ragindex.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """SQLite database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    path: str = Field(default="./data/rag.db", description="SQLite database file path")
    busy_timeout_ms: int = Field(
        default=5000,
        ge=0,
        description="How long a connection waits on a locked database before failing",
    )
    journal_mode: str = Field(
        default="WAL",
        description="SQLite journal mode (WAL allows readers during writes)",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def database_url(self) -> str:
        """
        Construct SQLite connection URL.

        Returns:
            str: SQLAlchemy-compatible database URL
        """
        if self.path == ":memory:":
            return "sqlite://"
        return f"sqlite:///{Path(self.path).expanduser()}"
