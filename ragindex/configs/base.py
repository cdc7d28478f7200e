"""
Base configuration settings.

Shared fields for every ragindex settings class: environment name, debug
flag and log level, read from RAG_-prefixed variables or .env. The
database, embedding, indexing and search settings subclass it with
their own RAG_DB_, RAG_EMBEDDING_, RAG_INDEXING_ and RAG_SEARCH_
prefixes, so a single .env file configures the CLI and the API.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
