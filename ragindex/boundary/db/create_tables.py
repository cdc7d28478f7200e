"""
Database table creation.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, ragindex.configs
System role: Database schema initialization

Usage:
    python -m ragindex.boundary.db.create_tables
"""

import logging

from sqlalchemy.engine import Engine

from ragindex.boundary.db.base import Base
from ragindex.boundary.db.connection import get_engine

# Import all models to register them with Base.metadata
from ragindex.boundary.db.models.document_model import DocumentModel  # noqa: F401
from ragindex.boundary.db.models.chunk_model import ChunkModel  # noqa: F401
from ragindex.boundary.db.models.embedding_model import EmbeddingModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables(engine: Engine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Target engine (defaults to one built from settings)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Index tables are ready")


def drop_all_tables(engine: Engine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Prefer SQLiteVectorStore.clear_index()
    which keeps the schema.

    Args:
        engine: Target engine (defaults to one built from settings)
    """
    engine = engine or get_engine()
    Base.metadata.drop_all(bind=engine)
    logger.info("All index tables dropped")


if __name__ == "__main__":
    create_all_tables()
