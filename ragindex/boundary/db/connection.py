"""
Database connection management.

Provides the SQLAlchemy engine for the SQLite index file, the session
factory, and a transactional session scope.

Every new DBAPI connection gets the configured journal mode, busy
timeout and foreign key enforcement through a "connect" event.

Dependencies: sqlalchemy, ragindex.configs
System role: Database connection lifecycle management
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ragindex.configs import DatabaseSettings, get_settings

logger = logging.getLogger(__name__)


def _apply_pragmas(engine: Engine, db_config: DatabaseSettings) -> None:
    """Register the PRAGMA hook run on each new DBAPI connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute(f"PRAGMA journal_mode={db_config.journal_mode}")
            cursor.execute(f"PRAGMA busy_timeout={int(db_config.busy_timeout_ms)}")
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()


def get_engine(db_config: DatabaseSettings | None = None) -> Engine:
    """
    Create SQLAlchemy engine for the SQLite index.

    File databases get their parent directory created. In-memory
    databases share one connection (StaticPool) so every session sees
    the same data.

    Args:
        db_config: Database settings (defaults to application settings)

    Returns:
        Engine: Configured SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_engine()
        with engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
    """
    db_config = db_config or get_settings().database

    connect_args = {
        "check_same_thread": False,
        "timeout": db_config.busy_timeout_ms / 1000,
    }

    if db_config.path == ":memory:":
        engine = create_engine(
            db_config.database_url,
            echo=db_config.echo_sql,
            connect_args=connect_args,
            poolclass=StaticPool,
        )
    else:
        Path(db_config.path).expanduser().parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            db_config.database_url,
            echo=db_config.echo_sql,
            connect_args=connect_args,
        )

    _apply_pragmas(engine, db_config)
    logger.debug(f"Created engine for {db_config.database_url}")
    return engine


def get_session_factory(engine: Engine) -> sessionmaker:
    """
    Create session factory for database operations.

    Returns sessionmaker bound to engine with autoflush=False and
    expire_on_commit=False so ORM rows stay readable after commit.

    Args:
        engine: Engine returned by get_engine()

    Returns:
        sessionmaker: Session factory configured for manual transaction control
    """
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Provide a transactional scope around a series of operations.

    Commits when the block exits cleanly, rolls back and re-raises
    otherwise, and always closes the session.

    Args:
        session_factory: Factory returned by get_session_factory()

    Yields:
        Session: SQLAlchemy database session

    Usage:
        with session_scope(factory) as session:
            document_crud.create(session, path="/tmp/a.md", ...)
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
