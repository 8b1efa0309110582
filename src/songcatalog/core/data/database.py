"""Database connection and session management for songcatalog."""

import threading
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from songcatalog.config.config_manager import get_database_url
from songcatalog.core.data.errors import CatalogError

# Global engine instance shared by all repositories
_ENGINE: Engine | None = None
_ENGINE_LOCK = threading.RLock()

# Global session factory
_SESSION_FACTORY: sessionmaker[Session] | None = None


def resolve_database_url(db_url: str | Path) -> str:
    """Turn a bare filesystem path into a SQLite URL, leaving URLs as they are."""
    if isinstance(db_url, Path) or "://" not in str(db_url):
        return f"sqlite:///{Path(db_url).resolve()}"
    return str(db_url)


def create_catalog_engine(db_url: str | Path) -> Engine:
    """Create a new SQLAlchemy engine for the catalog database.

    A bare filesystem path is treated as a SQLite database file.

    Args:
        db_url: Database URL or path to a SQLite file

    Returns:
        SQLAlchemy engine
    """
    url = make_url(resolve_database_url(db_url))
    if url.get_backend_name() != "sqlite":
        engine = create_engine(url, echo=False)
        logger.debug(f"Created database engine for {url.render_as_string(hide_password=True)}")
        return engine

    in_memory = url.database in (None, "", ":memory:")
    if not in_memory:
        Path(url.database).resolve().parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        url,
        echo=False,
        # Disable connection pooling for SQLite files - prevents lock issues
        poolclass=StaticPool if in_memory else NullPool,
        connect_args={"check_same_thread": False, "timeout": 120.0},
    )
    _install_sqlite_hooks(engine)
    logger.debug(f"Created database engine for {url}")
    return engine


def _install_sqlite_hooks(engine: Engine) -> None:
    """Enforce foreign keys and make DDL transactional on a SQLite engine."""

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        # Hand transaction control to SQLAlchemy so BEGIN also covers DDL
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.execute("PRAGMA busy_timeout = 120000")
        cursor.execute("PRAGMA journal_mode = WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def do_begin(conn: Connection) -> None:
        conn.exec_driver_sql("BEGIN")


def get_engine(db_url: str | Path | None = None) -> Engine:
    """Create or return the shared SQLAlchemy engine.

    Args:
        db_url: Database URL (default: resolved from the environment)

    Returns:
        SQLAlchemy engine
    """
    global _ENGINE

    with _ENGINE_LOCK:
        if _ENGINE is None:
            _ENGINE = create_catalog_engine(db_url or get_database_url())

    return _ENGINE


def dispose_engine() -> None:
    """Dispose the shared engine and forget the session factory."""
    global _ENGINE, _SESSION_FACTORY

    with _ENGINE_LOCK:
        if _ENGINE is not None:
            _ENGINE.dispose()
        _ENGINE = None
        _SESSION_FACTORY = None


def get_session_factory(engine: Engine | None = None) -> sessionmaker[Session]:
    """Create or return a session factory.

    Args:
        engine: SQLAlchemy engine (a dedicated factory is built when given)

    Returns:
        Session factory
    """
    global _SESSION_FACTORY

    if engine is not None:
        return sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)

    with _ENGINE_LOCK:
        if _SESSION_FACTORY is None:
            _SESSION_FACTORY = sessionmaker(
                bind=get_engine(),
                expire_on_commit=False,  # Prevents additional queries after commit
                autoflush=False,  # Only flush when explicitly called or on commit
            )

    return _SESSION_FACTORY


def get_session(engine: Engine | None = None) -> Session:
    """Create and return a new database session.

    NOTE: It's recommended to use session_scope() instead of this function
    to ensure proper session cleanup.

    Args:
        engine: SQLAlchemy engine (will use the global engine if None)

    Returns:
        SQLAlchemy session
    """
    return get_session_factory(engine)()


@contextmanager
def session_scope(engine: Engine | None = None) -> Generator[Session, None, None]:
    """Provide a transactional scope around a series of operations.

    Example:
        with session_scope() as session:
            AlbumCoverRepository(session).get_cover("A1")
    """
    session = get_session(engine)
    try:
        yield session
        session.commit()
    except CatalogError as e:
        # Rejected writes are reported by the caller
        logger.debug(f"Session rolled back: {e}")
        session.rollback()
        raise
    except Exception as e:
        logger.exception(f"Session error: {e}")
        session.rollback()
        raise
    finally:
        session.close()
