"""Database initialization and migration utilities."""

from pathlib import Path
from typing import TextIO

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from loguru import logger
from sqlalchemy import inspect
from sqlalchemy.engine import Connection, Engine

from songcatalog.core.data.database import get_engine, resolve_database_url

MIGRATIONS_PATH = Path(__file__).parent / "migrations"

# Tables and columns expected once the catalog is at head
REQUIRED_SCHEMA = {
    "spt_albums": ["id", "name", "kind"],
    "spt_artists": ["id", "name"],
    "spt_songs": ["id", "title", "artist", "duration", "preview_url", "album"],
    "spt_songs_spt_artists": ["spt_song_id", "spt_artist_id"],
    "spt_albums_covers": ["album_id", "url", "height", "width"],
}


def get_alembic_config(
    connection: Connection | None = None,
    db_url: str | None = None,
    output_buffer: TextIO | None = None,
) -> Config:
    """Build an Alembic configuration pointing at the packaged migrations.

    Args:
        connection: Connection the migrations should run on (optional)
        db_url: Database URL used when no connection is given (optional)
        output_buffer: Stream receiving offline SQL (default: stdout)

    Returns:
        Alembic Config
    """
    config = Config(output_buffer=output_buffer)
    config.set_main_option("script_location", str(MIGRATIONS_PATH))
    if db_url is not None:
        # ConfigParser interpolation treats % as special
        config.set_main_option("sqlalchemy.url", db_url.replace("%", "%%"))
    if connection is not None:
        config.attributes["connection"] = connection
    return config


def upgrade_database(revision: str = "head", engine: Engine | None = None) -> None:
    """Upgrade the database to a revision inside a single transaction.

    Args:
        revision: Target revision (default: head)
        engine: SQLAlchemy engine (will use the global engine if None)

    Raises:
        MigrationPreconditionError: If the existing data blocks a revision
    """
    engine = engine or get_engine()
    logger.info(f"Upgrading database to revision {revision}")

    with engine.begin() as connection:
        command.upgrade(get_alembic_config(connection), revision)

    logger.info(f"Database now at revision {get_current_revision(engine)}")


def downgrade_database(revision: str, engine: Engine | None = None) -> None:
    """Downgrade the database to a revision inside a single transaction.

    Args:
        revision: Target revision ("base" removes every table)
        engine: SQLAlchemy engine (will use the global engine if None)
    """
    engine = engine or get_engine()
    logger.info(f"Downgrading database to revision {revision}")

    with engine.begin() as connection:
        command.downgrade(get_alembic_config(connection), revision)


def render_upgrade_sql(
    db_url: str | Path, revision: str = "head", output_buffer: TextIO | None = None
) -> None:
    """Write the upgrade SQL without touching the database.

    Args:
        db_url: Database URL or SQLite file path selecting the SQL dialect
        revision: Target revision (default: head)
        output_buffer: Stream receiving the SQL (default: stdout)
    """
    config = get_alembic_config(
        db_url=resolve_database_url(db_url), output_buffer=output_buffer
    )
    command.upgrade(config, revision, sql=True)


def get_current_revision(engine: Engine | None = None) -> str | None:
    """Get the revision the database is currently at.

    Args:
        engine: SQLAlchemy engine (will use the global engine if None)

    Returns:
        The revision ID, or None for an unmigrated database
    """
    engine = engine or get_engine()
    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()


def verify_schema(engine: Engine | None = None) -> bool:
    """Verify that every catalog table and column exists.

    Args:
        engine: SQLAlchemy engine (will use the global engine if None)

    Returns:
        bool: True if schema is valid, False if there are issues
    """
    logger.info("Verifying database schema...")

    inspector = inspect(engine or get_engine())
    tables = inspector.get_table_names()

    missing_tables = [table for table in REQUIRED_SCHEMA if table not in tables]
    if missing_tables:
        logger.error(f"Tables missing: {missing_tables}")
        return False

    valid = True
    for table, required_columns in REQUIRED_SCHEMA.items():
        columns = [col["name"] for col in inspector.get_columns(table)]
        missing_columns = [col for col in required_columns if col not in columns]
        if missing_columns:
            logger.warning(f"{table} is missing columns: {missing_columns}")
            valid = False

    if valid:
        logger.info("Database schema is valid")
    return valid


def initialize_database(db_url: str | Path | None = None) -> bool:
    """Create or upgrade the catalog database to the latest revision.

    Args:
        db_url: Database URL or SQLite file path (default: resolved from the environment)

    Returns:
        bool: True if the resulting schema is valid
    """
    logger.info("Initializing database...")

    engine = get_engine(db_url)
    upgrade_database("head", engine)

    valid = verify_schema(engine)
    if valid:
        logger.success(f"Database initialized at {engine.url}")
    return valid


if __name__ == "__main__":
    initialize_database()
