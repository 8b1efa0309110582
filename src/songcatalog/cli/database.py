"""Database CLI commands."""

from typing import NoReturn

import click
from alembic.util import CommandError
from loguru import logger
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from songcatalog.config.config_manager import get_database_url
from songcatalog.core.data.database import create_catalog_engine
from songcatalog.core.data.errors import CatalogError
from songcatalog.core.data.init_db import (
    downgrade_database,
    get_current_revision,
    render_upgrade_sql,
    upgrade_database,
    verify_schema,
)

url_option = click.option(
    "--url",
    envvar="SONGCATALOG_DATABASE_URL",
    help="Database URL or SQLite file path (default: app data directory)",
)


def open_engine(url: str | None) -> Engine:
    """Create an engine for a CLI command.

    Args:
        url: Database URL or SQLite file path, resolved from the environment if None

    Returns:
        SQLAlchemy engine
    """
    return create_catalog_engine(url or get_database_url())


def fail(error: Exception) -> NoReturn:
    """Report a catalog error and exit with status 1."""
    click.secho(f"Error: {error}", fg="red", err=True)
    raise SystemExit(1)


@click.group(name="database")
def database():
    """Database management commands for the song catalog."""
    pass


@database.command(name="upgrade", help="Apply migrations up to a revision")
@click.option("--revision", default="head", show_default=True, help="Target revision")
@click.option("--sql", is_flag=True, help="Print the SQL instead of running it")
@url_option
def upgrade(revision: str, sql: bool, url: str | None) -> None:
    """Upgrade the catalog database.

    Args:
        revision: Target revision
        sql: Whether to only print the SQL
        url: Optional database URL
    """
    if sql:
        render_upgrade_sql(url or get_database_url(), revision)
        return

    engine = open_engine(url)
    try:
        upgrade_database(revision, engine)
    except (CatalogError, CommandError, SQLAlchemyError) as e:
        logger.error(f"Migration failed: {e}")
        fail(e)
    finally:
        engine.dispose()

    click.secho(f"Database upgraded to {revision}", fg="green")


@database.command(name="downgrade", help="Revert migrations down to a revision")
@click.argument("revision")
@url_option
def downgrade(revision: str, url: str | None) -> None:
    """Downgrade the catalog database.

    Args:
        revision: Target revision ("base" removes every table)
        url: Optional database URL
    """
    engine = open_engine(url)
    try:
        downgrade_database(revision, engine)
    except (CommandError, SQLAlchemyError) as e:
        logger.error(f"Downgrade failed: {e}")
        fail(e)
    finally:
        engine.dispose()

    click.secho(f"Database downgraded to {revision}", fg="green")


@database.command(name="current", help="Show the current revision")
@url_option
def current(url: str | None) -> None:
    """Print the revision the database is at."""
    engine = open_engine(url)
    try:
        revision = get_current_revision(engine)
    finally:
        engine.dispose()

    click.echo(revision or "No revision applied")


@database.command(name="verify", help="Check that all catalog tables exist")
@url_option
def verify(url: str | None) -> None:
    """Verify the catalog schema."""
    engine = open_engine(url)
    try:
        valid = verify_schema(engine)
    finally:
        engine.dispose()

    if not valid:
        click.secho("Database schema is incomplete, run 'songcatalog database upgrade'", fg="red")
        raise SystemExit(1)
    click.secho("Database schema is valid", fg="green")
