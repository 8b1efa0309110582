"""Shared fixtures for the song catalog tests.

Every test gets its own SQLite file in a temporary directory, migrated with
the packaged Alembic revisions.
"""

import pytest

from songcatalog.core.data.database import create_catalog_engine, get_session
from songcatalog.core.data.init_db import upgrade_database
from songcatalog.core.data.repositories import AlbumRepository


@pytest.fixture
def db_path(tmp_path):
    """Path of the test database file."""
    return tmp_path / "songs.db"


@pytest.fixture
def engine(db_path):
    """Engine on an empty test database."""
    engine = create_catalog_engine(db_path)
    yield engine
    engine.dispose()


@pytest.fixture
def migrated_engine(engine):
    """Engine on a test database upgraded to head."""
    upgrade_database("head", engine)
    return engine


@pytest.fixture
def session(migrated_engine):
    """Session on the migrated test database."""
    session = get_session(migrated_engine)
    yield session
    session.close()


@pytest.fixture
def album_fixture(session):
    """Creates album A1."""
    return AlbumRepository(session).add_album("A1", "Album One", "album")
