"""Data management module for songcatalog."""

from songcatalog.core.data.database import get_engine, get_session, session_scope
from songcatalog.core.data.errors import (
    CatalogError,
    IntegrityViolation,
    MigrationPreconditionError,
    NotNullViolation,
    ReferentialIntegrityError,
    UniquenessViolation,
)
from songcatalog.core.data.init_db import initialize_database, upgrade_database
from songcatalog.core.data.repositories import (
    AlbumCoverRepository,
    AlbumRepository,
    ArtistRepository,
    SongRepository,
)

__all__ = [
    "get_engine",
    "get_session",
    "session_scope",
    "initialize_database",
    "upgrade_database",
    "CatalogError",
    "IntegrityViolation",
    "MigrationPreconditionError",
    "NotNullViolation",
    "ReferentialIntegrityError",
    "UniquenessViolation",
    "AlbumCoverRepository",
    "AlbumRepository",
    "ArtistRepository",
    "SongRepository",
]
