"""Record types and the generic repository base for catalog tables."""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import Row, Table, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from songcatalog.core.data.database import get_session
from songcatalog.core.data.errors import translate_integrity_error


@dataclass(frozen=True)
class Album:
    """Album as stored in spt_albums."""

    id: str
    name: str
    kind: str


@dataclass(frozen=True)
class AlbumCover:
    """Cover image metadata for an album."""

    album_id: str
    url: str
    height: int
    width: int


@dataclass(frozen=True)
class Artist:
    """Artist as stored in spt_artists."""

    id: str
    name: str


@dataclass(frozen=True)
class Song:
    """Song as stored in spt_songs."""

    id: str
    title: str
    artist: str
    duration: int
    album: str
    preview_url: str | None = None


@dataclass(frozen=True)
class SongDetails:
    """A song joined with its album, cover and artists."""

    id: str
    title: str
    artist: str
    duration: int
    preview_url: str | None
    album_id: str
    album_name: str
    album_kind: str
    cover_url: str | None = None
    artists: list[str] = field(default_factory=list)


@dataclass
class SyncResult:
    """Result of importing a playlist into the catalog."""

    playlist_id: str

    albums_added: int = 0
    covers_added: int = 0
    songs_added: int = 0
    artists_added: int = 0
    songs_skipped: int = 0

    warnings: list[str] = field(default_factory=list)

    @property
    def total_added(self) -> int:
        """Total number of rows added."""
        return self.albums_added + self.covers_added + self.songs_added + self.artists_added


RecordType = TypeVar("RecordType")


class BaseRepository(Generic[RecordType]):
    """Base repository with typed methods over a single Core table."""

    table: ClassVar[Table]
    record_type: ClassVar[type]

    def __init__(self, session: Session | None = None) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy session (creates a new one if not provided)
        """
        self.session = session or get_session()

    @property
    def _pk(self):
        return next(iter(self.table.primary_key.columns))

    def _to_record(self, row: Row[Any]) -> RecordType:
        return self.record_type(**row._mapping)

    def _execute_write(self, statement: Any) -> int:
        """Execute and commit a write, translating constraint failures.

        Returns:
            Number of rows affected

        Raises:
            IntegrityViolation: If the engine rejects the write
        """
        try:
            rowcount = self.session.execute(statement).rowcount
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise translate_integrity_error(e) from e
        return rowcount

    def get_by_id(self, entity_id: str) -> RecordType | None:
        """Get an entity by primary key.

        Args:
            entity_id: Primary key value

        Returns:
            The entity or None if not found
        """
        row = self.session.execute(select(self.table).where(self._pk == entity_id)).first()
        return self._to_record(row) if row is not None else None

    def get_all(self) -> list[RecordType]:
        """Get all entities ordered by primary key."""
        rows = self.session.execute(select(self.table).order_by(self._pk)).all()
        return [self._to_record(row) for row in rows]

    def create(self, data: dict[str, Any]) -> RecordType:
        """Create a new entity.

        Columns missing from data are left to the database, so a missing
        mandatory column is reported as a NotNullViolation.

        Args:
            data: Column values

        Returns:
            The created entity
        """
        self._execute_write(insert(self.table).values(**data))
        created = self.get_by_id(data[self._pk.name]) if self._pk.name in data else None
        if created is None:
            raise LookupError(f"Row inserted into {self.table.name} could not be read back")
        return created

    def update(self, entity_id: str, data: dict[str, Any]) -> RecordType | None:
        """Update an entity.

        Args:
            entity_id: Primary key value
            data: Updated column values

        Returns:
            The updated entity or None if not found
        """
        updated = self._execute_write(
            update(self.table).where(self._pk == entity_id).values(**data)
        )
        if updated == 0:
            return None
        return self.get_by_id(data.get(self._pk.name, entity_id))

    def delete(self, entity_id: str) -> bool:
        """Delete an entity.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        return self._execute_write(delete(self.table).where(self._pk == entity_id)) > 0
