"""Repository for songs."""

from sqlalchemy import func, select

from songcatalog.core.data.repositories.album_repository import ArtistRepository
from songcatalog.core.data.schema import album_covers, albums, songs
from songcatalog.core.data.types import BaseRepository, Song, SongDetails


class SongRepository(BaseRepository[Song]):
    """Repository for spt_songs."""

    table = songs
    record_type = Song

    def add_song(
        self,
        song_id: str,
        title: str,
        artist: str,
        album: str,
        duration: int,
        preview_url: str | None = None,
    ) -> Song:
        """Add a song.

        Args:
            song_id: The Spotify track ID
            title: Song title
            artist: Name of the main artist
            album: ID of the album the song belongs to
            duration: Duration in milliseconds
            preview_url: URL of the audio preview (optional)

        Returns:
            The created song

        Raises:
            ReferentialIntegrityError: If the album does not exist
            NotNullViolation: If album or another mandatory field is None
        """
        return self.create(
            {
                "id": song_id,
                "title": title,
                "artist": artist,
                "album": album,
                "duration": duration,
                "preview_url": preview_url,
            }
        )

    def get_songs_for_album(self, album_id: str) -> list[Song]:
        """Get all songs of an album.

        Args:
            album_id: The album ID

        Returns:
            List of songs ordered by title
        """
        rows = self.session.execute(
            select(songs).where(songs.c.album == album_id).order_by(songs.c.title)
        ).all()
        return [self._to_record(row) for row in rows]

    def get_all_shuffled(self) -> list[Song]:
        """Get all songs in random order."""
        rows = self.session.execute(select(songs).order_by(func.random())).all()
        return [self._to_record(row) for row in rows]

    def get_song_details(self, song_id: str) -> SongDetails | None:
        """Get a song together with its album, cover and artists.

        Args:
            song_id: The song ID

        Returns:
            The song details if found, None otherwise
        """
        row = self.session.execute(
            select(
                songs,
                albums.c.name.label("album_name"),
                albums.c.kind.label("album_kind"),
                album_covers.c.url.label("cover_url"),
            )
            .join(albums, albums.c.id == songs.c.album)
            .outerjoin(album_covers, album_covers.c.album_id == songs.c.album)
            .where(songs.c.id == song_id)
        ).first()
        if row is None:
            return None

        credited = ArtistRepository(self.session).get_song_artists(song_id)
        return SongDetails(
            id=row.id,
            title=row.title,
            artist=row.artist,
            duration=row.duration,
            preview_url=row.preview_url,
            album_id=row.album,
            album_name=row.album_name,
            album_kind=row.album_kind,
            cover_url=row.cover_url,
            artists=[artist.name for artist in credited],
        )
