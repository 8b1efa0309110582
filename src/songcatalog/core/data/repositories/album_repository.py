"""Repositories for albums and artists."""

from sqlalchemy import insert, select

from songcatalog.core.data.schema import albums, artists, song_artists
from songcatalog.core.data.types import Album, Artist, BaseRepository


class AlbumRepository(BaseRepository[Album]):
    """Repository for spt_albums."""

    table = albums
    record_type = Album

    def add_album(self, album_id: str, name: str, kind: str) -> Album:
        """Add an album.

        Args:
            album_id: The Spotify album ID
            name: Album name
            kind: Album type (album, single, compilation)

        Returns:
            The created album
        """
        return self.create({"id": album_id, "name": name, "kind": kind})


class ArtistRepository(BaseRepository[Artist]):
    """Repository for spt_artists and their links to songs."""

    table = artists
    record_type = Artist

    def add_artist(self, artist_id: str, name: str) -> Artist:
        """Add an artist.

        Args:
            artist_id: The Spotify artist ID
            name: Artist name

        Returns:
            The created artist
        """
        return self.create({"id": artist_id, "name": name})

    def link_song(self, song_id: str, artist_id: str) -> None:
        """Credit an artist on a song.

        Args:
            song_id: The song ID
            artist_id: The artist ID
        """
        self._execute_write(
            insert(song_artists).values(spt_song_id=song_id, spt_artist_id=artist_id)
        )

    def get_song_artists(self, song_id: str) -> list[Artist]:
        """Get the artists credited on a song.

        Args:
            song_id: The song ID

        Returns:
            List of artists ordered by name
        """
        rows = self.session.execute(
            select(artists)
            .join(song_artists, song_artists.c.spt_artist_id == artists.c.id)
            .where(song_artists.c.spt_song_id == song_id)
            .order_by(artists.c.name)
        ).all()
        return [self._to_record(row) for row in rows]
