"""Repository package for database access."""

from songcatalog.core.data.repositories.album_cover_repository import AlbumCoverRepository
from songcatalog.core.data.repositories.album_repository import AlbumRepository, ArtistRepository
from songcatalog.core.data.repositories.song_repository import SongRepository

__all__ = [
    "AlbumCoverRepository",
    "AlbumRepository",
    "ArtistRepository",
    "SongRepository",
]
