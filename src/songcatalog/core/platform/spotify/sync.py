"""Import Spotify playlists into the song catalog."""

from typing import Any

import spotipy
from loguru import logger
from sqlalchemy.orm import Session

from songcatalog.core.data.database import get_session
from songcatalog.core.data.errors import UniquenessViolation
from songcatalog.core.data.repositories import (
    AlbumCoverRepository,
    AlbumRepository,
    ArtistRepository,
    SongRepository,
)
from songcatalog.core.data.types import SyncResult
from songcatalog.core.platform.spotify.auth import create_spotify_client
from songcatalog.core.platform.spotify.models import SpotifyTrackDict, largest_image


class SpotifyCatalogSync:
    """Copies the tracks of a Spotify playlist into the catalog tables.

    Rows that already exist are kept as they are: an album that is already
    known keeps its cover, and a song that is already known keeps its artists.
    """

    def __init__(self, client: spotipy.Spotify | None = None, session: Session | None = None):
        """Initialize the sync.

        Args:
            client: Spotify client (created from .env credentials if None)
            session: SQLAlchemy session (creates a new one if not provided)
        """
        self.client = client or create_spotify_client()
        self.session = session or get_session()
        self.albums = AlbumRepository(self.session)
        self.covers = AlbumCoverRepository(self.session)
        self.songs = SongRepository(self.session)
        self.artists = ArtistRepository(self.session)

    def fetch_playlist_tracks(self, playlist_id: str) -> list[SpotifyTrackDict]:
        """Get all tracks in a playlist.

        Args:
            playlist_id: The Spotify playlist ID

        Returns:
            List of track payloads, episodes and removed tracks excluded
        """
        tracks: list[SpotifyTrackDict] = []
        results = self.client.playlist_items(playlist_id)

        while results:
            for item in results["items"]:
                # Skip null tracks (can happen with removed songs)
                track = item.get("track") if item else None
                if not track or track.get("type", "track") != "track" or not track.get("id"):
                    continue
                tracks.append(track)

            if results.get("next"):
                results = self.client.next(results)
            else:
                break

        logger.info(f"Fetched {len(tracks)} tracks from playlist {playlist_id}")
        return tracks

    def ingest_track(self, track: SpotifyTrackDict, result: SyncResult | None = None) -> bool:
        """Store one track with its album, cover and artists.

        Args:
            track: Spotify track payload
            result: Counters to update (optional)

        Returns:
            True if the song was added, False if it was already in the catalog
        """
        result = result or SyncResult(playlist_id="")
        album: dict[str, Any] = dict(track.get("album") or {})
        album_id = album.get("id")
        if not album_id:
            result.warnings.append(f"Track {track.get('id')} has no album, skipped")
            logger.warning(f"Track {track.get('id')} has no album, skipped")
            result.songs_skipped += 1
            return False

        try:
            self.albums.add_album(album_id, album.get("name", ""), album.get("album_type", ""))
        except UniquenessViolation:
            logger.debug(f"Album {album_id} already in catalog")
        else:
            result.albums_added += 1
            self._ingest_cover(album_id, album, result)

        artists = track.get("artists") or []
        try:
            self.songs.add_song(
                track["id"],
                track.get("name", ""),
                artists[0].get("name", "") if artists else "",
                album_id,
                track.get("duration_ms", 0),
                track.get("preview_url"),
            )
        except UniquenessViolation:
            logger.debug(f"Song {track['id']} already in catalog")
            result.songs_skipped += 1
            return False
        result.songs_added += 1

        linked: set[str] = set()
        for artist in artists:
            artist_id = artist.get("id")
            if not artist_id or artist_id in linked:
                continue
            linked.add(artist_id)
            try:
                self.artists.add_artist(artist_id, artist.get("name", ""))
                result.artists_added += 1
            except UniquenessViolation:
                logger.debug(f"Artist {artist_id} already in catalog")
            self.artists.link_song(track["id"], artist_id)

        return True

    def _ingest_cover(self, album_id: str, album: dict[str, Any], result: SyncResult) -> None:
        image = largest_image(album.get("images") or [])
        if image is None:
            result.warnings.append(f"Album {album_id} has no sized image, no cover stored")
            logger.warning(f"Album {album_id} has no sized image, no cover stored")
            return

        self.covers.add_cover(album_id, image["url"], image["height"], image["width"])
        result.covers_added += 1

    def sync_playlist(self, playlist_id: str) -> SyncResult:
        """Import every track of a playlist.

        Args:
            playlist_id: The Spotify playlist ID

        Returns:
            Counters of the rows added
        """
        result = SyncResult(playlist_id=playlist_id)
        for track in self.fetch_playlist_tracks(playlist_id):
            self.ingest_track(track, result)

        logger.info(
            f"Synced playlist {playlist_id}: {result.songs_added} songs, "
            f"{result.albums_added} albums, {result.covers_added} covers added"
        )
        return result
