"""Tests for songs, albums and artists."""

import pytest

from songcatalog.core.data.errors import (
    NotNullViolation,
    ReferentialIntegrityError,
    UniquenessViolation,
)
from songcatalog.core.data.repositories import (
    AlbumCoverRepository,
    AlbumRepository,
    ArtistRepository,
    SongRepository,
)
from songcatalog.core.data.types import Song


@pytest.fixture
def songs(session):
    return SongRepository(session)


@pytest.fixture
def song_fixture(songs, album_fixture):
    """Creates song S1 on album A1."""
    return songs.add_song("S1", "Enchanted", "Taylor Swift", "A1", 352000, "http://p/s1.mp3")


class TestSongAlbumReference:
    """Every song must belong to an existing album."""

    def test_add_song_with_valid_album(self, songs, song_fixture):
        assert songs.get_by_id("S1") == Song(
            id="S1",
            title="Enchanted",
            artist="Taylor Swift",
            duration=352000,
            album="A1",
            preview_url="http://p/s1.mp3",
        )

    def test_omitted_album_is_rejected(self, songs, album_fixture):
        with pytest.raises(NotNullViolation) as exc_info:
            songs.create({"id": "S1", "title": "Enchanted", "artist": "Taylor Swift", "duration": 1})

        assert exc_info.value.column == "album"
        assert songs.get_all() == []

    def test_none_album_is_rejected(self, songs, album_fixture):
        with pytest.raises(NotNullViolation):
            songs.add_song("S1", "Enchanted", "Taylor Swift", None, 352000)

    def test_unknown_album_is_rejected(self, songs, album_fixture):
        with pytest.raises(ReferentialIntegrityError):
            songs.add_song("S1", "Enchanted", "Taylor Swift", "missing", 352000)

    def test_reassign_to_unknown_album_is_rejected(self, songs, song_fixture):
        with pytest.raises(ReferentialIntegrityError):
            songs.update("S1", {"album": "missing"})

        assert songs.get_by_id("S1").album == "A1"

    def test_reassign_to_other_album(self, session, songs, song_fixture):
        AlbumRepository(session).add_album("A2", "Album Two", "single")

        song = songs.update("S1", {"album": "A2"})

        assert song.album == "A2"
        assert songs.get_songs_for_album("A1") == []

    def test_duplicate_song_is_rejected(self, songs, song_fixture):
        with pytest.raises(UniquenessViolation):
            songs.add_song("S1", "Enchanted", "Taylor Swift", "A1", 352000)

    def test_preview_url_is_optional(self, songs, album_fixture):
        song = songs.add_song("S2", "Mine", "Taylor Swift", "A1", 230000)

        assert song.preview_url is None


class TestSongQueries:
    """Reading songs back."""

    def test_songs_for_album(self, songs, song_fixture):
        songs.add_song("S2", "Back to December", "Taylor Swift", "A1", 293000)

        titles = [song.title for song in songs.get_songs_for_album("A1")]

        assert titles == ["Back to December", "Enchanted"]

    def test_all_shuffled_returns_every_song(self, songs, song_fixture):
        songs.add_song("S2", "Back to December", "Taylor Swift", "A1", 293000)
        songs.add_song("S3", "Mine", "Taylor Swift", "A1", 230000)

        assert sorted(song.id for song in songs.get_all_shuffled()) == ["S1", "S2", "S3"]

    def test_song_details(self, session, songs, song_fixture):
        AlbumCoverRepository(session).add_cover("A1", "http://x/a1.png", 640, 640)
        artists = ArtistRepository(session)
        artists.add_artist("R1", "Taylor Swift")
        artists.add_artist("R2", "Aaron Dessner")
        artists.link_song("S1", "R1")
        artists.link_song("S1", "R2")

        details = songs.get_song_details("S1")

        assert details.title == "Enchanted"
        assert details.album_name == "Album One"
        assert details.album_kind == "album"
        assert details.cover_url == "http://x/a1.png"
        assert details.artists == ["Aaron Dessner", "Taylor Swift"]

    def test_song_details_without_cover(self, songs, song_fixture):
        details = songs.get_song_details("S1")

        assert details.cover_url is None
        assert details.artists == []

    def test_song_details_unknown_song(self, songs, album_fixture):
        assert songs.get_song_details("missing") is None


class TestArtists:
    """Artist credits on songs."""

    def test_link_unknown_artist_is_rejected(self, session, song_fixture):
        with pytest.raises(ReferentialIntegrityError):
            ArtistRepository(session).link_song("S1", "missing")

    def test_duplicate_link_is_rejected(self, session, song_fixture):
        artists = ArtistRepository(session)
        artists.add_artist("R1", "Taylor Swift")
        artists.link_song("S1", "R1")

        with pytest.raises(UniquenessViolation):
            artists.link_song("S1", "R1")
