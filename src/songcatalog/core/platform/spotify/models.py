"""Spotify API payload types used by the catalog sync."""

from typing import Any, TypedDict


class SpotifyImageDict(TypedDict, total=False):
    """TypedDict for Spotify image data."""

    url: str
    height: int | None
    width: int | None


class SpotifyArtistDict(TypedDict, total=False):
    """TypedDict for Spotify artist data."""

    id: str
    name: str
    uri: str
    type: str


class SpotifyAlbumDict(TypedDict, total=False):
    """TypedDict for Spotify album data."""

    id: str
    name: str
    album_type: str
    uri: str
    images: list[SpotifyImageDict]
    release_date: str
    artists: list[SpotifyArtistDict]


class SpotifyTrackDict(TypedDict, total=False):
    """TypedDict for Spotify track data."""

    id: str
    name: str
    uri: str
    type: str
    duration_ms: int
    preview_url: str | None
    artists: list[SpotifyArtistDict]
    album: SpotifyAlbumDict


class SpotifyPlaylistItemDict(TypedDict, total=False):
    """TypedDict for an entry of a playlist's items page."""

    added_at: str
    track: SpotifyTrackDict | dict[str, Any] | None


def largest_image(images: list[SpotifyImageDict]) -> SpotifyImageDict | None:
    """Pick the tallest image that reports both dimensions.

    Args:
        images: Images of an album

    Returns:
        The tallest image, or None when no image has a height and a width
    """
    sized = [
        image
        for image in images
        if image.get("url") and image.get("height") is not None and image.get("width") is not None
    ]
    if not sized:
        return None
    return max(sized, key=lambda image: image["height"])
