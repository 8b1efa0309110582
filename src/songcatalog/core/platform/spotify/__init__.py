"""Spotify integration for the song catalog."""

from songcatalog.core.platform.spotify.sync import SpotifyCatalogSync

__all__ = ["SpotifyCatalogSync"]
