"""songcatalog - Spotify song catalog with album cover metadata."""

__version__ = "0.1.0"
