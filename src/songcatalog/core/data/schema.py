"""Table definitions for the song catalog.

These Core tables mirror the schema produced by the Alembic revisions and are
only used to build statements; the migrations remain the source of truth.
"""

from sqlalchemy import Column, ForeignKey, Integer, MetaData, String, Table

metadata = MetaData()

albums = Table(
    "spt_albums",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("kind", String, nullable=False),
)

artists = Table(
    "spt_artists",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
)

songs = Table(
    "spt_songs",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String, nullable=False),
    Column("artist", String, nullable=False),
    Column("duration", Integer, nullable=False),
    Column("preview_url", String, nullable=True),
    Column("album", String, ForeignKey("spt_albums.id"), nullable=False),
)

song_artists = Table(
    "spt_songs_spt_artists",
    metadata,
    Column("spt_song_id", String, ForeignKey("spt_songs.id"), primary_key=True),
    Column("spt_artist_id", String, ForeignKey("spt_artists.id"), primary_key=True),
)

album_covers = Table(
    "spt_albums_covers",
    metadata,
    Column("album_id", String, ForeignKey("spt_albums.id"), primary_key=True),
    Column("url", String, nullable=False),
    Column("height", Integer, nullable=False),
    Column("width", Integer, nullable=False),
)
