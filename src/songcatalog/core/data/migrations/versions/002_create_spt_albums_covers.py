"""Add album covers and link songs to their album.

Revision ID: 002
Revises: 001
Create Date: 2023-07-14

"""

import sqlalchemy as sa
from alembic import context, op

from songcatalog.core.data.errors import MigrationPreconditionError

# Revision identifiers
revision = "002"
down_revision = "001"
branch_labels = None
depends_on = None

song_artists = sa.table(
    "spt_songs_spt_artists",
    sa.column("spt_song_id", sa.String),
    sa.column("spt_artist_id", sa.String),
)


def _check_songs_empty() -> None:
    """Refuse to add the mandatory album column to a populated song table."""
    row_count = op.get_bind().execute(sa.text("SELECT COUNT(*) FROM spt_songs")).scalar_one()
    if row_count:
        raise MigrationPreconditionError(
            f"spt_songs already holds {row_count} row(s); spt_songs.album is NOT NULL "
            "without a default, so existing songs must be backfilled before this revision",
            table="spt_songs",
            row_count=row_count,
        )


def upgrade() -> None:
    """Create the album cover table and add the album reference to songs."""
    # Checked before any DDL so a failure leaves the schema untouched
    if not context.is_offline_mode():
        _check_songs_empty()

    # One cover per album, keyed by the album itself
    op.create_table(
        "spt_albums_covers",
        sa.Column("album_id", sa.String(), nullable=False),
        sa.Column("url", sa.String(), nullable=False),
        sa.Column("height", sa.Integer(), nullable=False),
        sa.Column("width", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["album_id"], ["spt_albums.id"]),
        sa.PrimaryKeyConstraint("album_id"),
    )

    # Column-level REFERENCES so SQLite keeps the constraint on ADD COLUMN
    op.execute("ALTER TABLE spt_songs ADD album VARCHAR NOT NULL REFERENCES spt_albums(id)")


def downgrade() -> None:
    """Revert database changes."""
    # The rebuild below drops spt_songs, which fails while links reference it
    links = []
    if not context.is_offline_mode():
        links = [
            dict(row._mapping)
            for row in op.get_bind().execute(
                sa.text("SELECT spt_song_id, spt_artist_id FROM spt_songs_spt_artists")
            )
        ]
    op.execute("DELETE FROM spt_songs_spt_artists")

    # SQLite cannot drop a column used by a foreign key, so rebuild the table
    with op.batch_alter_table("spt_songs") as batch_op:
        batch_op.drop_column("album")

    if links:
        op.bulk_insert(song_artists, links)

    op.drop_table("spt_albums_covers")
