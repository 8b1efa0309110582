"""Initial song catalog schema.

Revision ID: 001
Revises:
Create Date: 2023-07-01

"""

import sqlalchemy as sa
from alembic import op

# Revision identifiers
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create albums, artists, songs and the song/artist link table."""
    op.create_table(
        "spt_albums",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("kind", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "spt_artists",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Songs do not reference their album yet
    op.create_table(
        "spt_songs",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("artist", sa.String(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("preview_url", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "spt_songs_spt_artists",
        sa.Column("spt_song_id", sa.String(), nullable=False),
        sa.Column("spt_artist_id", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(["spt_song_id"], ["spt_songs.id"]),
        sa.ForeignKeyConstraint(["spt_artist_id"], ["spt_artists.id"]),
        sa.PrimaryKeyConstraint("spt_song_id", "spt_artist_id"),
    )


def downgrade() -> None:
    """Revert to an empty database."""
    # Drop all tables in reverse dependency order
    op.drop_table("spt_songs_spt_artists")
    op.drop_table("spt_songs")
    op.drop_table("spt_artists")
    op.drop_table("spt_albums")
