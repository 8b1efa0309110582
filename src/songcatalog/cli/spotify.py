"""Spotify CLI commands."""

import click

from songcatalog.cli.database import fail, open_engine, url_option
from songcatalog.core.data.database import session_scope
from songcatalog.core.data.errors import CatalogError
from songcatalog.core.platform.spotify.auth import create_spotify_client
from songcatalog.core.platform.spotify.sync import SpotifyCatalogSync


@click.group(name="spotify")
def spotify():
    """Spotify import commands."""
    pass


@spotify.command(name="sync", help="Import the tracks of a Spotify playlist")
@click.argument("playlist_id")
@url_option
def sync(playlist_id: str, url: str | None) -> None:
    """Copy a playlist's tracks, albums, covers and artists into the catalog.

    Args:
        playlist_id: The Spotify playlist ID
        url: Optional database URL
    """
    try:
        client = create_spotify_client()
    except ValueError as e:
        fail(e)

    engine = open_engine(url)
    try:
        with session_scope(engine) as session:
            result = SpotifyCatalogSync(client=client, session=session).sync_playlist(playlist_id)
    except CatalogError as e:
        fail(e)
    finally:
        engine.dispose()

    click.secho(
        f"Added {result.songs_added} songs, {result.albums_added} albums, "
        f"{result.covers_added} covers and {result.artists_added} artists "
        f"({result.songs_skipped} skipped)",
        fg="green",
    )
    for warning in result.warnings:
        click.secho(warning, fg="yellow")
