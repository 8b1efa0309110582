"""Song CLI commands."""

import click

from songcatalog.cli.database import open_engine, url_option
from songcatalog.core.data.database import session_scope
from songcatalog.core.data.repositories import SongRepository


def format_duration(duration_ms: int) -> str:
    """Format a duration in milliseconds as m:ss."""
    minutes, seconds = divmod(duration_ms // 1000, 60)
    return f"{minutes}:{seconds:02d}"


@click.group(name="songs")
def songs():
    """Browse the songs in the catalog."""
    pass


@songs.command(name="list", help="List all songs in random order")
@url_option
def list_songs(url: str | None) -> None:
    """Print every song, shuffled."""
    engine = open_engine(url)
    try:
        with session_scope(engine) as session:
            shuffled = SongRepository(session).get_all_shuffled()
    finally:
        engine.dispose()

    for song in shuffled:
        click.echo(f"{song.id}\t{song.artist} - {song.title}")


@songs.command(name="show", help="Show a song with its album and cover")
@click.argument("song_id")
@url_option
def show(song_id: str, url: str | None) -> None:
    """Print the details of a song."""
    engine = open_engine(url)
    try:
        with session_scope(engine) as session:
            details = SongRepository(session).get_song_details(song_id)
    finally:
        engine.dispose()

    if details is None:
        click.secho(f"No song with ID {song_id}", fg="yellow")
        raise SystemExit(1)

    click.echo(f"Title: {details.title}")
    click.echo(f"Duration: {format_duration(details.duration)}")
    click.echo(f"Artist: {details.artist}")
    click.echo(f"Album: {details.album_name} ({details.album_kind})")
    if details.artists:
        click.echo(f"Credits: {', '.join(details.artists)}")
    if details.cover_url:
        click.echo(f"Cover: {details.cover_url}")
    if details.preview_url:
        click.echo(f"Preview: {details.preview_url}")
