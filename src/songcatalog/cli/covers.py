"""Album cover CLI commands."""

import click

from songcatalog.cli.database import fail, open_engine, url_option
from songcatalog.core.data.database import session_scope
from songcatalog.core.data.errors import CatalogError
from songcatalog.core.data.repositories import AlbumCoverRepository


@click.group(name="covers")
def covers():
    """Inspect and edit album covers."""
    pass


@covers.command(name="show", help="Show the cover of an album")
@click.argument("album_id")
@url_option
def show(album_id: str, url: str | None) -> None:
    """Print the cover stored for an album."""
    engine = open_engine(url)
    try:
        with session_scope(engine) as session:
            cover = AlbumCoverRepository(session).get_cover(album_id)
    finally:
        engine.dispose()

    if cover is None:
        click.secho(f"No cover for album {album_id}", fg="yellow")
        raise SystemExit(1)
    click.echo(f"{cover.album_id}\t{cover.url}\t{cover.width}x{cover.height}")


@covers.command(name="set", help="Set or replace the cover of an album")
@click.argument("album_id")
@click.argument("cover_url")
@click.argument("height", type=int)
@click.argument("width", type=int)
@url_option
def set_cover(album_id: str, cover_url: str, height: int, width: int, url: str | None) -> None:
    """Store a cover for an album, replacing any existing one."""
    engine = open_engine(url)
    try:
        with session_scope(engine) as session:
            AlbumCoverRepository(session).replace_cover(album_id, cover_url, height, width)
    except CatalogError as e:
        fail(e)
    finally:
        engine.dispose()

    click.secho(f"Cover stored for album {album_id}", fg="green")


@covers.command(name="remove", help="Remove the cover of an album")
@click.argument("album_id")
@url_option
def remove(album_id: str, url: str | None) -> None:
    """Delete the cover stored for an album."""
    engine = open_engine(url)
    try:
        with session_scope(engine) as session:
            removed = AlbumCoverRepository(session).remove_cover(album_id)
    finally:
        engine.dispose()

    if not removed:
        click.secho(f"No cover for album {album_id}", fg="yellow")
        return
    click.secho(f"Cover removed for album {album_id}", fg="green")
