"""Main CLI entry point for songcatalog."""

import click

from songcatalog.cli.covers import covers
from songcatalog.cli.database import database
from songcatalog.cli.songs import songs
from songcatalog.cli.spotify import spotify


@click.group()
@click.version_option(package_name="songcatalog")
def cli():
    """songcatalog - Spotify song catalog with album cover metadata."""
    pass


# Add subcommands
cli.add_command(database)
cli.add_command(covers)
cli.add_command(songs)
cli.add_command(spotify)


if __name__ == "__main__":
    cli()
