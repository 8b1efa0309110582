"""Spotify client construction."""

import spotipy
from loguru import logger
from spotipy.oauth2 import SpotifyClientCredentials

from songcatalog.config.config_manager import load_platform_credentials


def create_spotify_client(
    client_id: str | None = None, client_secret: str | None = None
) -> spotipy.Spotify:
    """Create a Spotify client using the client credentials flow.

    Args:
        client_id: Spotify API client ID (loaded from .env if None)
        client_secret: Spotify API client secret (loaded from .env if None)

    Returns:
        Spotify client

    Raises:
        ValueError: If the credentials are not configured
    """
    if client_id is None or client_secret is None:
        spotify_creds = load_platform_credentials("spotify")
        client_id = client_id or spotify_creds.get("client_id")
        client_secret = client_secret or spotify_creds.get("client_secret")

    if not client_id or not client_secret:
        raise ValueError(
            "Spotify credentials missing: set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET"
        )

    auth_manager = SpotifyClientCredentials(client_id=client_id, client_secret=client_secret)
    logger.debug("Created Spotify client with client credentials")
    return spotipy.Spotify(auth_manager=auth_manager)
