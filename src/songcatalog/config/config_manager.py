"""Simple configuration management using .env."""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from songcatalog.core.utils.path_helper import get_app_config_path, get_default_db_path

DATABASE_URL_ENV = "SONGCATALOG_DATABASE_URL"

_ENV_LOADED = False


def load_environment() -> Path | None:
    """Load the first .env file found in the usual locations.

    Returns:
        The path of the loaded file, or None if no file was found
    """
    global _ENV_LOADED

    possible_paths = [
        Path(".env"),
        Path(os.path.expanduser("~/.songcatalog/.env")),
        get_app_config_path() / ".env",
    ]

    loaded = None
    for path in possible_paths:
        if path.exists():
            load_dotenv(path)
            logger.info(f"Loaded .env file from {path}")
            loaded = path
            break
    else:
        if not _ENV_LOADED:
            logger.warning("No .env file found")

    _ENV_LOADED = True
    return loaded


def get_database_url() -> str:
    """Resolve the catalog database URL.

    Returns:
        The URL from SONGCATALOG_DATABASE_URL, or a SQLite file in the app data directory
    """
    if not _ENV_LOADED:
        load_environment()

    url = os.getenv(DATABASE_URL_ENV)
    if url:
        return url
    return f"sqlite:///{get_default_db_path()}"


def load_platform_credentials(platform: str) -> dict[str, str]:
    """Load credentials for a specific platform from the environment.

    Args:
        platform: Platform name (only "spotify" is supported)

    Returns:
        Dictionary of credentials that are present
    """
    if not _ENV_LOADED:
        load_environment()

    env_mappings = {
        "spotify": {"client_id": "SPOTIFY_CLIENT_ID", "client_secret": "SPOTIFY_CLIENT_SECRET"},
    }
    if platform not in env_mappings:
        raise ValueError(f"Unknown platform: {platform}")

    credentials = {}
    for key in ["client_id", "client_secret"]:
        value = os.getenv(env_mappings[platform][key])
        if value:
            credentials[key] = value

    return credentials
