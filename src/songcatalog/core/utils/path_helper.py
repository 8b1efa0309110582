"""Utilities for working with file paths."""

from pathlib import Path

import appdirs

APP_NAME = "songcatalog"
APP_AUTHOR = "songcatalog"


def get_app_data_path() -> Path:
    """Get the application data directory path.

    Creates the directory if it doesn't exist.

    Returns:
        Path: The application data directory path
    """
    app_data_dir = Path(appdirs.user_data_dir(APP_NAME, APP_AUTHOR))

    # Create the directory if it doesn't exist
    app_data_dir.mkdir(parents=True, exist_ok=True)

    return app_data_dir


def get_app_config_path() -> Path:
    """Get the application config directory path.

    Returns:
        Path: The application config directory path
    """
    return Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))


def get_default_db_path() -> Path:
    """Get the default SQLite database file path.

    Returns:
        Path: The database file path inside the app data directory
    """
    return get_app_data_path() / "songs.db"
