"""Tests for the songcatalog command line interface."""

import pytest
from click.testing import CliRunner

from songcatalog.cli.main import cli
from songcatalog.core.data.database import create_catalog_engine, get_session
from songcatalog.core.data.repositories import AlbumRepository, SongRepository

SET_COVER = ["covers", "set", "A1", "http://x/y.png", "300", "300"]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cli_db(runner, db_path):
    """Database file upgraded to head through the CLI, holding album A1."""
    result = runner.invoke(cli, ["database", "upgrade", "--url", str(db_path)])
    assert result.exit_code == 0, result.output

    engine = create_catalog_engine(db_path)
    session = get_session(engine)
    AlbumRepository(session).add_album("A1", "Album One", "album")
    SongRepository(session).add_song("S1", "Enchanted", "Taylor Swift", "A1", 352000)
    session.close()
    engine.dispose()
    return str(db_path)


def test_current_before_and_after_upgrade(runner, db_path):
    result = runner.invoke(cli, ["database", "current", "--url", str(db_path)])
    assert "No revision applied" in result.output

    runner.invoke(cli, ["database", "upgrade", "--url", str(db_path)])

    result = runner.invoke(cli, ["database", "current", "--url", str(db_path)])
    assert result.output.strip() == "002"


def test_verify(runner, cli_db):
    result = runner.invoke(cli, ["database", "verify", "--url", cli_db])

    assert result.exit_code == 0
    assert "valid" in result.output


def test_upgrade_blocked_by_existing_songs(runner, db_path):
    runner.invoke(cli, ["database", "upgrade", "--revision", "001", "--url", str(db_path)])
    engine = create_catalog_engine(db_path)
    with engine.begin() as conn:
        conn.exec_driver_sql(
            "INSERT INTO spt_songs (id, title, artist, duration) VALUES ('S1', 't', 'a', 1)"
        )
    engine.dispose()

    result = runner.invoke(cli, ["database", "upgrade", "--url", str(db_path)])

    assert result.exit_code == 1
    assert "backfilled" in result.output


def test_set_show_and_remove_cover(runner, cli_db):
    result = runner.invoke(cli, [*SET_COVER, "--url", cli_db])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["covers", "show", "A1", "--url", cli_db])
    assert result.exit_code == 0
    assert "http://x/y.png" in result.output
    assert "300x300" in result.output

    result = runner.invoke(cli, ["covers", "remove", "A1", "--url", cli_db])
    assert result.exit_code == 0

    result = runner.invoke(cli, ["covers", "show", "A1", "--url", cli_db])
    assert result.exit_code == 1


def test_set_cover_for_unknown_album(runner, cli_db):
    result = runner.invoke(
        cli, ["covers", "set", "missing", "http://x/y.png", "300", "300", "--url", cli_db]
    )

    assert result.exit_code == 1
    assert "FOREIGN KEY" in result.output


def test_songs_list_and_show(runner, cli_db):
    runner.invoke(cli, [*SET_COVER, "--url", cli_db])

    result = runner.invoke(cli, ["songs", "list", "--url", cli_db])
    assert "S1\tTaylor Swift - Enchanted" in result.output

    result = runner.invoke(cli, ["songs", "show", "S1", "--url", cli_db])
    assert result.exit_code == 0
    assert "Duration: 5:52" in result.output
    assert "Album: Album One (album)" in result.output
    assert "Cover: http://x/y.png" in result.output


def test_upgrade_sql_accepts_file_path(runner, tmp_path):
    db_path = tmp_path / "offline.db"

    result = runner.invoke(cli, ["database", "upgrade", "--sql", "--url", str(db_path)])

    assert result.exit_code == 0, result.output
    assert "CREATE TABLE spt_albums_covers" in result.output
    assert not db_path.exists()


def test_downgrade_to_unknown_revision(runner, cli_db):
    result = runner.invoke(cli, ["database", "downgrade", "999", "--url", cli_db])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert isinstance(result.exception, SystemExit)


def test_downgrade_to_base(runner, cli_db):
    result = runner.invoke(cli, ["database", "downgrade", "base", "--url", cli_db])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["database", "current", "--url", cli_db])
    assert "No revision applied" in result.output
