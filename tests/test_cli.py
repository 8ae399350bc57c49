"""
Tests for the restaurants CLI
"""

from unittest.mock import patch

from click.testing import CliRunner

from restaurants.cli import cli


def test_seed_then_list(tmp_path):
    db_url = f"sqlite:///{tmp_path / 'restaurants.db'}"
    runner = CliRunner()

    seeded = runner.invoke(cli, ["seed", "--database-url", db_url])
    assert seeded.exit_code == 0, seeded.output
    assert "Seeded 3 restaurant(s)" in seeded.output

    listed = runner.invoke(cli, ["list", "--database-url", db_url])
    assert listed.exit_code == 0, listed.output
    assert "Found 3 restaurant(s)" in listed.output
    assert "Name: Campus Pizza" in listed.output
    assert "Budget: LOW  Rating: 2" in listed.output
    assert "Rating: unrated" in listed.output


def test_seed_is_skipped_when_populated(tmp_path):
    db_url = f"sqlite:///{tmp_path / 'restaurants.db'}"
    runner = CliRunner()

    runner.invoke(cli, ["seed", "--database-url", db_url])
    again = runner.invoke(cli, ["seed", "--database-url", db_url])

    assert again.exit_code == 0
    assert "nothing seeded" in again.output


def test_list_empty_database(tmp_path):
    db_url = f"sqlite:///{tmp_path / 'empty.db'}"

    result = CliRunner().invoke(cli, ["list", "--database-url", db_url])

    assert result.exit_code == 0
    assert "No restaurants found." in result.output


def test_serve_passes_options_to_uvicorn():
    with patch("restaurants.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--port", "9000", "--store", "memory"])

    assert result.exit_code == 0, result.output
    args, kwargs = mock_run.call_args
    assert args == ("restaurants.api.app:create_app",)
    assert kwargs["factory"] is True
    assert kwargs["port"] == 9000
