"""This module provides unit tests for cli.main and cli.doctor."""

from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from cli.main import app
from core.config import get_user_env_file
from core.domain.errors import FetchError

runner = CliRunner()

CANONICAL_INPUT = b"3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def _patched_fetcher(**fetch_kwargs):
    fetcher = MagicMock()
    fetcher.fetch = MagicMock(**fetch_kwargs)
    return patch(
        "core.services.similarity_pipeline.AdventInputFetcher", return_value=fetcher
    )


def test_cli_prints_similarity_score(isolated_env, monkeypatch):
    monkeypatch.setenv("SESSION", "secret-token")

    with _patched_fetcher(return_value=CANONICAL_INPUT):
        result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stdout.strip() == "Similarity score: 31"


def test_cli_details_table(isolated_env, monkeypatch):
    monkeypatch.setenv("AOC_SESSION", "secret-token")

    with _patched_fetcher(return_value=CANONICAL_INPUT):
        result = runner.invoke(app, ["--details"])

    assert result.exit_code == 0
    assert "Similarity score: 31" in result.stdout
    assert "Distinct right values" in result.stdout


def test_cli_missing_session_exits_without_request(isolated_env):
    with patch("core.services.similarity_pipeline.AdventInputFetcher") as fetcher_cls:
        result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Similarity score" not in result.stdout
    fetcher_cls.assert_not_called()


def test_cli_fetch_error_exits_non_zero(isolated_env, monkeypatch):
    monkeypatch.setenv("SESSION", "secret-token")
    error = FetchError(
        "HTTP request failed with status code 404, response: Not Found",
        url="https://adventofcode.com/2024/day/1/input",
        status=404,
        body="Not Found",
    )

    with _patched_fetcher(side_effect=error):
        result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Similarity score" not in result.stdout


def test_cli_parse_error_exits_non_zero(isolated_env, monkeypatch):
    monkeypatch.setenv("SESSION", "secret-token")

    with _patched_fetcher(return_value=b"1 2\n3 4 5\n"):
        result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Similarity score" not in result.stdout


def test_doctor_setup_session_writes_user_env(isolated_env):
    result = runner.invoke(app, ["doctor", "setup-session"], input="my-cookie\n")

    assert result.exit_code == 0
    assert "AOC_SESSION=my-cookie" in get_user_env_file().read_text(encoding="utf-8")


def test_doctor_run_reports_missing_session(isolated_env):
    with patch("cli.doctor._check_http", return_value=(True, "HTTP 200")):
        result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "MISSING" in result.stdout


def test_cli_non_ascii_session_reports_error(isolated_env, monkeypatch):
    monkeypatch.setenv("SESSION", "tök")

    with patch("core.services.similarity_pipeline.AdventInputFetcher") as fetcher_cls:
        result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Similarity score" not in result.stdout
    fetcher_cls.assert_not_called()


def test_cli_invalid_configuration_reports_error(isolated_env, monkeypatch):
    monkeypatch.setenv("SESSION", "secret-token")
    monkeypatch.setenv("AOC_BASE_URL", "x")

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Similarity score" not in result.stdout
