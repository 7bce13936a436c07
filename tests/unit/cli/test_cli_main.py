"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from tests.fake_fetcher import ANALYTICS_URL, BASE_URL, MOBILITY_URL, SUMMARY_URL


@pytest.fixture
def cli_env(monkeypatch: pytest.MonkeyPatch, feed_fetcher) -> None:
    """Point the CLI at the fake feeds."""
    monkeypatch.setenv("STATFEED_IMMIGRATION_BASE_URL", BASE_URL)
    monkeypatch.setenv("STATFEED_MOBILITY_URL", MOBILITY_URL)
    monkeypatch.setenv("STATFEED_SUMMARY_URL", SUMMARY_URL)
    monkeypatch.setenv("STATFEED_ANALYTICS_URL", ANALYTICS_URL)
    monkeypatch.setenv("STATFEED_LOG_LEVEL", "error")
    monkeypatch.setattr(
        "cli.main.HttpTextFetcher.from_config",
        classmethod(lambda cls, config: feed_fetcher),
    )


def test_cli_ports_lists_known_ports(capsys) -> None:
    """Ports command should print one id and label per line."""
    exit_code = main(["ports"])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0 and output[0] == "oitaairport\t大分空港"


def test_cli_immigration_prints_latest_breakdown(cli_env, capsys) -> None:
    """Immigration command should print the latest period and rows."""
    exit_code = main(["immigration", "--port", "oitaairport", "--flow", "出国"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "latest_period=2023" in output and "台湾\t0\t40" in output


def test_cli_immigration_writes_csvs(cli_env, capsys, tmp_path: Path) -> None:
    """Immigration command should report written CSV paths."""
    exit_code = main(["immigration", "--category", "韓国", "--output-dir", str(tmp_path)])
    output = capsys.readouterr().out

    assert exit_code == 0 and output.count("csv_path=") == 2
    assert (tmp_path / "trend_oitaairport_入国_韓国.csv").exists()


def test_cli_mobility_prints_ranking_and_summary(cli_env, capsys) -> None:
    """Mobility command should print totals, ranking, and summary months."""
    exit_code = main(["mobility", "--top", "1"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "latest_month=2024-02\nUS\t30\nsummary_months=" in output


def test_cli_analytics_defaults_to_home_country(cli_env, capsys) -> None:
    """Analytics command should default to JP and print its months."""
    exit_code = main(["analytics"])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0 and output == ["country=JP", "2024-01\t5\t4", "2024-02\t13\t10"]


def test_cli_reports_fetch_failures_without_traceback(cli_env, capsys) -> None:
    """Source failures should print a friendly error and exit one."""
    exit_code = main(["immigration", "--port", "unknownport"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=")


def test_cli_rejects_invalid_config(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """Invalid environment config should exit one before any fetch."""
    monkeypatch.setenv("STATFEED_REQUEST_TIMEOUT", "never")

    exit_code = main(["mobility"])

    assert exit_code == 1 and "STATFEED_REQUEST_TIMEOUT" in capsys.readouterr().out
