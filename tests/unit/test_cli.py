"""Тесты CLI: вывод WW<n>, коды выхода, сообщения об ошибках."""

import datetime
import json

import pytest
from typer.testing import CliRunner

from workweek import __version__
from workweek.cli import main as cli_main
from workweek.cli.main import app, run
from workweek.core.domain import PreAnchorPolicy
from workweek.core.errors import DateParseError, InvalidDateError, WorkWeekError

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("WORKWEEK_PRE_ANCHOR_POLICY", raising=False)
    monkeypatch.delenv("WORKWEEK_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


class TestRun:
    """Тесты run(): разбор + расчёт + обёртка ошибок"""

    def test_run(self):
        result = run("2024-01-14")
        assert result.label == "WW2"

    def test_run_parse_error(self):
        with pytest.raises(DateParseError, match="Could not parse the date: 2024-13-01"):
            run("2024-13-01")

    def test_run_wraps_calculation_error(self):
        with pytest.raises(WorkWeekError) as exc_info:
            run("0001-01-01", PreAnchorPolicy.PREVIOUS_YEAR)
        err = exc_info.value
        assert err.message == "Failed to calculate the work week"
        assert isinstance(err.cause, InvalidDateError)


class TestCli:
    """Тесты команды workweek"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("2024-01-07", "WW1"),
            ("2024-01-14", "WW2"),
            ("2023-01-01", "WW1"),
            ("2024-01-01", "WW0"),
            ("2024-12-31", "WW52"),
        ],
    )
    def test_prints_work_week(self, raw, expected):
        result = runner.invoke(app, [raw])
        assert result.exit_code == 0
        assert result.stdout == f"{expected}\n"

    def test_default_date_is_today(self, monkeypatch):
        monkeypatch.setattr(cli_main, "_today", lambda: datetime.date(2024, 1, 14))
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert result.stdout == "WW2\n"

    def test_parse_error(self):
        result = runner.invoke(app, ["2024-13-01"])
        assert result.exit_code == 1
        assert "Error: Could not parse the date: 2024-13-01" in result.output
        assert "Caused by:" in result.output
        assert "WW" not in result.stdout

    def test_calculation_error(self):
        result = runner.invoke(app, ["0001-01-01", "--pre-anchor", "previous_year"])
        assert result.exit_code == 1
        assert "Error: Failed to calculate the work week" in result.output
        assert "Invalid start date" in result.output

    def test_pre_anchor_option(self):
        result = runner.invoke(app, ["2024-01-01", "--pre-anchor", "previous_year"])
        assert result.exit_code == 0
        assert result.stdout == "WW53\n"

    def test_pre_anchor_unsigned(self):
        result = runner.invoke(app, ["2024-01-01", "--pre-anchor", "unsigned"])
        assert result.exit_code == 0
        assert result.stdout == "WW613566756\n"

    def test_pre_anchor_invalid_choice(self):
        result = runner.invoke(app, ["2024-01-01", "--pre-anchor", "iso"])
        assert result.exit_code != 0

    def test_policy_from_env(self, monkeypatch):
        monkeypatch.setenv("WORKWEEK_PRE_ANCHOR_POLICY", "previous_year")
        result = runner.invoke(app, ["2024-01-01"])
        assert result.exit_code == 0
        assert result.stdout == "WW53\n"

    def test_option_overrides_env(self, monkeypatch):
        monkeypatch.setenv("WORKWEEK_PRE_ANCHOR_POLICY", "previous_year")
        result = runner.invoke(app, ["2024-01-01", "--pre-anchor", "zero"])
        assert result.exit_code == 0
        assert result.stdout == "WW0\n"

    def test_invalid_configuration(self, monkeypatch):
        monkeypatch.setenv("WORKWEEK_LOG_LEVEL", "LOUD")
        result = runner.invoke(app, ["2024-01-07"])
        assert result.exit_code == 1
        assert "Error: Invalid configuration" in result.output

    def test_json_output(self):
        result = runner.invoke(app, ["2024-01-01", "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["label"] == "WW0"
        assert payload["anchor"] == "2024-01-07"
        assert payload["pre_anchor"] is True
        assert payload["policy"] == "zero"

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.stdout.strip() == f"workweek {__version__}"

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "YYYY-MM-DD" in result.stdout

    def test_debug_logging(self):
        result = runner.invoke(app, ["2024-01-14", "--debug"])
        assert result.exit_code == 0
        assert "WW2" in result.stdout
        assert "Parsed date 2024-01-14" in result.output
