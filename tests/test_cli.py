from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from surfrad.cli.app import app
from surfrad.services.reader import build_default_reader
from surfrad.settings import get_settings

SAMPLE_PATH = Path(__file__).parent / "data" / "tbl_sample.dat"


@pytest.fixture()
def runner(monkeypatch) -> CliRunner:
    monkeypatch.setattr("surfrad.cli.app.configure_logging", lambda level=None: None)
    monkeypatch.delenv("SURFRAD_DEBUG", raising=False)
    get_settings.cache_clear()
    build_default_reader.cache_clear()
    yield CliRunner()
    build_default_reader.cache_clear()
    get_settings.cache_clear()


def test_inspect_renders_summary(runner: CliRunner) -> None:
    result = runner.invoke(app, ["inspect", str(SAMPLE_PATH)])

    assert result.exit_code == 0
    assert "name: Table Mountain" in result.stdout
    assert "code: tbl" in result.stdout
    assert "entry_count: 4" in result.stdout
    assert "status: partial" in result.stdout
    assert "line 5 [line_too_short]" in result.stdout
    assert "line 6 [incomplete_record]" in result.stdout


def test_inspect_limits_listed_errors(runner: CliRunner) -> None:
    result = runner.invoke(app, ["inspect", str(SAMPLE_PATH), "--max-errors", "1"])

    assert result.exit_code == 0
    assert "line 5 [line_too_short]" in result.stdout
    assert "line 6" not in result.stdout
    assert "... 1 more" in result.stdout


def test_inspect_json_output(runner: CliRunner) -> None:
    result = runner.invoke(app, ["inspect", str(SAMPLE_PATH), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["station_code"] == "tbl"
    assert payload["entry_count"] == 4
    assert [issue["line_number"] for issue in payload["issues"]] == [5, 6]


def test_inspect_failed_parse_exits_nonzero(runner: CliRunner, tmp_path) -> None:
    path = tmp_path / "broken.dat"
    path.write_text("Desert Rock\n36.62\n")

    result = runner.invoke(app, ["inspect", str(path)])

    assert result.exit_code == 1
    assert "status: failed" in result.stdout
    assert "[structural]" in result.stdout


def test_stations_lists_registry(runner: CliRunner) -> None:
    result = runner.invoke(app, ["stations"])

    assert result.exit_code == 0
    assert "bon: Bondville" in result.stdout
    assert "sxf: Sioux Falls" in result.stdout
