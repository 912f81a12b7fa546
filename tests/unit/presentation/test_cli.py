"""Tests for the Typer CLI (no network access needed)."""

import pytest
from typer.testing import CliRunner

from skycast.domain.shared import Failure, Loading, NoConnection, Success
from skycast.domain.weather.value_objects import Forecast, ForecastDay, Location
from skycast.presentation.cli.app import (
    _forecast_table,
    _location_table,
    app,
    render_state,
)

runner = CliRunner()

BOGOTA = Location(
    id=2618724,
    name="Bogotá",
    region="Bogota D.C.",
    country="Colombia",
    lat=4.6,
    lon=-74.08,
)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("SKYCAST_DATA_DIR", str(tmp_path))
    return tmp_path


class TestCommands:
    """End-to-end command invocations against a temporary cache."""

    def test_short_search_query_needs_no_network(self, data_dir):
        result = runner.invoke(app, ["search", "b"])

        assert result.exit_code == 0
        assert "Up to date" in result.output

    def test_forecast_rejects_invalid_days(self, data_dir):
        result = runner.invoke(app, ["forecast", "Bogotá", "--days", "20"])

        assert result.exit_code == 2
        assert "days must be between 1 and 14" in result.output

    def test_forecast_rejects_zero_days(self, data_dir):
        result = runner.invoke(app, ["forecast", "Bogotá", "--days", "0"])

        assert result.exit_code == 2
        assert "days must be between 1 and 14, got 0" in result.output

    def test_db_init_creates_database(self, data_dir):
        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0
        assert (data_dir / "skycast.db").exists()

    def test_db_reset_requires_confirmation(self, data_dir):
        result = runner.invoke(app, ["db", "reset"], input="n\n")

        assert result.exit_code != 0

    def test_db_reset_forced(self, data_dir):
        result = runner.invoke(app, ["db", "reset", "--force"])

        assert result.exit_code == 0
        assert "recreated" in result.output


class TestRendering:
    def test_loading_without_cache(self, capsys):
        render_state(Loading(None), _location_table)

        assert "Loading..." in capsys.readouterr().out

    def test_loading_with_cached_data(self, capsys):
        render_state(Loading([BOGOTA]), _location_table)

        out = capsys.readouterr().out
        assert "cached" in out
        assert "Bogotá" in out

    def test_success_forecast(self, capsys):
        forecast = Forecast(
            location_name="Bogotá",
            days=[
                ForecastDay(
                    date="2025-01-15",
                    avg_temp_c=14.2,
                    condition_text="Partly cloudy",
                    condition_icon_url="https://cdn.weatherapi.com/weather/64x64/day/116.png",
                )
            ],
        )

        render_state(Success(forecast), _forecast_table)

        out = capsys.readouterr().out
        assert "2025-01-15" in out
        assert "14.2" in out

    def test_failure(self, capsys):
        render_state(Failure(NoConnection()), _location_table)

        out = capsys.readouterr().out
        assert "NO_CONNECTION" in out
        assert "No internet connection" in out
