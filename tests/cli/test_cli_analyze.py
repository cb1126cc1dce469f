"""Tests for the analyze command."""

import json

import pytest
from typer.testing import CliRunner

from datavizpro.cli import app
from datavizpro.core.config import get_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run each command from an empty directory with fresh settings."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def measurements_csv(tmp_path):
    path = tmp_path / "measurements.csv"
    path.write_text("x,y,label\n1,2,a\n2,4,b\n3,6,a\n")
    return path


class TestAnalyzeCommand:
    """Tests for `datavizpro analyze`."""

    def test_table_output(self, measurements_csv):
        result = runner.invoke(app, ["analyze", str(measurements_csv)])

        assert result.exit_code == 0, result.output
        assert "Column Types" in result.output
        assert "numeric" in result.output
        assert "histogram" in result.output
        assert "scatter" in result.output

    def test_json_output(self, measurements_csv):
        result = runner.invoke(app, ["analyze", str(measurements_csv), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["column_types"] == {"x": "numeric", "y": "numeric", "label": "string"}
        assert data["correlations"][0]["coefficient"] == pytest.approx(1.0)
        assert data["chart_recommendations"][0]["chart_type"] == "scatter"

    def test_top_limits_recommendations(self, measurements_csv):
        result = runner.invoke(app, ["analyze", str(measurements_csv), "--top", "0"])

        assert result.exit_code == 0, result.output
        assert "No chart recommendations" in result.output

    def test_sample_rows_option(self, measurements_csv):
        result = runner.invoke(
            app, ["analyze", str(measurements_csv), "--json", "--sample-rows", "1"]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["correlations"] == []

    def test_sample_rows_from_environment(self, measurements_csv, monkeypatch):
        monkeypatch.setenv("DATAVIZPRO_SAMPLE_ROWS", "1")

        result = runner.invoke(app, ["analyze", str(measurements_csv), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["column_types"]["x"] == "boolean"
        assert data["correlations"] == []

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        result = runner.invoke(app, ["analyze", str(path)])

        assert result.exit_code == 1
        assert "Unsupported file format" in result.output

    def test_invalid_configuration(self, measurements_csv, monkeypatch):
        monkeypatch.setenv("DATAVIZPRO_MODERATE_THRESHOLD", "0.95")

        result = runner.invoke(app, ["analyze", str(measurements_csv)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_missing_file_rejected(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "missing.csv")])
        assert result.exit_code != 0
