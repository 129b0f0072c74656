"""Integration tests for the ledwall CLI.

These tests run the typer application end-to-end, including:
- Text and JSON output of the calculate command
- Error reporting and exit codes
- Custom catalog files
- The cabinets and ratios listing commands
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ledwall.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestCalculateCommand:
    """Tests for the calculate command."""

    def test_width_and_height(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "--width", "4.8", "--height", "2.7"])

        assert result.exit_code == 0
        assert "TARGET SCREEN" in result.output
        assert "Lower: 8 x 8" in result.output
        assert "Upper: 9 x 9" in result.output

    def test_ratio_text(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "-w", "4.8", "-r", "16:9", "-u", "meter"]
        )

        assert result.exit_code == 0
        assert "Height:   2.70 m" in result.output

    def test_inches(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "--diagonal", "100", "--ratio", "1.7778", "--unit", "inches"]
        )

        assert result.exit_code == 0
        assert "Diagonal: 100.00 in" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "-w", "4.8", "-h", "2.7", "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["results"][0]["lower"]["columns"] == 8
        assert data["results"][1]["cabinet"]["name"] == "1:1"

    def test_insufficient_inputs(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "--width", "4.8"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_inconsistent_geometry(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-w", "1", "-d", "0.5"])

        assert result.exit_code == 1
        assert "Diagonal" in result.output

    def test_unknown_unit(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-w", "1", "-h", "1", "-u", "yards"])

        assert result.exit_code == 1
        assert "Unknown unit" in result.output

    def test_invalid_ratio(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-w", "1", "-r", "wide"])

        assert result.exit_code == 1
        assert "Invalid ratio" in result.output

    def test_zero_ratio_counts_as_absent(self, runner: CliRunner) -> None:
        """A zero ratio is ignored like a zero width, leaving width and height."""
        result = runner.invoke(app, ["calculate", "-w", "4.8", "-h", "2.7", "-r", "0"])

        assert result.exit_code == 0
        assert "Ratio:    1.778:1" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-w", "1", "-h", "1", "-f", "xml"])

        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_custom_catalog(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "calculate", "-w", "4", "-h", "2",
                "--catalog", str(fixtures_path / "valid_catalog.json"),
                "--format", "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [r["cabinet"]["name"] for r in data["results"]] == ["1:1", "16:9", "2:1"]

    def test_missing_catalog(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["calculate", "-w", "4", "-h", "2", "-c", str(tmp_path / "missing.json")],
        )

        assert result.exit_code == 1
        assert "not found" in result.output


class TestListingCommands:
    """Tests for the cabinets and ratios commands."""

    def test_cabinets(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cabinets"])

        assert result.exit_code == 0
        assert "16:9" in result.output
        assert "1:1" in result.output

    def test_cabinets_from_catalog(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(
            app, ["cabinets", "--catalog", str(fixtures_path / "valid_catalog.json")]
        )

        assert result.exit_code == 0
        assert "2:1" in result.output

    def test_ratios(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["ratios"])

        assert result.exit_code == 0
        assert "2.40:1" in result.output
        assert "48:9" in result.output

    def test_ratios_from_catalog(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(
            app, ["ratios", "-c", str(fixtures_path / "valid_catalog.json")]
        )

        assert result.exit_code == 0
        assert "21:9" in result.output
