"""Integration tests for the generate CLI command and its output formats."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from furniture.application import Design
from furniture.cli.main import app, available_output_formats
from furniture.infrastructure import ExporterRegistry

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestGenerateCommand:
    """Tests for furniture generate."""

    def test_text_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", str(FIXTURES_PATH / "long_table.json")])

        assert result.exit_code == 0
        assert "DESIGN SUMMARY" in result.output
        assert "PARTS LIST" in result.output
        assert "ASSEMBLY INSTRUCTIONS" in result.output

    def test_json_output(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "table.json"
        result = runner.invoke(
            app,
            [
                "generate",
                str(FIXTURES_PATH / "long_table.json"),
                "--format",
                "json",
                "-o",
                str(output),
            ],
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert data["furnitureType"] == "table"
        assert data["materialColor"] == "#6B4226"
        legs = [p for p in data["positionedParts"] if p["role"] in ("leg", "side_leg")]
        assert len(legs) == 6

    def test_scene_output(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "scene.json"
        result = runner.invoke(
            app,
            [
                "generate",
                str(FIXTURES_PATH / "bookshelf_top_only.json"),
                "-f",
                "scene",
                "-o",
                str(output),
            ],
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert data["background"] == "#f5f1e8"
        assert data["camera"]["fov"] == 50

    def test_output_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "chair.json"
        result = runner.invoke(
            app,
            [
                "generate",
                str(FIXTURES_PATH / "minimal_chair.json"),
                "--format",
                "json",
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0
        assert f"Wrote json output to {output}" in result.output
        assert json.loads(output.read_text())["furnitureType"] == "chair"

    def test_seeded_runs_match(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "random.json"
        config.write_text(
            json.dumps(
                {
                    "furnitureType": "bookshelf",
                    "partitionStrategy": "random-shelves",
                    "partitionRatio": "random",
                    "partitionCount": 2,
                }
            )
        )
        outputs = [tmp_path / "first.json", tmp_path / "second.json"]
        for output in outputs:
            result = runner.invoke(
                app, ["generate", str(config), "-f", "json", "--seed", "7", "-o", str(output)]
            )
            assert result.exit_code == 0

        assert outputs[0].read_text() == outputs[1].read_text()

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", str(FIXTURES_PATH / "long_table.json"), "-f", "stl"]
        )

        assert result.exit_code == 1
        assert "Unknown format: stl" in result.output
        assert "Available formats: text, json, scene" in result.output

    def test_invalid_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", str(FIXTURES_PATH / "invalid_dimensions.json")]
        )

        assert result.exit_code == 1
        assert "Error:" in result.output


class _CostOnlyExporter:
    format_name = "cost"
    file_extension = "txt"

    def export_string(self, design: Design) -> str:
        return f"{design.total_cost:.2f}"

    def export(self, design: Design, path: Path) -> None:
        path.write_text(self.export_string(design))


class TestOutputFormats:
    """The registry is the single source of non-text formats."""

    def test_defaults(self) -> None:
        assert available_output_formats() == ["text", "json", "scene"]

    def test_registered_exporter_is_selectable(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setitem(ExporterRegistry._exporters, "cost", _CostOnlyExporter)

        assert "cost" in available_output_formats()
        result = runner.invoke(
            app, ["generate", str(FIXTURES_PATH / "minimal_chair.json"), "-f", "cost"]
        )

        assert result.exit_code == 0
        assert float(result.stdout.strip().splitlines()[-1]) > 0
