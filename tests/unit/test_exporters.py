"""Unit tests for the design exporters."""

import json
from pathlib import Path

import pytest

from furniture.application import Design, FurnitureRequest, GenerateDesignCommand
from furniture.infrastructure.exporters import (
    DesignJsonExporter,
    ExporterRegistry,
    SceneExporter,
)


@pytest.fixture
def bookshelf_design(
    seeded_command: GenerateDesignCommand, bookshelf_request: FurnitureRequest
) -> Design:
    return seeded_command.execute(bookshelf_request)


class TestExporterRegistry:
    def test_registered_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["json", "scene"]
        assert ExporterRegistry.is_registered("json")
        assert not ExporterRegistry.is_registered("stl")

    def test_get(self) -> None:
        assert ExporterRegistry.get("json") is DesignJsonExporter
        assert ExporterRegistry.get("scene") is SceneExporter

    def test_unknown_format(self) -> None:
        with pytest.raises(KeyError, match="No exporter registered for format"):
            ExporterRegistry.get("dxf")


class TestDesignJsonExporter:
    """Tests for the full design JSON."""

    def test_top_level_keys(self, bookshelf_design: Design) -> None:
        data = json.loads(DesignJsonExporter().export_string(bookshelf_design))
        assert data["schemaVersion"] == "1.0"
        assert data["furnitureType"] == "bookshelf"
        assert data["dimensions"] == {"length": 90, "width": 30, "height": 180}
        assert data["totalCost"] == bookshelf_design.total_cost
        assert "geometry" in data
        assert sum(p["quantity"] for p in data["parts"]) == len(data["positionedParts"])

    def test_positioned_parts_reference_their_source(self, bookshelf_design: Design) -> None:
        data = DesignJsonExporter().build(bookshelf_design)
        part_ids = {p["id"] for p in data["parts"]}
        assert all(p["sourceId"] in part_ids for p in data["positionedParts"])
        partitions = [p for p in data["positionedParts"] if p["role"] == "partition"]
        assert len(partitions) == 2

    def test_without_geometry(self, bookshelf_design: Design) -> None:
        data = DesignJsonExporter(include_geometry=False).build(bookshelf_design)
        assert "geometry" not in data

    def test_cost_breakdown_and_reports(self, bookshelf_design: Design) -> None:
        data = DesignJsonExporter().build(bookshelf_design)
        assert {"partId", "unitCost", "percentage"} <= set(data["costBreakdown"][0])
        assert "legSize" in data["engineering"]
        assert data["structural"]["stability"]["isStable"] is False
        assert data["structural"]["warnings"] == list(bookshelf_design.structural.warnings)
        assert any("Too tall for its base" in w for w in data["structural"]["warnings"])

    def test_export_to_file(self, bookshelf_design: Design, tmp_path: Path) -> None:
        path = tmp_path / "design.json"
        DesignJsonExporter().export(bookshelf_design, path)
        assert json.loads(path.read_text())["furnitureType"] == "bookshelf"


class TestSceneExporter:
    def test_scene_only(self, bookshelf_design: Design) -> None:
        data = json.loads(SceneExporter().export_string(bookshelf_design))
        assert set(data) == {"parts", "bounds", "camera", "lighting", "background"}
        assert len(data["parts"]) == len(bookshelf_design.positioned_parts)
        assert data["bounds"]["height"] == pytest.approx(180)
