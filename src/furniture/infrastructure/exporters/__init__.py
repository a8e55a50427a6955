"""Exporter framework for furniture designs.

Registered exporters:
- json: Full design with parts, positions, costs, reports and geometry
- scene: Renderer-ready geometry only

Usage:
    from furniture.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("scene")()
    text = exporter.export_string(design)
"""

from furniture.infrastructure.exporters.base import Exporter, ExporterRegistry
from furniture.infrastructure.exporters.json_exporter import DesignJsonExporter
from furniture.infrastructure.exporters.scene_exporter import SceneExporter

__all__ = [
    "DesignJsonExporter",
    "Exporter",
    "ExporterRegistry",
    "SceneExporter",
]
