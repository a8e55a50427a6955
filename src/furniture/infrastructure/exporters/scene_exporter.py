"""Scene exporter: the renderer-ready geometry of a design only."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from furniture.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from furniture.application.dtos import Design


logger = logging.getLogger(__name__)


@ExporterRegistry.register("scene")
class SceneExporter:
    """Exports ``design.geometry`` as JSON for a 3D viewer."""

    format_name: ClassVar[str] = "scene"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, design: Design, path: Path) -> None:
        path.write_text(self.export_string(design))
        logger.info(f"Exported scene to {path}")

    def export_string(self, design: Design) -> str:
        return json.dumps(design.geometry.to_dict(), indent=self.indent)
