"""JSON exporter for complete furniture designs.

Keys are camelCase to match the request contract and the renderer scene.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from furniture.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from furniture.application.dtos import Design
    from furniture.domain.entities import Part, PositionedPart
    from furniture.domain.services import CostBreakdown, EngineeringSpec, StructuralReport
    from furniture.domain.value_objects import Dimensions


logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def _dimensions(dims: Dimensions) -> dict[str, float]:
    return {"length": dims.length, "width": dims.width, "height": dims.height}


@ExporterRegistry.register("json")
class DesignJsonExporter:
    """Exports the full design: parts, positions, costs, report and scene.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_geometry: bool = True, indent: int = 2) -> None:
        self.include_geometry = include_geometry
        self.indent = indent

    def export(self, design: Design, path: Path) -> None:
        path.write_text(self.export_string(design))
        logger.info(f"Exported design JSON to {path}")

    def export_string(self, design: Design) -> str:
        return json.dumps(self.build(design), indent=self.indent)

    def build(self, design: Design) -> dict[str, Any]:
        """Build the JSON-ready mapping for a design."""
        result: dict[str, Any] = {
            "schemaVersion": SCHEMA_VERSION,
            "furnitureType": design.furniture_type.value,
            "material": design.material.value,
            "materialColor": design.material_color,
            "dimensions": _dimensions(design.dimensions),
            "parts": [self._part(p) for p in design.parts],
            "positionedParts": [self._positioned(p) for p in design.positioned_parts],
            "totalCost": design.total_cost,
            "costBreakdown": self._cost(design.cost),
            "assemblyTime": design.assembly_time,
            "instructions": list(design.instructions),
            "engineering": self._engineering(design.engineering),
            "structural": self._structural(design.structural),
            "warnings": list(design.warnings),
        }
        if self.include_geometry:
            result["geometry"] = design.geometry.to_dict()
        return result

    @staticmethod
    def _part(part: Part) -> dict[str, Any]:
        return {
            "id": part.id,
            "name": part.name,
            "category": part.category.value,
            "role": part.role.value,
            "dimensions": _dimensions(part.dimensions),
            "quantity": part.quantity,
            "material": part.material.value,
            "color": part.color,
        }

    @staticmethod
    def _positioned(part: PositionedPart) -> dict[str, Any]:
        return {
            "id": part.id,
            "sourceId": part.source_id,
            "name": part.name,
            "role": part.role.value,
            "dimensions": _dimensions(part.dimensions),
            "position": part.position.as_dict(),
            "rotation": part.rotation.as_dict(),
        }

    @staticmethod
    def _cost(breakdown: CostBreakdown) -> list[dict[str, Any]]:
        return [
            {
                "partId": line.part_id,
                "name": line.name,
                "quantity": line.quantity,
                "volume": line.volume,
                "unitCost": line.unit_cost,
                "total": line.total,
                "percentage": line.percentage,
            }
            for line in breakdown.lines
        ]

    @staticmethod
    def _engineering(spec: EngineeringSpec) -> dict[str, Any]:
        load = spec.load_analysis
        data: dict[str, Any] = {
            "legSize": spec.leg_size,
            "topThickness": spec.top_thickness,
            "loadAnalysis": {
                "totalLoad": load.total_load,
                "distributedLoad": load.distributed_load,
                "pointLoad": load.point_load,
                "selfWeight": load.self_weight,
            },
            "additions": [
                {
                    "type": a.type.value,
                    "quantity": a.quantity,
                    "thickness": a.thickness,
                    "height": a.height,
                }
                for a in spec.additions
            ],
            "notes": list(spec.notes),
        }
        if spec.deflection is not None:
            data["deflection"] = {
                "deflection": spec.deflection.deflection,
                "isAcceptable": spec.deflection.is_acceptable,
                "recommendedThickness": spec.deflection.recommended_thickness,
            }
        return data

    @staticmethod
    def _structural(report: StructuralReport) -> dict[str, Any]:
        return {
            "loadCapacity": report.load_capacity,
            "selfWeight": report.self_weight,
            "integrityScore": report.integrity_score,
            "stability": {
                "isStable": report.stability.is_stable,
                "ratio": round(report.stability.ratio, 3),
                "reason": report.stability.reason,
                "recommendation": report.stability.recommendation,
            },
            "workforce": {
                "hours": report.workforce.hours,
                "people": report.workforce.people,
                "reason": report.workforce.reason,
            },
            "warnings": list(report.warnings),
            "recommendations": list(report.recommendations),
        }
