"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from furniture.domain.entities import Part, PositionedPart
from furniture.domain.services import (
    CostBreakdown,
    EngineeringSpec,
    GenerationOptions,
    Scene,
    StructuralReport,
    properties_for,
)
from furniture.domain.value_objects import (
    Dimensions,
    FurnitureType,
    MaterialType,
    PartitionConfig,
    PartitionStrategy,
    PartRole,
    ShelfModifier,
    parse_partition_ratio,
    parse_shelf_target,
)

# Default envelopes in cm, used when a request gives no dimensions
DEFAULT_DIMENSIONS: dict[FurnitureType, Dimensions] = {
    FurnitureType.TABLE: Dimensions(120, 80, 75),
    FurnitureType.CHAIR: Dimensions(45, 45, 90),
    FurnitureType.BOOKSHELF: Dimensions(80, 30, 180),
    FurnitureType.DESK: Dimensions(140, 70, 75),
    FurnitureType.BED_FRAME: Dimensions(200, 150, 40),
}

MIN_DIMENSION_CM = 10.0
MAX_DIMENSION_CM = 500.0

HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass
class ShelfModifierInput:
    """Input DTO for a per-shelf divider rule."""

    target: str
    count: int | None = None
    ratio: str | None = None

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        try:
            parse_shelf_target(self.target)
        except ValueError as e:
            errors.append(str(e))
        if self.count is not None and self.count < 0:
            errors.append(f"Shelf modifier count for '{self.target}' cannot be negative")
        if self.ratio is not None:
            try:
                parse_partition_ratio(self.ratio)
            except ValueError as e:
                errors.append(str(e))
        return errors

    def to_modifier(self) -> ShelfModifier:
        """Convert to ShelfModifier value object."""
        return ShelfModifier(
            target=parse_shelf_target(self.target),
            count=self.count,
            ratio=parse_partition_ratio(self.ratio) if self.ratio is not None else None,
        )


@dataclass
class FurnitureRequest:
    """Input DTO for a furniture design request.

    Dimensions are all-or-nothing: leave all three unset to use the
    defaults for the furniture type.
    """

    furniture_type: str
    material: str = MaterialType.WOOD.value
    length: float | None = None
    width: float | None = None
    height: float | None = None
    material_color: str | None = None
    projected_load: int | float | str | None = None
    has_armrests: bool = False
    shelf_count: int | None = None
    partition_strategy: str = PartitionStrategy.NONE.value
    partition_ratio: str | None = None
    partition_count: int | None = None
    shelf_modifiers: list[ShelfModifierInput] = field(default_factory=list)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []

        valid_types = [t.value for t in FurnitureType]
        if self.furniture_type not in valid_types:
            errors.append(f"Furniture type must be one of: {', '.join(valid_types)}")

        valid_materials = [m.value for m in MaterialType.requestable()]
        if self.material not in valid_materials:
            errors.append(f"Material must be one of: {', '.join(valid_materials)}")

        errors.extend(self._validate_dimensions())

        if self.material_color is not None and not HEX_COLOR.match(self.material_color):
            errors.append("Material color must be a #RRGGBB hex color")

        if self.shelf_count is not None and self.shelf_count < 0:
            errors.append("Shelf count cannot be negative")
        if self.partition_count is not None and self.partition_count < 0:
            errors.append("Partition count cannot be negative")

        valid_strategies = [s.value for s in PartitionStrategy]
        if self.partition_strategy not in valid_strategies:
            errors.append(
                f"Partition strategy must be one of: {', '.join(valid_strategies)}"
            )
        if self.partition_ratio is not None:
            try:
                parse_partition_ratio(self.partition_ratio)
            except ValueError as e:
                errors.append(str(e))

        for modifier in self.shelf_modifiers:
            errors.extend(modifier.validate())
        return errors

    def _validate_dimensions(self) -> list[str]:
        values = {"Length": self.length, "Width": self.width, "Height": self.height}
        given = [v for v in values.values() if v is not None]
        if not given:
            return []
        if len(given) != len(values):
            missing = [name for name, v in values.items() if v is None]
            return [f"Missing dimension component(s): {', '.join(missing)}"]

        errors: list[str] = []
        for name, value in values.items():
            if not math.isfinite(value):
                errors.append(f"{name} must be a finite number")
            elif not MIN_DIMENSION_CM <= value <= MAX_DIMENSION_CM:
                errors.append(
                    f"{name} must be between {MIN_DIMENSION_CM:g} and "
                    f"{MAX_DIMENSION_CM:g} cm"
                )
        return errors

    def to_furniture_type(self) -> FurnitureType:
        return FurnitureType(self.furniture_type)

    def to_material(self) -> MaterialType:
        return MaterialType(self.material)

    def to_dimensions(self) -> Dimensions:
        """Requested dimensions, or the defaults for the furniture type."""
        if self.length is None or self.width is None or self.height is None:
            return DEFAULT_DIMENSIONS[self.to_furniture_type()]
        return Dimensions(self.length, self.width, self.height)

    def resolved_color(self) -> str:
        """Requested color, or the material's default color."""
        if self.material_color is not None:
            return self.material_color
        return properties_for(self.to_material()).default_color

    def to_partition_config(self) -> PartitionConfig:
        """Convert partition preferences to a PartitionConfig value object."""
        return PartitionConfig(
            strategy=PartitionStrategy(self.partition_strategy),
            ratio=(
                parse_partition_ratio(self.partition_ratio)
                if self.partition_ratio is not None
                else None
            ),
            count=self.partition_count,
            modifiers=tuple(m.to_modifier() for m in self.shelf_modifiers),
        )

    def to_generation_options(self) -> GenerationOptions:
        return GenerationOptions(
            has_armrests=self.has_armrests,
            shelf_count=self.shelf_count,
            partition=self.to_partition_config(),
        )


@dataclass
class Design:
    """Output DTO containing a generated furniture design.

    Attributes:
        furniture_type: Type that was designed.
        material: Construction material.
        material_color: Hex color of the material.
        dimensions: Overall dimensions in cm.
        parts: Bill of parts; quantities sum to the positioned count.
        positioned_parts: Every placed part instance.
        cost: Per-part cost breakdown and total.
        assembly_time: Estimated assembly time in minutes.
        instructions: Assembly checklist.
        structural: Structural report.
        engineering: Engineering spec used for sizing.
        geometry: Renderer-ready scene.
        warnings: All recoverable warnings raised while generating.
    """

    furniture_type: FurnitureType
    material: MaterialType
    material_color: str
    dimensions: Dimensions
    parts: list[Part]
    positioned_parts: list[PositionedPart]
    cost: CostBreakdown
    assembly_time: int
    instructions: list[str]
    structural: StructuralReport
    engineering: EngineeringSpec
    geometry: Scene
    warnings: list[str] = field(default_factory=list)

    @property
    def total_cost(self) -> float:
        return self.cost.total_cost

    @property
    def part_count(self) -> int:
        """Total number of part instances."""
        return sum(part.quantity for part in self.parts)

    def parts_by_role(self, role: PartRole) -> list[PositionedPart]:
        """Positioned instances with the given role."""
        return [p for p in self.positioned_parts if p.role == role]
