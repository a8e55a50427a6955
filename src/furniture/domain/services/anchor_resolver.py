"""Anchor positioning resolver.

This module explodes quantity-bearing abstract parts into explicitly
positioned instances. Placement uses the furniture's local frame: the
origin is the floor center, Y points up, X runs along the footprint's
first extent and Z along its second.

For most types the footprint is length along X and width along Z. Bed
frames run their long axis along Z, so the footprint is width along X and
length along Z with the headboard at the rear (-Z).
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Callable

from ..entities import Part, PositionedPart, VerticalPartition
from ..value_objects import (
    AnchorPattern,
    Dimensions,
    FurnitureType,
    PartRole,
    Position3D,
    Rotation3D,
)
from .part_generation import CORNER_INSET_CM
from .partition_placement import PartitionPlacer, PlacementResult

logger = logging.getLogger(__name__)

__all__ = ["AnchorResolver", "Footprint", "PositionResult", "resolve_positions"]

# Shelves are spread between these margins from floor and top
SHELF_MARGIN_CM: float = 10.0

DRAWER_GAP_CM: float = 1.0
FALLBACK_TOP_THICKNESS_CM: float = 3.0
FALLBACK_LEG_SIZE_CM: float = 5.0


@dataclass(frozen=True)
class Footprint:
    """Horizontal extents of the furniture in its local frame."""

    x: float
    z: float
    height: float

    @classmethod
    def for_type(
        cls, furniture_type: FurnitureType, dimensions: Dimensions
    ) -> "Footprint":
        if furniture_type == FurnitureType.BED_FRAME:
            return cls(x=dimensions.width, z=dimensions.length, height=dimensions.height)
        return cls(x=dimensions.length, z=dimensions.width, height=dimensions.height)


@dataclass
class PositionResult:
    """Positioned parts plus anything the placement had to report.

    Attributes:
        positioned: Every placed part instance.
        warnings: Recoverable placement warnings.
        partitions: Placement result per partition part id.
    """

    positioned: list[PositionedPart] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    partitions: dict[str, PlacementResult] = field(default_factory=dict)

    def reconciled_parts(self, parts: list[Part]) -> list[Part]:
        """Bill of parts whose quantities match the placed instances.

        Partition parts carry a nominal quantity; they are replaced by one
        part per gap that received dividers.
        """
        reconciled: list[Part] = []
        for part in parts:
            if isinstance(part, VerticalPartition) and part.id in self.partitions:
                reconciled.extend(self.partitions[part.id].bill_of_parts(part))
            else:
                reconciled.append(part)
        return reconciled


class AnchorResolver:
    """Resolves anchor patterns and bespoke placements.

    Patterns:
        - corners: four corners inset 2 cm, cycling past four
        - distribute-x/y/z: ``step = span / (n + 1)``, never flush at a bound
        - sides: left/right instances flush with the outer X faces
        - mid-span: perimeter legs halfway along the long edges
        - apron: rails under the top, flush with the legs' inside faces
        - vertical-partition: resolved after all other parts are placed

    Parts without a pattern get a bespoke placement by role, or fall back
    to being exploded in place at their own half height.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.placer = PartitionPlacer(rng)

    def resolve(
        self,
        parts: list[Part],
        furniture_type: FurnitureType,
        dimensions: Dimensions,
    ) -> PositionResult:
        """Position every part instance.

        Args:
            parts: Abstract parts from the part generator.
            furniture_type: Type being designed.
            dimensions: Overall dimensions in cm.

        Returns:
            PositionResult with positioned parts and warnings.
        """
        footprint = Footprint.for_type(furniture_type, dimensions)
        result = PositionResult()
        deferred: list[VerticalPartition] = []

        for part in parts:
            if isinstance(part, VerticalPartition) or (
                part.anchor == AnchorPattern.VERTICAL_PARTITION
            ):
                if isinstance(part, VerticalPartition):
                    deferred.append(part)
                else:
                    result.warnings.append(
                        f"Part {part.id} has no partition configuration; skipped"
                    )
                continue
            result.positioned.extend(self._place(part, parts, footprint, result.warnings))

        # Dividers need the positioned shelves and panels
        surfaces = [p for p in result.positioned if p.role.is_horizontal_surface]
        for partition in deferred:
            placement = self.placer.place(partition, surfaces, dimensions)
            result.positioned.extend(placement.dividers)
            result.warnings.extend(placement.warnings)
            result.partitions[partition.id] = placement

        logger.debug(
            f"Resolved {len(parts)} parts into {len(result.positioned)} instances"
        )
        return result

    def _place(
        self,
        part: Part,
        siblings: list[Part],
        footprint: Footprint,
        warnings: list[str],
    ) -> list[PositionedPart]:
        match part.anchor:
            case AnchorPattern.CORNERS:
                return self._corners(part, footprint)
            case (
                AnchorPattern.DISTRIBUTE_X
                | AnchorPattern.DISTRIBUTE_Y
                | AnchorPattern.DISTRIBUTE_Z
            ):
                return self._distribute(part, footprint)
            case AnchorPattern.SIDES:
                if part.quantity == 2:
                    return self._sides(part, footprint)
                warnings.append(
                    f"Part {part.id} uses the sides pattern with quantity "
                    f"{part.quantity}; placed in place"
                )
                return self._fallback(part)
            case AnchorPattern.MID_SPAN:
                return self._mid_span(part, footprint)
            case AnchorPattern.APRON:
                return self._apron(part, siblings, footprint)
        return self._bespoke(part, siblings, footprint)

    # --- Patterns ---

    def _corners(self, part: Part, footprint: Footprint) -> list[PositionedPart]:
        half_x = footprint.x / 2 - part.dimensions.length / 2 - CORNER_INSET_CM
        half_z = footprint.z / 2 - part.dimensions.width / 2 - CORNER_INSET_CM
        corners = [
            (half_x, half_z),
            (-half_x, half_z),
            (-half_x, -half_z),
            (half_x, -half_z),
        ]
        y = part.dimensions.height / 2
        return [
            PositionedPart.from_part(
                part,
                Position3D(corners[i % 4][0], y, corners[i % 4][1]),
                instance_id=f"{part.id}-{i}",
            )
            for i in range(part.quantity)
        ]

    def _distribute(self, part: Part, footprint: Footprint) -> list[PositionedPart]:
        n = part.quantity
        rest_y = self._rest_height(part, footprint)

        if part.anchor == AnchorPattern.DISTRIBUTE_Y:
            start, span = SHELF_MARGIN_CM, footprint.height - 2 * SHELF_MARGIN_CM
        elif part.anchor == AnchorPattern.DISTRIBUTE_X:
            start, span = -footprint.x / 2, footprint.x
        else:
            start, span = -footprint.z / 2, footprint.z
        step = span / (n + 1)

        instances = []
        for i in range(n):
            offset = start + step * (i + 1)
            match part.anchor:
                case AnchorPattern.DISTRIBUTE_X:
                    position = Position3D(offset, rest_y, 0.0)
                case AnchorPattern.DISTRIBUTE_Y:
                    position = Position3D(0.0, offset, 0.0)
                case _:
                    position = Position3D(0.0, rest_y, offset)
            instances.append(
                PositionedPart.from_part(part, position, instance_id=f"{part.id}-{i}")
            )
        return instances

    @staticmethod
    def _rest_height(part: Part, footprint: Footprint) -> float:
        """Slats sit flush with the frame top, everything else on the floor."""
        if part.role == PartRole.SLAT:
            return footprint.height - part.dimensions.height / 2
        return part.dimensions.height / 2

    def _sides(self, part: Part, footprint: Footprint) -> list[PositionedPart]:
        x = footprint.x / 2 - part.dimensions.length / 2
        y = footprint.height - part.dimensions.height / 2
        return [
            PositionedPart.from_part(
                part, Position3D(-x, y, 0.0), instance_id=f"{part.id}-L"
            ),
            PositionedPart.from_part(
                part, Position3D(x, y, 0.0), instance_id=f"{part.id}-R"
            ),
        ]

    def _mid_span(self, part: Part, footprint: Footprint) -> list[PositionedPart]:
        z = footprint.z / 2 - part.dimensions.width / 2 - CORNER_INSET_CM
        y = part.dimensions.height / 2
        return [
            PositionedPart.from_part(
                part,
                Position3D(0.0, y, z if i % 2 == 0 else -z),
                instance_id=f"{part.id}-{i}",
            )
            for i in range(part.quantity)
        ]

    def _apron(
        self, part: Part, siblings: list[Part], footprint: Footprint
    ) -> list[PositionedPart]:
        leg = self._sibling_size(siblings, lambda p: p.role.is_leg, "length")
        top = self._sibling_size(siblings, lambda p: p.role.is_work_surface, "height")
        leg = leg if leg is not None else FALLBACK_LEG_SIZE_CM
        top = top if top is not None else FALLBACK_TOP_THICKNESS_CM

        rail = part.dimensions.width
        y = footprint.height - top - part.dimensions.height / 2

        if part.role == PartRole.APRON_SHORT:
            x = footprint.x / 2 - CORNER_INSET_CM - leg - rail / 2
            rotation = Rotation3D.about_y(math.pi / 2)
            offsets = [Position3D(x, y, 0.0), Position3D(-x, y, 0.0)]
        else:
            z = footprint.z / 2 - CORNER_INSET_CM - leg - rail / 2
            rotation = Rotation3D.identity()
            offsets = [Position3D(0.0, y, z), Position3D(0.0, y, -z)]

        return [
            PositionedPart.from_part(
                part, offsets[i % 2], instance_id=f"{part.id}-{i}", rotation=rotation
            )
            for i in range(part.quantity)
        ]

    # --- Bespoke placements ---

    def _bespoke(
        self, part: Part, siblings: list[Part], footprint: Footprint
    ) -> list[PositionedPart]:
        d = part.dimensions
        h = footprint.height
        seat_level = h / 2

        match part.role:
            case PartRole.TABLE_TOP | PartRole.DESK_TOP:
                return self._single(part, Position3D(0.0, h - d.height / 2, 0.0))
            case PartRole.SEAT:
                return self._single(part, Position3D(0.0, seat_level + d.height / 2, 0.0))
            case PartRole.BACKREST:
                seat = self._sibling_size(siblings, lambda p: p.role == PartRole.SEAT, "height")
                seat_top = seat_level + (seat if seat is not None else d.width)
                return self._single(
                    part,
                    Position3D(0.0, seat_top + d.height / 2, -footprint.z / 2 + d.width / 2),
                )
            case PartRole.ARMREST_TOP | PartRole.ARMREST_SUPPORT:
                return self._armrest(part, siblings, footprint)
            case PartRole.BACK_PANEL:
                return self._single(
                    part, Position3D(0.0, h / 2, -footprint.z / 2 + d.width / 2)
                )
            case PartRole.TOP_PANEL:
                return self._single(part, Position3D(0.0, h - d.height / 2, 0.0))
            case PartRole.BOTTOM_PANEL:
                return self._single(part, Position3D(0.0, d.height / 2, 0.0))
            case PartRole.DRAWER:
                return self._drawers(part, siblings, footprint)
            case PartRole.HEADBOARD:
                return self._single(
                    part, Position3D(0.0, d.height / 2, -footprint.z / 2 + d.width / 2)
                )
            case PartRole.FOOTBOARD:
                return self._single(
                    part, Position3D(0.0, d.height / 2, footprint.z / 2 - d.width / 2)
                )
            case PartRole.CENTER_BEAM:
                slat = self._sibling_size(siblings, lambda p: p.role == PartRole.SLAT, "height")
                slat_bottom = h - (slat if slat is not None else 0.0)
                return self._single(part, Position3D(0.0, slat_bottom - d.height / 2, 0.0))
        return self._fallback(part)

    def _armrest(
        self, part: Part, siblings: list[Part], footprint: Footprint
    ) -> list[PositionedPart]:
        d = part.dimensions
        seat = self._sibling_size(siblings, lambda p: p.role == PartRole.SEAT, "height")
        seat_top = footprint.height / 2 + (seat if seat is not None else 0.0)
        x = footprint.x / 2 - d.length / 2

        if part.role == PartRole.ARMREST_TOP:
            support = self._sibling_size(
                siblings, lambda p: p.role == PartRole.ARMREST_SUPPORT, "height"
            )
            y = seat_top + (support if support is not None else 0.0) + d.height / 2
            # Runs from the backrest's front face to the front edge
            z = (footprint.z - d.width) / 2
        else:
            y = seat_top + d.height / 2
            z = footprint.z / 2 - d.width / 2

        pair = [
            PositionedPart.from_part(
                part, Position3D(-x, y, z), instance_id=f"{part.id}-L"
            ),
            PositionedPart.from_part(
                part, Position3D(x, y, z), instance_id=f"{part.id}-R"
            ),
        ]
        return pair[: part.quantity] + self._extra_in_place(part, 2)

    def _drawers(
        self, part: Part, siblings: list[Part], footprint: Footprint
    ) -> list[PositionedPart]:
        top = self._sibling_size(siblings, lambda p: p.role.is_work_surface, "height")
        top = top if top is not None else FALLBACK_TOP_THICKNESS_CM
        y = footprint.height - top - part.dimensions.height / 2 - DRAWER_GAP_CM

        if part.quantity == 1:
            return self._single(part, Position3D(0.0, y, 0.0))
        if part.quantity == 2:
            offsets = [-footprint.x / 4, footprint.x / 4]
        else:
            step = footprint.x / (part.quantity + 1)
            offsets = [-footprint.x / 2 + step * (i + 1) for i in range(part.quantity)]
        return [
            PositionedPart.from_part(
                part, Position3D(x, y, 0.0), instance_id=f"{part.id}-{i}"
            )
            for i, x in enumerate(offsets)
        ]

    # --- Helpers ---

    def _single(self, part: Part, position: Position3D) -> list[PositionedPart]:
        if part.quantity == 1:
            return [PositionedPart.from_part(part, position)]
        return [
            PositionedPart.from_part(part, position, instance_id=f"{part.id}-{i}")
            for i in range(part.quantity)
        ]

    def _extra_in_place(self, part: Part, placed: int) -> list[PositionedPart]:
        """Instances beyond a fixed left/right pair, exploded in place."""
        position = Position3D(0.0, part.dimensions.height / 2, 0.0)
        return [
            PositionedPart.from_part(part, position, instance_id=f"{part.id}-{i}")
            for i in range(placed, part.quantity)
        ]

    def _fallback(self, part: Part) -> list[PositionedPart]:
        return self._single(part, Position3D(0.0, part.dimensions.height / 2, 0.0))

    @staticmethod
    def _sibling_size(
        siblings: list[Part], predicate: Callable[[Part], bool], attribute: str
    ) -> float | None:
        for sibling in siblings:
            if predicate(sibling):
                return getattr(sibling.dimensions, attribute)
        return None


def resolve_positions(
    parts: list[Part],
    furniture_type: FurnitureType,
    dimensions: Dimensions,
    rng: random.Random | None = None,
) -> PositionResult:
    """Resolve positions with a fresh AnchorResolver."""
    return AnchorResolver(rng).resolve(parts, furniture_type, dimensions)
