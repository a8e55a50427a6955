"""Part generation service.

This module provides the PartGenerator, which turns a request envelope and
its engineering spec into the abstract bill of parts for each furniture
type. Parts carry per-unit dimensions and a quantity; parts that repeat
are tagged with the anchor pattern their layout implies instead of being
given positions here.

Part dimensions follow the piece's local axes: ``length`` is the X
extent, ``width`` the Z extent and ``height`` the Y extent. Boards that
stand on edge (side panels, backrests, rails) therefore swap thickness
into ``length`` or ``width``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from ..entities import Part, VerticalPartition
from ..value_objects import (
    AnchorPattern,
    Dimensions,
    FurnitureType,
    MaterialType,
    PartCategory,
    PartitionConfig,
    PartRole,
)
from .engineering import AdditionType, EngineeringSpec

logger = logging.getLogger(__name__)

__all__ = [
    "BED_BOARD_THICKNESS_CM",
    "BOOKSHELF_BOARD_THICKNESS_CM",
    "CORNER_INSET_CM",
    "GenerationOptions",
    "PartGenerator",
    "generate_parts",
]

# Legs and rails are inset this far from the outer faces
CORNER_INSET_CM: float = 2.0

BOOKSHELF_BOARD_THICKNESS_CM: float = 2.0
BOOKSHELF_PLINTH_HEIGHT_CM: float = 10.0
DEFAULT_SHELF_COUNT: int = 5
NOMINAL_PARTITION_HEIGHT_CM: float = 30.0

CHAIR_FALLBACK_THICKNESS_CM: float = 2.0
ARMREST_BAR_SIZE_CM: float = 5.0
ARMREST_BAR_HEIGHT_CM: float = 3.0
ARMREST_SUPPORT_HEIGHT_CM: float = 22.0

DRAWER_LENGTH_RATIO: float = 0.3
DRAWER_WIDTH_RATIO: float = 0.8
DRAWER_HEIGHT_CM: float = 15.0
DRAWER_COUNT: int = 2

BED_BOARD_THICKNESS_CM: float = 3.0
HEADBOARD_HEIGHT_CM: float = 100.0
FOOTBOARD_HEIGHT_CM: float = 50.0
SIDE_RAIL_HEIGHT_CM: float = 10.0
SLAT_COUNT: int = 10
SLAT_WIDTH_CM: float = 8.0
SLAT_CLEARANCE_CM: float = 20.0

# Smallest derived member size kept for degenerate envelopes
MIN_MEMBER_CM: float = 1.0


def _member(size: float) -> float:
    return max(size, MIN_MEMBER_CM)


@dataclass(frozen=True)
class GenerationOptions:
    """Per-request options that shape the generated skeleton.

    Attributes:
        has_armrests: Add armrest bars and supports to chairs.
        shelf_count: Internal bookshelf shelves, default 5.
        partition: Divider configuration for bookshelves.
    """

    has_armrests: bool = False
    shelf_count: int | None = None
    partition: PartitionConfig = field(default_factory=PartitionConfig)

    def __post_init__(self) -> None:
        if self.shelf_count is not None and self.shelf_count < 0:
            raise ValueError("Shelf count cannot be negative")


class PartGenerator:
    """Deterministic part skeletons per furniture type.

    Each generator emits a fixed set of named parts:
    - table: top, 4 legs, optional mid-span side legs, optional aprons
    - chair: seat, backrest, 4 legs, optional armrest assembly
    - bookshelf: 2 sides, N shelves, back, top, plinth, optional partition
    - desk: top, 2 drawers, 4 legs
    - bed frame: headboard, footboard, 2 side rails, 10 slats, 4 legs,
      optional center beam
    """

    def generate(
        self,
        furniture_type: FurnitureType,
        dimensions: Dimensions,
        material: MaterialType,
        color: str | None,
        spec: EngineeringSpec,
        options: GenerationOptions | None = None,
    ) -> list[Part]:
        """Generate the bill of parts for a request.

        Args:
            furniture_type: Type being designed.
            dimensions: Overall dimensions in cm.
            material: Construction material, stamped on every part.
            color: Material color, stamped on every part.
            spec: Engineering spec for the request.
            options: Type specific options.

        Returns:
            List of abstract parts.
        """
        options = options or GenerationOptions()

        match furniture_type:
            case FurnitureType.TABLE:
                parts = self._table(dimensions, spec)
            case FurnitureType.CHAIR:
                parts = self._chair(dimensions, spec, options)
            case FurnitureType.BOOKSHELF:
                parts = self._bookshelf(dimensions, options)
            case FurnitureType.DESK:
                parts = self._desk(dimensions, spec)
            case FurnitureType.BED_FRAME:
                parts = self._bed_frame(dimensions, spec)
            case _:
                raise ValueError(f"Unsupported furniture type: {furniture_type}")

        parts = [self._stamp(part, material, color) for part in parts]
        logger.debug(
            f"Generated {len(parts)} parts "
            f"({sum(p.quantity for p in parts)} pieces) for {furniture_type.value}"
        )
        return parts

    @staticmethod
    def _stamp(part: Part, material: MaterialType, color: str | None) -> Part:
        return replace(part, material=material, color=color)

    def _table(self, dims: Dimensions, spec: EngineeringSpec) -> list[Part]:
        leg = spec.leg_size
        top = spec.top_thickness
        parts = [
            Part(
                id="table-top",
                name="Table Top",
                category=PartCategory.SURFACE,
                role=PartRole.TABLE_TOP,
                dimensions=Dimensions(dims.length, dims.width, top),
            ),
            Part(
                id="table-leg",
                name="Table Leg",
                category=PartCategory.SUPPORT,
                role=PartRole.LEG,
                dimensions=Dimensions(leg, leg, _member(dims.height - top)),
                quantity=4,
                anchor=AnchorPattern.CORNERS,
            ),
        ]

        if spec.has_addition(AdditionType.SIDE_LEG):
            parts.append(
                Part(
                    id="table-side-leg",
                    name="Side Leg",
                    category=PartCategory.SUPPORT,
                    role=PartRole.SIDE_LEG,
                    dimensions=Dimensions(leg, leg, _member(dims.height - top)),
                    quantity=spec.extra_leg_count,
                    anchor=AnchorPattern.MID_SPAN,
                )
            )

        apron = spec.addition(AdditionType.APRON)
        if apron is not None:
            # Aprons fit between the legs
            clearance = 2 * leg + 2 * CORNER_INSET_CM
            parts.append(
                Part(
                    id="apron-long",
                    name="Apron (Long)",
                    category=PartCategory.SUPPORT,
                    role=PartRole.APRON_LONG,
                    dimensions=Dimensions(
                        _member(dims.length - clearance), apron.thickness, apron.height
                    ),
                    quantity=2,
                    anchor=AnchorPattern.APRON,
                )
            )
            parts.append(
                Part(
                    id="apron-short",
                    name="Apron (Short)",
                    category=PartCategory.SUPPORT,
                    role=PartRole.APRON_SHORT,
                    dimensions=Dimensions(
                        _member(dims.width - clearance), apron.thickness, apron.height
                    ),
                    quantity=2,
                    anchor=AnchorPattern.APRON,
                )
            )
        return parts

    def _chair(
        self, dims: Dimensions, spec: EngineeringSpec, options: GenerationOptions
    ) -> list[Part]:
        thickness = spec.top_thickness or CHAIR_FALLBACK_THICKNESS_CM
        seat_level = dims.height / 2
        leg = spec.leg_size

        parts = [
            Part(
                id="chair-seat",
                name="Seat",
                category=PartCategory.SURFACE,
                role=PartRole.SEAT,
                dimensions=Dimensions(dims.length, dims.width, thickness),
            ),
            Part(
                id="chair-backrest",
                name="Backrest",
                category=PartCategory.SURFACE,
                role=PartRole.BACKREST,
                dimensions=Dimensions(
                    dims.length, thickness, _member(dims.height - seat_level - thickness)
                ),
            ),
            Part(
                id="chair-leg",
                name="Chair Leg",
                category=PartCategory.SUPPORT,
                role=PartRole.LEG,
                dimensions=Dimensions(leg, leg, seat_level),
                quantity=4,
                anchor=AnchorPattern.CORNERS,
            ),
        ]

        if options.has_armrests:
            parts.append(
                Part(
                    id="chair-armrest-top",
                    name="Arm Rest Top",
                    category=PartCategory.SUPPORT,
                    role=PartRole.ARMREST_TOP,
                    dimensions=Dimensions(
                        ARMREST_BAR_SIZE_CM,
                        _member(dims.width - thickness),
                        ARMREST_BAR_HEIGHT_CM,
                    ),
                    quantity=2,
                )
            )
            parts.append(
                Part(
                    id="chair-armrest-support",
                    name="Arm Support",
                    category=PartCategory.SUPPORT,
                    role=PartRole.ARMREST_SUPPORT,
                    dimensions=Dimensions(
                        ARMREST_BAR_SIZE_CM, ARMREST_BAR_SIZE_CM, ARMREST_SUPPORT_HEIGHT_CM
                    ),
                    quantity=2,
                )
            )
        return parts

    def _bookshelf(self, dims: Dimensions, options: GenerationOptions) -> list[Part]:
        t = BOOKSHELF_BOARD_THICKNESS_CM
        shelves = (
            DEFAULT_SHELF_COUNT if options.shelf_count is None else options.shelf_count
        )

        parts = [
            Part(
                id="bookshelf-side",
                name="Side Panel",
                category=PartCategory.SURFACE,
                role=PartRole.SIDE_PANEL,
                dimensions=Dimensions(t, dims.width, dims.height),
                quantity=2,
                anchor=AnchorPattern.SIDES,
            ),
        ]
        if shelves > 0:
            parts.append(
                Part(
                    id="bookshelf-shelf",
                    name="Shelf",
                    category=PartCategory.SURFACE,
                    role=PartRole.SHELF,
                    dimensions=Dimensions(dims.length, dims.width, t),
                    quantity=shelves,
                    anchor=AnchorPattern.DISTRIBUTE_Y,
                )
            )
        parts.extend(
            [
                Part(
                    id="bookshelf-back",
                    name="Back Panel",
                    category=PartCategory.SURFACE,
                    role=PartRole.BACK_PANEL,
                    dimensions=Dimensions(dims.length, t, dims.height),
                ),
                Part(
                    id="bookshelf-top",
                    name="Top Panel",
                    category=PartCategory.SURFACE,
                    role=PartRole.TOP_PANEL,
                    dimensions=Dimensions(dims.length, dims.width, t),
                ),
                Part(
                    id="bookshelf-bottom",
                    name="Bottom Panel",
                    category=PartCategory.SURFACE,
                    role=PartRole.BOTTOM_PANEL,
                    dimensions=Dimensions(
                        dims.length, dims.width, BOOKSHELF_PLINTH_HEIGHT_CM
                    ),
                ),
            ]
        )

        if options.partition.is_active:
            # Quantity and height are nominal, placement decides the real ones
            parts.append(
                VerticalPartition(
                    id="bookshelf-partition",
                    name="Vertical Partition",
                    category=PartCategory.SUPPORT,
                    role=PartRole.PARTITION,
                    dimensions=Dimensions(t, dims.width, NOMINAL_PARTITION_HEIGHT_CM),
                    quantity=shelves + 1,
                    anchor=AnchorPattern.VERTICAL_PARTITION,
                    partition=options.partition,
                )
            )
        return parts

    def _desk(self, dims: Dimensions, spec: EngineeringSpec) -> list[Part]:
        leg = spec.leg_size
        top = spec.top_thickness
        return [
            Part(
                id="desk-top",
                name="Desk Top",
                category=PartCategory.SURFACE,
                role=PartRole.DESK_TOP,
                dimensions=Dimensions(dims.length, dims.width, top),
            ),
            Part(
                id="desk-drawer",
                name="Drawer",
                category=PartCategory.STORAGE,
                role=PartRole.DRAWER,
                dimensions=Dimensions(
                    dims.length * DRAWER_LENGTH_RATIO,
                    dims.width * DRAWER_WIDTH_RATIO,
                    DRAWER_HEIGHT_CM,
                ),
                quantity=DRAWER_COUNT,
            ),
            Part(
                id="desk-leg",
                name="Desk Leg",
                category=PartCategory.SUPPORT,
                role=PartRole.LEG,
                dimensions=Dimensions(leg, leg, _member(dims.height - top)),
                quantity=4,
                anchor=AnchorPattern.CORNERS,
            ),
        ]

    def _bed_frame(self, dims: Dimensions, spec: EngineeringSpec) -> list[Part]:
        # The bed's long axis runs along Z: X spans the width, Z the length
        t = BED_BOARD_THICKNESS_CM
        leg = spec.leg_size
        parts = [
            Part(
                id="bedframe-headboard",
                name="Headboard",
                category=PartCategory.SURFACE,
                role=PartRole.HEADBOARD,
                dimensions=Dimensions(dims.width, t, HEADBOARD_HEIGHT_CM),
            ),
            Part(
                id="bedframe-footboard",
                name="Footboard",
                category=PartCategory.SURFACE,
                role=PartRole.FOOTBOARD,
                dimensions=Dimensions(dims.width, t, FOOTBOARD_HEIGHT_CM),
            ),
            Part(
                id="bedframe-side-rail",
                name="Side Rail",
                category=PartCategory.SUPPORT,
                role=PartRole.SIDE_RAIL,
                dimensions=Dimensions(t, dims.length, SIDE_RAIL_HEIGHT_CM),
                quantity=2,
                anchor=AnchorPattern.SIDES,
            ),
            Part(
                id="bedframe-slat",
                name="Support Slat",
                category=PartCategory.SUPPORT,
                role=PartRole.SLAT,
                dimensions=Dimensions(
                    _member(dims.width - SLAT_CLEARANCE_CM), SLAT_WIDTH_CM, t
                ),
                quantity=SLAT_COUNT,
                anchor=AnchorPattern.DISTRIBUTE_Z,
            ),
            Part(
                id="bedframe-leg",
                name="Bed Leg",
                category=PartCategory.SUPPORT,
                role=PartRole.LEG,
                dimensions=Dimensions(leg, leg, dims.height),
                quantity=4,
                anchor=AnchorPattern.CORNERS,
            ),
        ]

        beam = spec.addition(AdditionType.CENTER_BEAM)
        if beam is not None:
            parts.append(
                Part(
                    id="bedframe-center",
                    name="Center Beam",
                    category=PartCategory.SUPPORT,
                    role=PartRole.CENTER_BEAM,
                    dimensions=Dimensions(
                        beam.thickness, dims.length - 2 * t, beam.height
                    ),
                )
            )
        return parts


def generate_parts(
    furniture_type: FurnitureType,
    dimensions: Dimensions,
    material: MaterialType,
    color: str | None,
    spec: EngineeringSpec,
    options: GenerationOptions | None = None,
) -> list[Part]:
    """Generate parts with a default PartGenerator."""
    return PartGenerator().generate(
        furniture_type, dimensions, material, color, spec, options
    )
