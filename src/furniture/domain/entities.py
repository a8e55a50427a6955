"""Domain entities for furniture parts."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import (
    AnchorPattern,
    Dimensions,
    MaterialType,
    PartCategory,
    PartitionConfig,
    PartRole,
    Position3D,
    Rotation3D,
)


@dataclass(frozen=True)
class Part:
    """An abstract part in the bill of parts.

    Dimensions are per unit. Parts with a quantity greater than one are
    exploded into individually placed instances by the anchor resolver,
    guided by ``anchor``.
    """

    id: str
    name: str
    category: PartCategory
    role: PartRole
    dimensions: Dimensions
    quantity: int = 1
    anchor: AnchorPattern | None = None
    material: MaterialType = MaterialType.WOOD
    color: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Part id must not be empty")
        if self.quantity < 1:
            raise ValueError("Part quantity must be at least 1")

    @property
    def is_horizontal_surface(self) -> bool:
        return self.role.is_horizontal_surface

    @property
    def unit_volume(self) -> float:
        return self.dimensions.volume


@dataclass(frozen=True)
class VerticalPartition(Part):
    """A divider board whose placement is resolved from shelf gaps.

    The quantity and height on this part are nominal; the real count and
    heights come out of partition placement.
    """

    partition: PartitionConfig = field(default_factory=PartitionConfig)

    @property
    def thickness(self) -> float:
        """Board thickness, measured along X."""
        return self.dimensions.length


@dataclass(frozen=True)
class PositionedPart:
    """A single, explicitly placed part instance.

    Attributes:
        id: Identifier unique within a design.
        source_id: Id of the abstract part this instance came from.
        position: Center of the part in the furniture's local frame.
        rotation: Euler rotation in radians.
    """

    id: str
    source_id: str
    name: str
    category: PartCategory
    role: PartRole
    dimensions: Dimensions
    position: Position3D
    rotation: Rotation3D = field(default_factory=Rotation3D)
    material: MaterialType = MaterialType.WOOD
    color: str | None = None

    @classmethod
    def from_part(
        cls,
        part: Part,
        position: Position3D,
        instance_id: str | None = None,
        rotation: Rotation3D | None = None,
        dimensions: Dimensions | None = None,
        source_id: str | None = None,
    ) -> "PositionedPart":
        """Create an instance of ``part`` at ``position``."""
        return cls(
            id=instance_id or part.id,
            source_id=source_id or part.id,
            name=part.name,
            category=part.category,
            role=part.role,
            dimensions=dimensions or part.dimensions,
            position=position,
            rotation=rotation or Rotation3D.identity(),
            material=part.material,
            color=part.color,
        )

    @property
    def quantity(self) -> int:
        return 1

    @property
    def top_face(self) -> float:
        return self.position.y + self.dimensions.height / 2

    @property
    def bottom_face(self) -> float:
        return self.position.y - self.dimensions.height / 2
