"""Core geometry and material value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class FurnitureType(str, Enum):
    """Furniture archetypes the engine can generate."""

    TABLE = "table"
    CHAIR = "chair"
    BOOKSHELF = "bookshelf"
    DESK = "desk"
    BED_FRAME = "bed frame"


class MaterialType(str, Enum):
    """Construction materials.

    GLASS only appears in the engineering and visual tables; requests may
    use the values listed in ``requestable()``.
    """

    WOOD = "wood"
    METAL = "metal"
    PLASTIC = "plastic"
    GLASS = "glass"

    @classmethod
    def requestable(cls) -> tuple["MaterialType", ...]:
        """Materials accepted in a furniture request."""
        return (cls.WOOD, cls.METAL, cls.PLASTIC)


@dataclass(frozen=True)
class Dimensions:
    """Immutable dimensions in centimeters.

    Length runs along the furniture's X axis, width along Z (depth) and
    height along Y.
    """

    length: float
    width: float
    height: float

    def __post_init__(self) -> None:
        values = (self.length, self.width, self.height)
        if not all(math.isfinite(v) for v in values):
            raise ValueError("All dimensions must be finite")
        if self.length <= 0 or self.width <= 0 or self.height <= 0:
            raise ValueError("All dimensions must be positive")

    @property
    def volume(self) -> float:
        """Volume in cubic centimeters."""
        return self.length * self.width * self.height

    def with_height(self, height: float) -> "Dimensions":
        """Return a copy with a different height."""
        return Dimensions(length=self.length, width=self.width, height=height)


@dataclass(frozen=True)
class Position3D:
    """Center position in the furniture's local frame.

    Origin is the floor center of the furniture, Y points up.
    """

    x: float
    y: float
    z: float

    def as_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class Rotation3D:
    """Euler rotation in radians."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> "Rotation3D":
        return cls()

    @classmethod
    def about_y(cls, angle: float) -> "Rotation3D":
        """Rotation about the vertical axis."""
        return cls(y=angle)

    @property
    def is_quarter_turn_y(self) -> bool:
        """True when rotated by an odd multiple of 90 degrees about Y."""
        quarter_turns = self.y / (math.pi / 2)
        nearest = round(quarter_turns)
        return abs(quarter_turns - nearest) < 1e-9 and nearest % 2 != 0

    def as_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}
