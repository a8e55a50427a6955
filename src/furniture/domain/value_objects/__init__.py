"""Value objects for the furniture domain.

This module provides immutable data types used throughout the furniture
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry and materials
from ._core_geometry import (
    Dimensions,
    FurnitureType,
    MaterialType,
    Position3D,
    Rotation3D,
)

# Part classification
from ._parts import (
    AnchorPattern,
    PartCategory,
    PartRole,
)

# Partition rules
from ._partitions import (
    EveryNthTarget,
    ExactTarget,
    NamedTarget,
    Parity,
    ParityTarget,
    PartitionConfig,
    PartitionRatio,
    PartitionStrategy,
    RangeTarget,
    ShelfModifier,
    ShelfPosition,
    ShelfTarget,
    parse_partition_ratio,
    parse_shelf_target,
)

__all__ = [
    "AnchorPattern",
    "Dimensions",
    "EveryNthTarget",
    "ExactTarget",
    "FurnitureType",
    "MaterialType",
    "NamedTarget",
    "Parity",
    "ParityTarget",
    "PartCategory",
    "PartRole",
    "PartitionConfig",
    "PartitionRatio",
    "PartitionStrategy",
    "Position3D",
    "RangeTarget",
    "Rotation3D",
    "ShelfModifier",
    "ShelfPosition",
    "ShelfTarget",
    "parse_partition_ratio",
    "parse_shelf_target",
]
