"""Domain layer - core business logic."""

from .entities import Part, PositionedPart, VerticalPartition
from .services import (
    AnchorResolver,
    AssemblyPlanner,
    CostEstimator,
    EngineeringCalculator,
    EngineeringSpec,
    PartGenerator,
    PartitionPlacer,
    SceneSerializer,
    StructuralAnalyzer,
)
from .value_objects import (
    AnchorPattern,
    Dimensions,
    FurnitureType,
    MaterialType,
    PartCategory,
    PartitionConfig,
    PartitionStrategy,
    PartRole,
    Position3D,
    Rotation3D,
)

__all__ = [
    # Entities
    "Part",
    "PositionedPart",
    "VerticalPartition",
    # Services
    "AnchorResolver",
    "AssemblyPlanner",
    "CostEstimator",
    "EngineeringCalculator",
    "EngineeringSpec",
    "PartGenerator",
    "PartitionPlacer",
    "SceneSerializer",
    "StructuralAnalyzer",
    # Value objects
    "AnchorPattern",
    "Dimensions",
    "FurnitureType",
    "MaterialType",
    "PartCategory",
    "PartitionConfig",
    "PartitionStrategy",
    "PartRole",
    "Position3D",
    "Rotation3D",
]
