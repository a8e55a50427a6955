"""Domain services for the furniture engine."""

from __future__ import annotations

from .anchor_resolver import AnchorResolver, Footprint, PositionResult, resolve_positions
from .assembly import AssemblyPlanner
from .cost_estimator import (
    MATERIAL_PROPERTIES,
    CostBreakdown,
    CostEstimator,
    CostLine,
    MaterialProperties,
    properties_for,
)
from .engineering import (
    AdditionType,
    DeflectionResult,
    EngineeringCalculator,
    EngineeringSpec,
    LoadAnalysis,
    StructuralAddition,
    calculate_deflection,
    compute_engineering_spec,
)
from .part_generation import GenerationOptions, PartGenerator, generate_parts
from .partition_placement import (
    Interval,
    IntervalPlacement,
    PartitionPlacer,
    PlacementResult,
    extract_intervals,
)
from .scene import Scene, SceneSerializer
from .structural import (
    StabilityAnalysis,
    StructuralAnalyzer,
    StructuralReport,
    WorkforceEstimate,
)

__all__ = [
    # Engineering
    "AdditionType",
    "DeflectionResult",
    "EngineeringCalculator",
    "EngineeringSpec",
    "LoadAnalysis",
    "StructuralAddition",
    "calculate_deflection",
    "compute_engineering_spec",
    # Parts and placement
    "AnchorResolver",
    "Footprint",
    "GenerationOptions",
    "Interval",
    "IntervalPlacement",
    "PartGenerator",
    "PartitionPlacer",
    "PlacementResult",
    "PositionResult",
    "extract_intervals",
    "generate_parts",
    "resolve_positions",
    # Estimation
    "MATERIAL_PROPERTIES",
    "AssemblyPlanner",
    "CostBreakdown",
    "CostEstimator",
    "CostLine",
    "MaterialProperties",
    "properties_for",
    # Structural report
    "StabilityAnalysis",
    "StructuralAnalyzer",
    "StructuralReport",
    "WorkforceEstimate",
    # Scene
    "Scene",
    "SceneSerializer",
]
