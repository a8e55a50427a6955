"""Engineering calculations and data models.

This package provides:
- Load analysis with caller overrides
- Leg cross-section sizing with a slenderness guard
- Surface deflection checks and thickness inversion
- Structural additions for long tables and wide bed frames
- EngineeringCalculator facade producing an EngineeringSpec
"""

from __future__ import annotations

from .additions import determine_structural_additions
from .constants import (
    MATERIAL_MODULUS_GPA,
    MAX_DEFLECTION_CM,
    MAX_TOP_THICKNESS_CM,
    default_load_for,
)
from .deflection import calculate_deflection, modulus_n_per_cm2
from .engineering_facade import EngineeringCalculator, compute_engineering_spec
from .leg_sizing import calculate_leg_dimensions
from .load_calculator import calculate_load_requirements, parse_projected_load
from .models import (
    AdditionType,
    DeflectionResult,
    EngineeringSpec,
    LegDimensions,
    LoadAnalysis,
    StructuralAddition,
)

__all__ = [
    # Constants
    "MATERIAL_MODULUS_GPA",
    "MAX_DEFLECTION_CM",
    "MAX_TOP_THICKNESS_CM",
    "default_load_for",
    # Models
    "AdditionType",
    "DeflectionResult",
    "EngineeringSpec",
    "LegDimensions",
    "LoadAnalysis",
    "StructuralAddition",
    # Calculations
    "calculate_deflection",
    "calculate_leg_dimensions",
    "calculate_load_requirements",
    "determine_structural_additions",
    "modulus_n_per_cm2",
    "parse_projected_load",
    # Facade
    "EngineeringCalculator",
    "compute_engineering_spec",
]
