"""Engineering constants for load, leg sizing, and surface deflection.

This module provides:
- Default design loads per furniture type
- Material stiffness table
- Deflection limits and thickness heuristics
- Thresholds for structural additions
"""

from __future__ import annotations

from furniture.domain.value_objects import MaterialType


# Default design load in kg, matched against the lowercased type name.
# Order matters: the first keyword group found in the name wins.
DEFAULT_LOADS: tuple[tuple[tuple[str, ...], float], ...] = (
    (("chair", "stool"), 120.0),
    (("table", "desk"), 50.0),
    (("shelf", "rack"), 20.0),
    (("bed",), 200.0),
)
FALLBACK_LOAD_KG: float = 30.0

# Placeholder self weight used in the load analysis
SELF_WEIGHT_KG: float = 15.0

# Point load as a fraction of total load
POINT_LOAD_FACTOR: float = 0.8


# Young's modulus in GPa
MATERIAL_MODULUS_GPA: dict[MaterialType, float] = {
    MaterialType.WOOD: 11.0,
    MaterialType.METAL: 200.0,
    MaterialType.PLASTIC: 2.5,
    MaterialType.GLASS: 70.0,
}

# 1 GPa = 1e9 N/m² = 1e5 N/cm²
GPA_TO_N_PER_CM2: float = 1e5

GRAVITY: float = 9.8

# Maximum allowed midspan deflection in cm
MAX_DEFLECTION_CM: float = 0.5

# Deflection checks only run for spans or loads above these
DEFLECTION_CHECK_SPAN_CM: float = 50.0
DEFLECTION_CHECK_LOAD_KG: float = 100.0

# Surface thickness heuristics (cm)
BASE_TOP_THICKNESS_CM: float = 2.5
THICKNESS_BY_LOAD: tuple[tuple[float, float], ...] = (
    (800.0, 6.0),
    (400.0, 5.0),
    (200.0, 4.0),
)
MAX_TOP_THICKNESS_CM: float = 15.0
THICKNESS_ROUNDING_CM: float = 0.5


# Leg sizing (cm)
BASE_LEG_COUNT: int = 4
MIN_LEG_SIZE_CM: float = 2.0
WOOD_MEDIUM_LEG_CM: float = 3.5
WOOD_HEAVY_LEG_CM: float = 5.0
WOOD_MEDIUM_LOAD_PER_LEG: float = 30.0
WOOD_HEAVY_LOAD_PER_LEG: float = 50.0
METAL_MIN_LEG_CM: float = 1.5
METAL_LEG_FACTOR: float = 0.5
MAX_SLENDERNESS: float = 40.0
ROUND_PROFILE_FACTOR: float = 1.15
LONG_SPAN_BOOST_THRESHOLD_CM: float = 150.0
LONG_SPAN_BOOST: float = 1.25


# Structural additions
APRON_LENGTH_THRESHOLD_CM: float = 120.0
APRON_THICKNESS_CM: float = 2.5
APRON_HEIGHT_CM: float = 8.0
SIDE_LEG_LENGTH_THRESHOLD_CM: float = 220.0
SIDE_LEG_QUANTITY: int = 2
CENTER_BEAM_WIDTH_THRESHOLD_CM: float = 140.0
CENTER_BEAM_THICKNESS_CM: float = 5.0
CENTER_BEAM_HEIGHT_CM: float = 8.0


def default_load_for(type_name: str) -> float:
    """Get the default design load for a furniture type name.

    Args:
        type_name: Furniture type name, e.g. "table" or "bed frame".

    Returns:
        Design load in kg.
    """
    name = type_name.lower()
    for keywords, load in DEFAULT_LOADS:
        if any(keyword in name for keyword in keywords):
            return load
    return FALLBACK_LOAD_KG
