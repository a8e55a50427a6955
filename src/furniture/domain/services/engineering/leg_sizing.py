"""Leg cross-section sizing.

A step-wise heuristic in place of a full Euler buckling calculation:
the per-leg load picks a minimum square profile, metal legs are allowed
to be thinner, and a slenderness guard stops very tall, thin legs.
"""

from __future__ import annotations

from furniture.domain.value_objects import MaterialType

from .constants import (
    BASE_LEG_COUNT,
    MAX_SLENDERNESS,
    METAL_LEG_FACTOR,
    METAL_MIN_LEG_CM,
    MIN_LEG_SIZE_CM,
    ROUND_PROFILE_FACTOR,
    WOOD_HEAVY_LEG_CM,
    WOOD_HEAVY_LOAD_PER_LEG,
    WOOD_MEDIUM_LEG_CM,
    WOOD_MEDIUM_LOAD_PER_LEG,
)
from .models import LegDimensions


def calculate_leg_dimensions(
    load_kg: float,
    height_cm: float,
    material: MaterialType,
    quantity: int = BASE_LEG_COUNT,
) -> LegDimensions:
    """Calculate minimum leg dimensions.

    Args:
        load_kg: Total load carried by all legs.
        height_cm: Leg height in cm.
        material: Leg material.
        quantity: Number of legs sharing the load.

    Returns:
        LegDimensions with square and round profiles.
    """
    load_per_leg = load_kg / (quantity or BASE_LEG_COUNT)

    size = MIN_LEG_SIZE_CM
    if material == MaterialType.WOOD:
        if load_per_leg > WOOD_HEAVY_LOAD_PER_LEG:
            size = WOOD_HEAVY_LEG_CM
        elif load_per_leg > WOOD_MEDIUM_LOAD_PER_LEG:
            size = WOOD_MEDIUM_LEG_CM
    elif material == MaterialType.METAL:
        size = max(METAL_MIN_LEG_CM, size * METAL_LEG_FACTOR)

    slenderness_limited = False
    if height_cm / size > MAX_SLENDERNESS:
        size = height_cm / MAX_SLENDERNESS
        slenderness_limited = True

    return LegDimensions(
        square=size,
        round=size * ROUND_PROFILE_FACTOR,
        slenderness_limited=slenderness_limited,
    )
