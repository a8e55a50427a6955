"""Surface deflection check.

Treats the main surface as a simply supported beam with a center load:

    deflection = F * L^3 / (48 * E * I),   I = w * t^3 / 12

When the result exceeds the limit the formula is inverted for the
required moment of inertia and the thickness is rounded up to the next
half centimeter.
"""

from __future__ import annotations

import math

from furniture.domain.value_objects import MaterialType

from .constants import (
    GPA_TO_N_PER_CM2,
    GRAVITY,
    MATERIAL_MODULUS_GPA,
    MAX_DEFLECTION_CM,
    THICKNESS_ROUNDING_CM,
)
from .models import DeflectionResult

_FALLBACK_MODULUS_GPA = 10.0


def modulus_n_per_cm2(material: MaterialType) -> float:
    """Young's modulus of a material in N/cm²."""
    return MATERIAL_MODULUS_GPA.get(material, _FALLBACK_MODULUS_GPA) * GPA_TO_N_PER_CM2


def round_up_to(value: float, step: float = THICKNESS_ROUNDING_CM) -> float:
    """Round up to the next multiple of ``step``."""
    return math.ceil(value / step - 1e-9) * step


def calculate_deflection(
    span: float,
    width: float,
    thickness: float,
    material: MaterialType,
    load_kg: float,
    max_deflection: float = MAX_DEFLECTION_CM,
) -> DeflectionResult:
    """Calculate midspan deflection of a horizontal surface.

    Args:
        span: Unsupported span in cm.
        width: Surface width (beam breadth) in cm.
        thickness: Surface thickness in cm.
        material: Surface material.
        load_kg: Load at midspan in kg.
        max_deflection: Deflection limit in cm.

    Returns:
        DeflectionResult with the recommended thickness.
    """
    if span <= 0 or width <= 0 or thickness <= 0:
        raise ValueError("Span, width and thickness must be positive")

    modulus = modulus_n_per_cm2(material)
    inertia = width * thickness**3 / 12
    force = load_kg * GRAVITY
    span_cubed = span**3

    deflection = force * span_cubed / (48 * modulus * inertia)
    is_acceptable = deflection <= max_deflection

    recommended = thickness
    if not is_acceptable:
        required_inertia = force * span_cubed / (48 * modulus * max_deflection)
        required_thickness = (12 * required_inertia / width) ** (1 / 3)
        recommended = round_up_to(required_thickness)

    return DeflectionResult(
        deflection=deflection,
        is_acceptable=is_acceptable,
        recommended_thickness=recommended,
    )
