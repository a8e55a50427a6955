"""EngineeringCalculator facade service.

This module provides the EngineeringCalculator class, which coordinates
load analysis, structural additions, leg sizing and the surface
deflection check into a single EngineeringSpec.
"""

from __future__ import annotations

import logging

from furniture.domain.value_objects import Dimensions, FurnitureType, MaterialType

from .additions import determine_structural_additions
from .constants import (
    BASE_LEG_COUNT,
    BASE_TOP_THICKNESS_CM,
    DEFLECTION_CHECK_LOAD_KG,
    DEFLECTION_CHECK_SPAN_CM,
    LONG_SPAN_BOOST,
    LONG_SPAN_BOOST_THRESHOLD_CM,
    MAX_SLENDERNESS,
    MAX_TOP_THICKNESS_CM,
    THICKNESS_BY_LOAD,
)
from .deflection import calculate_deflection
from .leg_sizing import calculate_leg_dimensions
from .load_calculator import calculate_load_requirements
from .models import AdditionType, DeflectionResult, EngineeringSpec

logger = logging.getLogger(__name__)


class EngineeringCalculator:
    """Structural sizing service.

    Produces the leg cross-section, main surface thickness and any
    structural additions for a request. The result is computed once per
    request and consumed by part generation.

    Sizing Rules:
        - Legs share the total load; 4 legs plus any side legs
        - Legs are boosted 25% when the length exceeds 150 cm
        - Surface thickness starts at 2.5 cm and steps up with load
        - Deflection is checked for spans over 50 cm or loads over 100 kg
        - Surface thickness is capped at 15 cm

    Example:
        >>> calc = EngineeringCalculator()
        >>> spec = calc.compute(FurnitureType.TABLE, Dimensions(120, 80, 75), MaterialType.WOOD)
        >>> spec.top_thickness
        2.5
    """

    def compute(
        self,
        furniture_type: FurnitureType,
        dimensions: Dimensions,
        material: MaterialType,
        projected_load: int | float | str | None = None,
    ) -> EngineeringSpec:
        """Compute the engineering spec for a request.

        Args:
            furniture_type: Type being designed.
            dimensions: Overall dimensions in cm.
            material: Construction material.
            projected_load: Optional load override in kg.

        Returns:
            EngineeringSpec for the request.
        """
        warnings: list[str] = []

        load_analysis = calculate_load_requirements(furniture_type.value, projected_load)
        additions = determine_structural_additions(furniture_type, dimensions)

        leg_count = BASE_LEG_COUNT + sum(
            a.quantity for a in additions if a.type == AdditionType.SIDE_LEG
        )
        legs = calculate_leg_dimensions(
            load_analysis.total_load, dimensions.height, material, leg_count
        )
        leg_size = legs.square
        # Bookshelves stand on a plinth, the leg size is informational only
        if legs.slenderness_limited and furniture_type != FurnitureType.BOOKSHELF:
            warnings.append(
                f"Legs enlarged to {leg_size:.1f}cm to keep height/leg ratio "
                f"within {MAX_SLENDERNESS:g}"
            )
        if dimensions.length > LONG_SPAN_BOOST_THRESHOLD_CM:
            leg_size *= LONG_SPAN_BOOST

        top_thickness, deflection = self._surface_thickness(
            furniture_type, dimensions, material, load_analysis.distributed_load
        )
        if top_thickness > MAX_TOP_THICKNESS_CM:
            warnings.append(
                f"Required surface thickness {top_thickness:g}cm exceeds the "
                f"{MAX_TOP_THICKNESS_CM:g}cm cap; add intermediate supports"
            )
            top_thickness = MAX_TOP_THICKNESS_CM

        notes = (
            f"Designed for {load_analysis.total_load:g}kg load",
            f"Leg profile: {leg_size:g}cm",
            f"Top thickness: {top_thickness:g}cm",
        )

        logger.debug(
            f"Engineering spec for {furniture_type.value}: leg {leg_size:g}cm, "
            f"top {top_thickness:g}cm, {len(additions)} additions"
        )

        return EngineeringSpec(
            leg_size=leg_size,
            top_thickness=top_thickness,
            load_analysis=load_analysis,
            additions=tuple(additions),
            deflection=deflection,
            notes=notes,
            warnings=tuple(warnings),
        )

    def _surface_thickness(
        self,
        furniture_type: FurnitureType,
        dimensions: Dimensions,
        material: MaterialType,
        distributed_load: float,
    ) -> tuple[float, DeflectionResult | None]:
        """Pick the main surface thickness, before capping."""
        thickness = BASE_TOP_THICKNESS_CM
        for threshold, value in THICKNESS_BY_LOAD:
            if distributed_load > threshold:
                thickness = value
                break

        span = dimensions.length
        if furniture_type == FurnitureType.CHAIR:
            span = max(dimensions.length, dimensions.width)

        if span <= DEFLECTION_CHECK_SPAN_CM and distributed_load <= DEFLECTION_CHECK_LOAD_KG:
            return thickness, None

        result = calculate_deflection(
            span, dimensions.width, thickness, material, distributed_load
        )
        if not result.is_acceptable:
            logger.info(
                f"Deflection {result.deflection:.2f}cm over limit, surface "
                f"thickened to {result.recommended_thickness:g}cm"
            )
            thickness = result.recommended_thickness
        return thickness, result


def compute_engineering_spec(
    furniture_type: FurnitureType,
    dimensions: Dimensions,
    material: MaterialType,
    projected_load: int | float | str | None = None,
) -> EngineeringSpec:
    """Compute an engineering spec with a default calculator."""
    return EngineeringCalculator().compute(
        furniture_type, dimensions, material, projected_load
    )
