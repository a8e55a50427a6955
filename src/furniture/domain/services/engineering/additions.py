"""Structural addition rules."""

from __future__ import annotations

from furniture.domain.value_objects import Dimensions, FurnitureType

from .constants import (
    APRON_HEIGHT_CM,
    APRON_LENGTH_THRESHOLD_CM,
    APRON_THICKNESS_CM,
    CENTER_BEAM_HEIGHT_CM,
    CENTER_BEAM_THICKNESS_CM,
    CENTER_BEAM_WIDTH_THRESHOLD_CM,
    SIDE_LEG_LENGTH_THRESHOLD_CM,
    SIDE_LEG_QUANTITY,
)
from .models import AdditionType, StructuralAddition


def determine_structural_additions(
    furniture_type: FurnitureType, dimensions: Dimensions
) -> list[StructuralAddition]:
    """Recommend extra structural members.

    Rules:
        - Tables longer than 120 cm get an apron under the top.
        - Tables longer than 220 cm get two perimeter legs at mid-span.
          Center legs are never added since they block knee space.
        - Bed frames wider than 140 cm get a center beam under the slats.

    Args:
        furniture_type: Type being designed.
        dimensions: Overall dimensions.

    Returns:
        List of additions, possibly empty.
    """
    additions: list[StructuralAddition] = []

    if furniture_type == FurnitureType.TABLE:
        if dimensions.length > APRON_LENGTH_THRESHOLD_CM:
            additions.append(
                StructuralAddition(
                    type=AdditionType.APRON,
                    quantity=1,
                    thickness=APRON_THICKNESS_CM,
                    height=APRON_HEIGHT_CM,
                )
            )
        if dimensions.length > SIDE_LEG_LENGTH_THRESHOLD_CM:
            # Thickness is a placeholder, side legs reuse the computed leg size
            additions.append(
                StructuralAddition(
                    type=AdditionType.SIDE_LEG,
                    quantity=SIDE_LEG_QUANTITY,
                    thickness=4.0,
                    height=dimensions.height,
                )
            )

    if (
        furniture_type == FurnitureType.BED_FRAME
        and dimensions.width > CENTER_BEAM_WIDTH_THRESHOLD_CM
    ):
        additions.append(
            StructuralAddition(
                type=AdditionType.CENTER_BEAM,
                quantity=1,
                thickness=CENTER_BEAM_THICKNESS_CM,
                height=CENTER_BEAM_HEIGHT_CM,
            )
        )

    return additions
