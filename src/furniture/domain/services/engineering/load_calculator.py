"""Load requirement calculations."""

from __future__ import annotations

import logging
import re

from .constants import POINT_LOAD_FACTOR, SELF_WEIGHT_KG, default_load_for
from .models import LoadAnalysis

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_projected_load(value: int | float | str | None) -> float | None:
    """Coerce a caller supplied load to kg.

    Every non-digit character is stripped from ``str(value)``, so "700kg"
    becomes 700 and "1,200" becomes 1200. Empty and non-positive results
    are ignored.

    Args:
        value: Projected load as given by the caller.

    Returns:
        Load in kg, or None when the value cannot be used.
    """
    if value is None:
        return None
    digits = _NON_DIGITS.sub("", str(value))
    if not digits:
        return None
    load = float(int(digits))
    return load if load > 0 else None


def calculate_load_requirements(
    type_name: str, projected_load: int | float | str | None = None
) -> LoadAnalysis:
    """Build the load analysis for a furniture type.

    Args:
        type_name: Furniture type name.
        projected_load: Optional override, see ``parse_projected_load``.

    Returns:
        LoadAnalysis with total, distributed and point loads.
    """
    load = default_load_for(type_name)
    override = parse_projected_load(projected_load)
    if override is not None:
        logger.debug(f"Projected load override {override}kg replaces default {load}kg")
        load = override

    return LoadAnalysis(
        total_load=load,
        distributed_load=load,
        point_load=load * POINT_LOAD_FACTOR,
        self_weight=SELF_WEIGHT_KG,
    )
