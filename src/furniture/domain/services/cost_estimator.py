"""Material cost and weight estimation.

Costs are volume based: every part costs its unit volume times the
material rate, times its quantity. The design total is the exact sum
rounded to the cent. Line totals are rounded so that they add up to that
total: each line is truncated to the cent and the leftover cents go to the
lines with the largest remainders.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..entities import Part
from ..value_objects import MaterialType

__all__ = [
    "MATERIAL_PROPERTIES",
    "CostBreakdown",
    "CostEstimator",
    "CostLine",
    "MaterialProperties",
]


@dataclass(frozen=True)
class MaterialProperties:
    """Physical and pricing properties of a material.

    Attributes:
        density: Density in g/cm³.
        cost_per_cm3: Price per cubic centimeter.
        default_color: Hex color used when none is requested.
    """

    density: float
    cost_per_cm3: float
    default_color: str


MATERIAL_PROPERTIES: dict[MaterialType, MaterialProperties] = {
    MaterialType.WOOD: MaterialProperties(0.6, 0.051, "#8B4513"),
    MaterialType.METAL: MaterialProperties(7.8, 0.429, "#C0C0C0"),
    MaterialType.PLASTIC: MaterialProperties(0.9, 0.108, "#FFFFFF"),
}


def properties_for(material: MaterialType) -> MaterialProperties:
    """Material properties, falling back to wood for unpriced materials."""
    return MATERIAL_PROPERTIES.get(material, MATERIAL_PROPERTIES[MaterialType.WOOD])


@dataclass(frozen=True)
class CostLine:
    """Cost of one bill-of-parts line.

    Attributes:
        part_id: Id of the abstract part.
        name: Part name.
        quantity: Number of units.
        volume: Unit volume in cm³, rounded to 2 decimals.
        unit_cost: Cost of one unit, rounded to the cent.
        total: Cost of all units, rounded to the cent.
        percentage: Share of the design total, 1 decimal.
    """

    part_id: str
    name: str
    quantity: int
    volume: float
    unit_cost: float
    total: float
    percentage: float


@dataclass(frozen=True)
class CostBreakdown:
    """Per-part cost lines and their total."""

    lines: tuple[CostLine, ...] = field(default_factory=tuple)
    total_cost: float = 0.0

    @property
    def line_sum(self) -> float:
        return round(sum(line.total for line in self.lines), 2)


def _allocate_cents(amounts: list[float], total: float) -> list[float]:
    """Round amounts to the cent so that they sum to ``total``.

    Largest remainder method: every amount is truncated to whole cents and
    the cents still missing from the total go to the largest fractions,
    earlier lines first on ties.
    """
    cents = [amount * 100 for amount in amounts]
    floors = [math.floor(c) for c in cents]
    missing = round(total * 100) - sum(floors)
    by_remainder = sorted(range(len(cents)), key=lambda i: floors[i] - cents[i])
    for i in by_remainder[: max(missing, 0)]:
        floors[i] += 1
    return [f / 100 for f in floors]


class CostEstimator:
    """Computes cost breakdowns and weight estimates for parts."""

    def breakdown(self, parts: list[Part], material: MaterialType) -> CostBreakdown:
        """Calculate the cost breakdown for a bill of parts.

        Args:
            parts: Abstract parts with quantities.
            material: Construction material.

        Returns:
            CostBreakdown whose lines sum to its total.
        """
        rate = properties_for(material).cost_per_cm3

        exact = [part.unit_volume * rate * part.quantity for part in parts]
        total = round(sum(exact), 2)
        line_totals = _allocate_cents(exact, total)

        lines = tuple(
            CostLine(
                part_id=part.id,
                name=part.name,
                quantity=part.quantity,
                volume=round(part.unit_volume, 2),
                unit_cost=round(part.unit_volume * rate, 2),
                total=line_total,
                percentage=round(line_total / total * 100, 1) if total > 0 else 0.0,
            )
            for part, line_total in zip(parts, line_totals)
        )
        return CostBreakdown(lines=lines, total_cost=total)

    def total_cost(self, parts: list[Part], material: MaterialType) -> float:
        """Total material cost, rounded to the cent."""
        return self.breakdown(parts, material).total_cost

    def estimate_weight(self, parts: list[Part], material: MaterialType) -> float:
        """Estimated finished weight in kg."""
        density = properties_for(material).density
        grams = sum(part.unit_volume * part.quantity * density for part in parts)
        return grams / 1000
