"""Assembly time and instructions."""

from __future__ import annotations

from ..entities import Part
from ..value_objects import FurnitureType
from .structural import StructuralReport

__all__ = ["ASSEMBLY_BASE_MINUTES", "BASE_INSTRUCTIONS", "AssemblyPlanner"]

ASSEMBLY_BASE_MINUTES: dict[FurnitureType, int] = {
    FurnitureType.TABLE: 30,
    FurnitureType.CHAIR: 25,
    FurnitureType.BOOKSHELF: 45,
    FurnitureType.DESK: 40,
    FurnitureType.BED_FRAME: 60,
}
DEFAULT_BASE_MINUTES = 30
MINUTES_PER_PART = 2

BASE_INSTRUCTIONS: dict[FurnitureType, tuple[str, ...]] = {
    FurnitureType.TABLE: (
        "Attach the four table legs to the corners of the table top",
        "Ensure legs are perpendicular to the surface",
        "Secure with screws and wood glue",
        "Let dry for 24 hours before use",
    ),
    FurnitureType.CHAIR: (
        "Attach the four legs to the seat base",
        "Mount the backrest to the rear of the seat",
        "Ensure all connections are secure",
        "Test stability before use",
    ),
    FurnitureType.BOOKSHELF: (
        "Attach side panels to the back panel",
        "Insert shelves at equal intervals",
        "Secure shelves with brackets",
        "Mount to wall if needed for stability",
    ),
    FurnitureType.DESK: (
        "Attach the four legs to the desk top",
        "Install drawer slides on both sides",
        "Mount drawers to the slides",
        "Test drawer movement and adjust if needed",
    ),
    FurnitureType.BED_FRAME: (
        "Attach headboard and footboard to side rails",
        "Place support slats across the side rails",
        "Attach the four legs to each corner",
        "Test stability and adjust as needed",
        "Place mattress on top of slats",
    ),
}


class AssemblyPlanner:
    """Estimates assembly effort and writes the instruction checklist."""

    def assembly_time(self, furniture_type: FurnitureType, parts: list[Part]) -> int:
        """Assembly time in minutes: base time plus 2 minutes per piece."""
        pieces = sum(part.quantity for part in parts)
        base = ASSEMBLY_BASE_MINUTES.get(furniture_type, DEFAULT_BASE_MINUTES)
        return base + MINUTES_PER_PART * pieces

    def instructions(
        self, furniture_type: FurnitureType, report: StructuralReport | None = None
    ) -> list[str]:
        """Build the assembly checklist.

        Structural recommendations are appended as ``NOTE:`` lines and a
        two-person warning is put first when the report advises it.
        """
        steps = list(BASE_INSTRUCTIONS.get(furniture_type, ()))
        if report is None:
            return steps

        steps.extend(f"NOTE: {rec}" for rec in report.recommendations)
        if report.workforce.requires_two_people and report.workforce.reason:
            steps.insert(0, f"WARNING: {report.workforce.reason}")
        return steps
