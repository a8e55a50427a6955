"""Unit tests for assembly time and instructions."""

from furniture.domain.services import (
    AssemblyPlanner,
    StabilityAnalysis,
    StructuralReport,
    WorkforceEstimate,
)
from furniture.domain.services.assembly import BASE_INSTRUCTIONS
from furniture.domain.entities import Part
from furniture.domain.value_objects import Dimensions, FurnitureType, PartCategory, PartRole


def _report(people: int = 1, recommendations: tuple[str, ...] = ()) -> StructuralReport:
    reason = "Two-person assembly advised: estimated weight 30.0kg" if people > 1 else None
    return StructuralReport(
        load_capacity=50,
        self_weight=15,
        integrity_score=95,
        stability=StabilityAnalysis(is_stable=True, ratio=1.0, reason="Stable ratio"),
        workforce=WorkforceEstimate(hours=2, people=people, reason=reason),
        recommendations=recommendations,
    )


class TestAssemblyTime:
    def test_base_plus_two_minutes_per_piece(self) -> None:
        legs = Part(
            id="table-leg",
            name="Table Leg",
            category=PartCategory.SUPPORT,
            role=PartRole.LEG,
            dimensions=Dimensions(4, 4, 70),
            quantity=4,
        )
        top = Part(
            id="table-top",
            name="Table Top",
            category=PartCategory.SURFACE,
            role=PartRole.TABLE_TOP,
            dimensions=Dimensions(120, 80, 2.5),
        )
        assert AssemblyPlanner().assembly_time(FurnitureType.TABLE, [top, legs]) == 40

    def test_bed_frame_base(self) -> None:
        assert AssemblyPlanner().assembly_time(FurnitureType.BED_FRAME, []) == 60


class TestInstructions:
    """Tests for the assembly checklist."""

    def test_plain_checklist(self) -> None:
        steps = AssemblyPlanner().instructions(FurnitureType.BOOKSHELF)
        assert steps == list(BASE_INSTRUCTIONS[FurnitureType.BOOKSHELF])
        assert steps[0] == "Attach side panels to the back panel"

    def test_bed_frame_has_five_steps(self) -> None:
        assert len(AssemblyPlanner().instructions(FurnitureType.BED_FRAME)) == 5

    def test_recommendations_are_appended_as_notes(self) -> None:
        steps = AssemblyPlanner().instructions(
            FurnitureType.BOOKSHELF,
            _report(recommendations=("Secure to the wall with anti-tip hardware",)),
        )
        assert steps[-1] == "NOTE: Secure to the wall with anti-tip hardware"

    def test_two_person_warning_comes_first(self) -> None:
        steps = AssemblyPlanner().instructions(FurnitureType.TABLE, _report(people=2))
        assert steps[0].startswith("WARNING: Two-person assembly advised")
        assert len(steps) == len(BASE_INSTRUCTIONS[FurnitureType.TABLE]) + 1
