"""Unit tests for the engineering calculator and its helpers."""

import pytest

from furniture.domain.services.engineering import (
    AdditionType,
    EngineeringCalculator,
    calculate_deflection,
    compute_engineering_spec,
)
from furniture.domain.services.engineering.additions import determine_structural_additions
from furniture.domain.services.engineering.constants import default_load_for
from furniture.domain.services.engineering.deflection import round_up_to
from furniture.domain.services.engineering.leg_sizing import calculate_leg_dimensions
from furniture.domain.services.engineering.load_calculator import (
    calculate_load_requirements,
    parse_projected_load,
)
from furniture.domain.value_objects import Dimensions, FurnitureType, MaterialType


class TestDefaultLoads:
    @pytest.mark.parametrize(
        "name,load",
        [
            ("chair", 120),
            ("stool", 120),
            ("table", 50),
            ("desk", 50),
            ("bookshelf", 20),
            ("wine rack", 20),
            ("bed frame", 200),
            ("sofa", 30),
        ],
    )
    def test_keyword_match(self, name: str, load: float) -> None:
        assert default_load_for(name) == load


class TestProjectedLoad:
    """Tests for projected load coercion."""

    def test_numeric(self) -> None:
        assert parse_projected_load(80) == 80

    def test_strips_units(self) -> None:
        assert parse_projected_load("700kg") == 700

    @pytest.mark.parametrize("value", [None, 0, "", "heavy", "0kg"])
    def test_unusable_values_are_ignored(self, value: object) -> None:
        assert parse_projected_load(value) is None

    def test_override_replaces_default(self) -> None:
        analysis = calculate_load_requirements("table", "300kg")
        assert analysis.total_load == 300
        assert analysis.point_load == pytest.approx(240)
        assert analysis.self_weight == 15

    def test_ignored_override_keeps_default(self) -> None:
        assert calculate_load_requirements("chair", 0).total_load == 120


class TestLegSizing:
    def test_light_wood_load_uses_minimum(self) -> None:
        legs = calculate_leg_dimensions(50, 75, MaterialType.WOOD)
        assert legs.square == 2.0
        assert legs.round == pytest.approx(2.3)
        assert not legs.slenderness_limited

    def test_medium_and_heavy_wood_loads(self) -> None:
        assert calculate_leg_dimensions(160, 70, MaterialType.WOOD).square == 3.5
        assert calculate_leg_dimensions(240, 70, MaterialType.WOOD).square == 5.0

    def test_metal_can_be_thinner(self) -> None:
        assert calculate_leg_dimensions(50, 50, MaterialType.METAL).square == 1.5

    def test_slenderness_guard(self) -> None:
        legs = calculate_leg_dimensions(20, 180, MaterialType.WOOD)
        assert legs.slenderness_limited
        assert legs.square == pytest.approx(4.5)


class TestDeflection:
    """Tests for the simply supported beam deflection check."""

    def test_within_limit(self) -> None:
        result = calculate_deflection(120, 80, 2.5, MaterialType.WOOD, 50)
        assert result.deflection == pytest.approx(0.154, abs=1e-3)
        assert result.is_acceptable
        assert result.recommended_thickness == 2.5

    def test_150cm_reference_span_is_acceptable(self) -> None:
        # 490 N * 150³ / (48 * 1.1e6 N/cm² * 104.17 cm⁴)
        result = calculate_deflection(150, 80, 2.5, MaterialType.WOOD, 50)
        assert result.deflection == pytest.approx(0.3007, abs=1e-4)
        assert result.is_acceptable
        assert result.recommended_thickness == 2.5

    def test_inversion_thickens_surface(self) -> None:
        result = calculate_deflection(200, 80, 2.5, MaterialType.WOOD, 50)
        assert result.deflection == pytest.approx(0.713, abs=1e-3)
        assert not result.is_acceptable
        assert result.recommended_thickness == 3.0

    def test_recommended_thickness_meets_limit(self) -> None:
        first = calculate_deflection(240, 90, 2.5, MaterialType.WOOD, 50)
        second = calculate_deflection(
            240, 90, first.recommended_thickness, MaterialType.WOOD, 50
        )
        assert second.is_acceptable

    def test_stiffer_material_deflects_less(self) -> None:
        wood = calculate_deflection(200, 80, 2.5, MaterialType.WOOD, 50)
        metal = calculate_deflection(200, 80, 2.5, MaterialType.METAL, 50)
        assert metal.deflection < wood.deflection

    def test_rejects_zero_thickness(self) -> None:
        with pytest.raises(ValueError):
            calculate_deflection(200, 80, 0, MaterialType.WOOD, 50)

    def test_round_up_to_half_centimeter(self) -> None:
        assert round_up_to(2.81) == 3.0
        assert round_up_to(3.0) == 3.0
        assert round_up_to(3.01) == 3.5


class TestStructuralAdditions:
    def test_short_table_has_none(self) -> None:
        assert determine_structural_additions(FurnitureType.TABLE, Dimensions(100, 60, 75)) == []

    def test_apron_above_120(self) -> None:
        additions = determine_structural_additions(
            FurnitureType.TABLE, Dimensions(160, 90, 75)
        )
        assert [a.type for a in additions] == [AdditionType.APRON]
        assert additions[0].thickness == 2.5
        assert additions[0].height == 8

    def test_side_legs_above_220(self) -> None:
        additions = determine_structural_additions(
            FurnitureType.TABLE, Dimensions(240, 90, 75)
        )
        types = [a.type for a in additions]
        assert types == [AdditionType.APRON, AdditionType.SIDE_LEG]
        assert additions[1].quantity == 2

    def test_wide_bed_gets_center_beam(self) -> None:
        additions = determine_structural_additions(
            FurnitureType.BED_FRAME, Dimensions(200, 160, 40)
        )
        assert [a.type for a in additions] == [AdditionType.CENTER_BEAM]

    def test_narrow_bed_has_no_beam(self) -> None:
        assert determine_structural_additions(
            FurnitureType.BED_FRAME, Dimensions(200, 90, 40)
        ) == []

    def test_long_desk_has_no_table_additions(self) -> None:
        assert determine_structural_additions(
            FurnitureType.DESK, Dimensions(240, 90, 75)
        ) == []


class TestEngineeringCalculator:
    """Tests for the EngineeringCalculator facade."""

    def setup_method(self) -> None:
        self.calculator = EngineeringCalculator()

    def test_default_table(self) -> None:
        spec = self.calculator.compute(
            FurnitureType.TABLE, Dimensions(120, 80, 75), MaterialType.WOOD
        )
        assert spec.top_thickness == 2.5
        assert spec.leg_size == 2.0
        assert spec.additions == ()
        assert spec.deflection is not None and spec.deflection.is_acceptable
        assert spec.warnings == ()

    def test_long_table_is_boosted_and_thickened(self) -> None:
        spec = self.calculator.compute(
            FurnitureType.TABLE, Dimensions(240, 90, 75), MaterialType.WOOD
        )
        assert spec.leg_size == pytest.approx(2.5)
        assert spec.top_thickness == 3.5
        assert spec.has_addition(AdditionType.SIDE_LEG)
        assert spec.extra_leg_count == 2

    def test_load_steps_thickness(self) -> None:
        spec = self.calculator.compute(
            FurnitureType.TABLE, Dimensions(40, 40, 75), MaterialType.METAL, 450
        )
        assert spec.top_thickness >= 5.0

    def test_small_light_piece_skips_deflection_check(self) -> None:
        spec = self.calculator.compute(
            FurnitureType.TABLE, Dimensions(45, 45, 50), MaterialType.WOOD
        )
        assert spec.deflection is None

    def test_thickness_is_capped(self) -> None:
        spec = self.calculator.compute(
            FurnitureType.TABLE, Dimensions(500, 20, 75), MaterialType.PLASTIC, 900
        )
        assert spec.top_thickness == 15.0
        assert any("cap" in w for w in spec.warnings)

    def test_slenderness_warning(self) -> None:
        spec = self.calculator.compute(
            FurnitureType.CHAIR, Dimensions(45, 45, 90), MaterialType.WOOD
        )
        assert spec.leg_size == pytest.approx(2.25)
        assert any("Legs enlarged" in w for w in spec.warnings)

    def test_bookshelf_has_no_slenderness_warning(self) -> None:
        spec = self.calculator.compute(
            FurnitureType.BOOKSHELF, Dimensions(80, 30, 180), MaterialType.WOOD
        )
        assert spec.warnings == ()

    def test_notes(self) -> None:
        spec = compute_engineering_spec(
            FurnitureType.TABLE, Dimensions(120, 80, 75), MaterialType.WOOD, 80
        )
        assert spec.notes == (
            "Designed for 80kg load",
            "Leg profile: 2cm",
            "Top thickness: 2.5cm",
        )
