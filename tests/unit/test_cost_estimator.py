"""Unit tests for cost and weight estimation."""

import pytest

from furniture.domain.entities import Part
from furniture.domain.services import CostEstimator, properties_for
from furniture.domain.value_objects import Dimensions, MaterialType, PartCategory, PartRole


def _part(part_id: str, dims: Dimensions, quantity: int = 1) -> Part:
    return Part(
        id=part_id,
        name=part_id.title(),
        category=PartCategory.SUPPORT,
        role=PartRole.LEG,
        dimensions=dims,
        quantity=quantity,
    )


PARTS = [
    _part("block", Dimensions(10, 10, 10), quantity=2),
    _part("board", Dimensions(100, 50, 2)),
]


class TestMaterialProperties:
    def test_default_colors(self) -> None:
        assert properties_for(MaterialType.WOOD).default_color == "#8B4513"
        assert properties_for(MaterialType.METAL).default_color == "#C0C0C0"
        assert properties_for(MaterialType.PLASTIC).default_color == "#FFFFFF"

    def test_unpriced_material_falls_back_to_wood(self) -> None:
        assert properties_for(MaterialType.GLASS) == properties_for(MaterialType.WOOD)


class TestCostEstimator:
    """Tests for CostEstimator."""

    def setup_method(self) -> None:
        self.estimator = CostEstimator()

    def test_breakdown_lines(self) -> None:
        breakdown = self.estimator.breakdown(PARTS, MaterialType.WOOD)
        block, board = breakdown.lines
        assert block.volume == 1000
        assert block.unit_cost == pytest.approx(51.0)
        assert block.total == pytest.approx(102.0)
        assert board.total == pytest.approx(510.0)
        assert breakdown.total_cost == pytest.approx(612.0)

    def test_percentages(self) -> None:
        breakdown = self.estimator.breakdown(PARTS, MaterialType.WOOD)
        assert [line.percentage for line in breakdown.lines] == [16.7, 83.3]

    def test_lines_sum_to_total(self) -> None:
        parts = [_part(f"p{i}", Dimensions(3.3 + i, 7.1, 1.7), quantity=i + 1) for i in range(7)]
        breakdown = self.estimator.breakdown(parts, MaterialType.PLASTIC)
        assert breakdown.line_sum == breakdown.total_cost

    def test_total_is_rounded_exact_sum(self) -> None:
        # Each line costs 0.3366, so rounding lines first would give 1.02
        parts = [_part(f"peg{i}", Dimensions(6.6, 1, 1)) for i in range(3)]
        breakdown = self.estimator.breakdown(parts, MaterialType.WOOD)
        assert breakdown.total_cost == pytest.approx(1.01)
        assert [line.total for line in breakdown.lines] == pytest.approx([0.34, 0.34, 0.33])
        assert breakdown.line_sum == pytest.approx(breakdown.total_cost)

    def test_total_matches_exact_sum_for_generated_bills(self) -> None:
        parts = [
            _part(f"p{i}", Dimensions(7.3 * (i + 1), 4.1, 2.9), quantity=i + 2)
            for i in range(6)
        ]
        rate = properties_for(MaterialType.METAL).cost_per_cm3
        expected = round(sum(p.unit_volume * rate * p.quantity for p in parts), 2)
        breakdown = self.estimator.breakdown(parts, MaterialType.METAL)
        assert breakdown.total_cost == expected
        assert breakdown.line_sum == pytest.approx(expected)

    def test_metal_costs_more_than_wood(self) -> None:
        wood = self.estimator.total_cost(PARTS, MaterialType.WOOD)
        metal = self.estimator.total_cost(PARTS, MaterialType.METAL)
        assert metal > wood

    def test_empty_bill(self) -> None:
        breakdown = self.estimator.breakdown([], MaterialType.WOOD)
        assert breakdown.lines == ()
        assert breakdown.total_cost == 0.0

    def test_weight_in_kg(self) -> None:
        assert self.estimator.estimate_weight(PARTS, MaterialType.WOOD) == pytest.approx(7.2)
