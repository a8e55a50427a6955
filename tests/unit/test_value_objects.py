"""Unit tests for furniture value objects."""

import math

import pytest

from furniture.domain.value_objects import (
    Dimensions,
    EveryNthTarget,
    ExactTarget,
    MaterialType,
    NamedTarget,
    Parity,
    ParityTarget,
    PartitionConfig,
    PartitionRatio,
    PartitionStrategy,
    PartRole,
    RangeTarget,
    Rotation3D,
    ShelfModifier,
    ShelfPosition,
    parse_partition_ratio,
    parse_shelf_target,
)


class TestDimensions:
    """Tests for the Dimensions value object."""

    def test_volume(self) -> None:
        assert Dimensions(10, 20, 30).volume == 6000

    @pytest.mark.parametrize(
        "length,width,height",
        [(0, 10, 10), (10, -1, 10), (10, 10, math.inf), (math.nan, 10, 10)],
    )
    def test_rejects_non_positive_or_non_finite(
        self, length: float, width: float, height: float
    ) -> None:
        with pytest.raises(ValueError):
            Dimensions(length, width, height)

    def test_with_height_keeps_footprint(self) -> None:
        dims = Dimensions(90, 30, 180).with_height(25)
        assert dims == Dimensions(90, 30, 25)


class TestMaterialType:
    def test_glass_is_not_requestable(self) -> None:
        """Glass exists for rendering only."""
        assert MaterialType.GLASS not in MaterialType.requestable()
        assert set(MaterialType.requestable()) == {
            MaterialType.WOOD,
            MaterialType.METAL,
            MaterialType.PLASTIC,
        }


class TestRotation3D:
    def test_quarter_turn_detection(self) -> None:
        assert Rotation3D.about_y(math.pi / 2).is_quarter_turn_y
        assert Rotation3D.about_y(-math.pi / 2).is_quarter_turn_y
        assert not Rotation3D.about_y(math.pi).is_quarter_turn_y
        assert not Rotation3D.identity().is_quarter_turn_y


class TestPartRole:
    def test_horizontal_surfaces(self) -> None:
        assert PartRole.SHELF.is_horizontal_surface
        assert PartRole.TOP_PANEL.is_horizontal_surface
        assert PartRole.BOTTOM_PANEL.is_horizontal_surface
        assert not PartRole.BACK_PANEL.is_horizontal_surface

    def test_legs(self) -> None:
        assert PartRole.LEG.is_leg
        assert PartRole.SIDE_LEG.is_leg
        assert not PartRole.APRON_LONG.is_leg


class TestParseShelfTarget:
    """Tests for shelf modifier target parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("2", ExactTarget(2)),
            ("top", NamedTarget(ShelfPosition.TOP)),
            ("Bottom", NamedTarget(ShelfPosition.BOTTOM)),
            ("middle shelves", NamedTarget(ShelfPosition.MIDDLE)),
            ("rest", NamedTarget(ShelfPosition.REST)),
            ("odd", ParityTarget(Parity.ODD)),
            ("even shelves", ParityTarget(Parity.EVEN)),
            ("every 2nd", EveryNthTarget(2)),
            ("every 3", EveryNthTarget(3)),
            ("range 1-3", RangeTarget(1, 3)),
            ("2-4", RangeTarget(2, 4)),
        ],
    )
    def test_accepted_forms(self, raw: str, expected: object) -> None:
        assert parse_shelf_target(raw) == expected

    @pytest.mark.parametrize("raw", ["", "sideways", "range 3-1", "0", "every 0"])
    def test_rejected_forms(self, raw: str) -> None:
        with pytest.raises(ValueError):
            parse_shelf_target(raw)


class TestPartitionRatio:
    """Tests for partition ratio parsing and cut fractions."""

    def test_colon_delimited(self) -> None:
        ratio = parse_partition_ratio("3:2:5")
        assert ratio.segments == (3.0, 2.0, 5.0)
        assert ratio.divider_count == 2
        assert ratio.cut_fractions() == pytest.approx([0.3, 0.5])

    def test_hyphen_delimited(self) -> None:
        ratio = parse_partition_ratio("60-40")
        assert ratio.divider_count == 1
        assert ratio.cut_fractions() == pytest.approx([0.6])

    def test_equal_thirds(self) -> None:
        assert parse_partition_ratio("1:1:1").cut_fractions() == pytest.approx(
            [1 / 3, 2 / 3]
        )

    def test_random(self) -> None:
        ratio = parse_partition_ratio("random")
        assert ratio.is_random
        assert ratio.divider_count is None
        assert str(ratio) == "random"

    def test_str_round_trips_to_same_ratio(self) -> None:
        assert str(parse_partition_ratio("3:2:5")) == "3:2:5"

    @pytest.mark.parametrize("raw", ["5", "a:b", "1:0", "1::2"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError):
            parse_partition_ratio(raw)

    def test_random_ratio_cannot_have_segments(self) -> None:
        with pytest.raises(ValueError):
            PartitionRatio(segments=(1.0, 2.0), is_random=True)


class TestPartitionConfig:
    def test_default_is_inactive(self) -> None:
        assert not PartitionConfig().is_active

    @pytest.mark.parametrize(
        "strategy,active",
        [
            (PartitionStrategy.ALL_SHELVES, True),
            (PartitionStrategy.RANDOM_SHELVES, True),
            (PartitionStrategy.EQUAL, False),
            (PartitionStrategy.RATIO, False),
            (PartitionStrategy.NONE, False),
        ],
    )
    def test_strategy_activation(self, strategy: PartitionStrategy, active: bool) -> None:
        assert PartitionConfig(strategy=strategy).is_active is active

    def test_modifiers_activate(self) -> None:
        config = PartitionConfig(modifiers=(ShelfModifier(target=ExactTarget(1), count=1),))
        assert config.is_active

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            PartitionConfig(count=-1)


class TestShelfModifier:
    def test_sets_layout(self) -> None:
        assert ShelfModifier(target=ExactTarget(1), count=2).sets_layout
        assert not ShelfModifier(target=ExactTarget(1)).sets_layout
