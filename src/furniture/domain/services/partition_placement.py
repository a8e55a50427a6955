"""Vertical partition placement for bookshelves.

Dividers are placed inside the open gaps between horizontal surfaces
(bottom panel, shelves, top panel). For each gap the placer:

1. resolves which shelf modifier applies, if any,
2. falls back to the global strategy when no modifier matches,
3. resolves the divider count from ratio and count,
4. applies the crowding guard,
5. computes cut offsets and emits one divider per retained cut.

Gaps are ordered bottom-up internally, while users number shelves
top-down starting at 1, so "top" is shelf 1 and "bottom" the last shelf.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from ..entities import Part, PositionedPart, VerticalPartition
from ..value_objects import (
    AnchorPattern,
    Dimensions,
    EveryNthTarget,
    ExactTarget,
    NamedTarget,
    Parity,
    ParityTarget,
    PartitionRatio,
    PartitionStrategy,
    PartRole,
    Position3D,
    RangeTarget,
    ShelfModifier,
    ShelfPosition,
    ShelfTarget,
)

logger = logging.getLogger(__name__)

__all__ = [
    "Interval",
    "IntervalPlacement",
    "PartitionPlacer",
    "PlacementResult",
    "extract_intervals",
    "target_tier",
]

# Gaps this small are surface contact, not storage
MIN_GAP_CM: float = 5.0

# Probability that random-shelves places dividers in an unmatched gap
RANDOM_SHELVES_PROBABILITY: float = 0.7

# Dividers may take at most this share of the overall length
MAX_DIVIDER_SHARE: float = 0.3

# Cuts closer than this fraction to either edge are dropped
EDGE_MARGIN: float = 0.05

RANDOM_CUT_LOW: float = 0.2
RANDOM_CUT_HIGH: float = 0.8

# Rule priority tiers, lower wins
TIER_EXACT = 0
TIER_NAMED = 1
TIER_PATTERN = 2
TIER_REST = 3


@dataclass(frozen=True)
class Interval:
    """Open vertical gap between two facing surfaces, in cm."""

    start: float
    end: float

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("Interval end must be above its start")

    @property
    def height(self) -> float:
        return self.end - self.start

    @property
    def midpoint(self) -> float:
        return self.start + self.height / 2


@dataclass(frozen=True)
class IntervalPlacement:
    """Dividers actually placed in one gap.

    Attributes:
        interval_index: Internal, bottom-up index of the gap.
        visual_index: User facing, top-down 1-based shelf number.
        interval: The gap.
        count: Number of dividers placed.
    """

    interval_index: int
    visual_index: int
    interval: Interval
    count: int


@dataclass
class PlacementResult:
    """Output of placing one vertical partition part."""

    dividers: list[PositionedPart] = field(default_factory=list)
    placements: list[IntervalPlacement] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def divider_count(self) -> int:
        return len(self.dividers)

    def count_for(self, visual_index: int) -> int:
        """Dividers placed on a shelf, by its visual index."""
        return sum(p.count for p in self.placements if p.visual_index == visual_index)

    def bill_of_parts(self, partition: VerticalPartition) -> list[Part]:
        """Replace the nominal partition part with one part per filled gap.

        Each returned part carries the gap's height and the number of
        dividers placed in it, so quantities match the placed dividers.
        """
        return [
            Part(
                id=f"{partition.id}-{p.interval_index}",
                name=f"{partition.name} (Shelf {p.visual_index})",
                category=partition.category,
                role=partition.role,
                dimensions=partition.dimensions.with_height(p.interval.height),
                quantity=p.count,
                anchor=AnchorPattern.VERTICAL_PARTITION,
                material=partition.material,
                color=partition.color,
            )
            for p in self.placements
            if p.count > 0
        ]


def extract_intervals(
    surfaces: list[PositionedPart], overall_height: float
) -> list[Interval]:
    """Compute the usable gaps between horizontal surfaces.

    The bottom panel contributes its top face and the top panel its bottom
    face; without them the floor and the overall height bound the stack.
    Every shelf contributes both faces.

    Args:
        surfaces: Positioned shelves, top panel and bottom panel.
        overall_height: Furniture height in cm.

    Returns:
        Gaps taller than 5 cm, ordered bottom-up.
    """
    bottom = next((s for s in surfaces if s.role == PartRole.BOTTOM_PANEL), None)
    top = next((s for s in surfaces if s.role == PartRole.TOP_PANEL), None)

    levels = [
        bottom.top_face if bottom is not None else 0.0,
        top.bottom_face if top is not None else overall_height,
    ]
    for shelf in surfaces:
        if shelf.role == PartRole.SHELF:
            levels.extend([shelf.bottom_face, shelf.top_face])
    levels.sort()

    intervals: list[Interval] = []
    for lower, upper in zip(levels, levels[1:]):
        if upper - lower > MIN_GAP_CM:
            intervals.append(Interval(start=lower, end=upper))
    return intervals


def target_tier(target: ShelfTarget, visual_index: int, total: int) -> int | None:
    """Priority tier of a target for a shelf, None when it does not apply.

    Exact indexes beat named positions, which beat patterns, which beat
    the "rest" fallback.
    """
    match target:
        case ExactTarget(index=index):
            return TIER_EXACT if index == visual_index else None
        case NamedTarget(position=ShelfPosition.TOP):
            return TIER_NAMED if visual_index == 1 else None
        case NamedTarget(position=ShelfPosition.BOTTOM):
            return TIER_NAMED if visual_index == total else None
        case NamedTarget(position=ShelfPosition.MIDDLE):
            return TIER_NAMED if 1 < visual_index < total else None
        case NamedTarget(position=ShelfPosition.REST):
            return TIER_REST
        case ParityTarget(parity=Parity.ODD):
            return TIER_PATTERN if visual_index % 2 == 1 else None
        case ParityTarget(parity=Parity.EVEN):
            return TIER_PATTERN if visual_index % 2 == 0 else None
        case EveryNthTarget(n=n):
            return TIER_PATTERN if visual_index % n == 0 else None
        case RangeTarget(start=start, end=end):
            return TIER_PATTERN if start <= visual_index <= end else None
    return None


class PartitionPlacer:
    """Places divider boards for a vertical partition part.

    Randomness (random-shelves and random ratios) comes only from the
    injected ``random.Random``, so a seeded generator gives repeatable
    layouts.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def place(
        self,
        partition: VerticalPartition,
        surfaces: list[PositionedPart],
        dimensions: Dimensions,
    ) -> PlacementResult:
        """Place dividers for one partition part.

        Args:
            partition: The partition part with its configuration.
            surfaces: Positioned horizontal surfaces of the bookshelf.
            dimensions: Overall furniture dimensions.

        Returns:
            PlacementResult with dividers, per-gap counts and warnings.
        """
        result = PlacementResult()
        intervals = extract_intervals(surfaces, dimensions.height)
        total = len(intervals)

        for interval_index, interval in enumerate(intervals):
            visual_index = total - interval_index
            modifier = self.resolve_modifier(
                partition.partition.modifiers, visual_index, total
            )

            if modifier is None and not self._global_places(partition.partition.strategy):
                continue

            ratio, count = self._layout_source(partition, modifier)
            count = self._resolve_count(ratio, count, visual_index, result.warnings)
            if count <= 0:
                continue

            if count * partition.thickness > MAX_DIVIDER_SHARE * dimensions.length:
                result.warnings.append(
                    f"Crowding: {count} dividers of {partition.thickness:g}cm on shelf "
                    f"{visual_index} exceed {MAX_DIVIDER_SHARE:.0%} of the "
                    f"{dimensions.length:g}cm width; dividers skipped"
                )
                logger.warning(f"Crowding guard skipped shelf {visual_index}")
                continue

            cuts = [
                c for c in self._cut_fractions(ratio, count)
                if EDGE_MARGIN <= c <= 1 - EDGE_MARGIN
            ]
            for cut_index, fraction in enumerate(cuts):
                result.dividers.append(
                    PositionedPart.from_part(
                        partition,
                        position=Position3D(
                            x=-dimensions.length / 2 + fraction * dimensions.length,
                            y=interval.midpoint,
                            z=0.0,
                        ),
                        instance_id=f"{partition.id}-{interval_index}-{cut_index}",
                        dimensions=partition.dimensions.with_height(interval.height),
                    )
                )
            result.placements.append(
                IntervalPlacement(
                    interval_index=interval_index,
                    visual_index=visual_index,
                    interval=interval,
                    count=len(cuts),
                )
            )

        logger.debug(
            f"Placed {result.divider_count} dividers across {total} gaps "
            f"({len(result.warnings)} warnings)"
        )
        return result

    @staticmethod
    def resolve_modifier(
        modifiers: tuple[ShelfModifier, ...], visual_index: int, total: int
    ) -> ShelfModifier | None:
        """Pick the modifier for a shelf by priority, then list order."""
        best: ShelfModifier | None = None
        best_tier: int | None = None
        for modifier in modifiers:
            tier = target_tier(modifier.target, visual_index, total)
            if tier is not None and (best_tier is None or tier < best_tier):
                best, best_tier = modifier, tier
        return best

    def _global_places(self, strategy: PartitionStrategy) -> bool:
        if strategy == PartitionStrategy.ALL_SHELVES:
            return True
        if strategy == PartitionStrategy.RANDOM_SHELVES:
            return self.rng.random() < RANDOM_SHELVES_PROBABILITY
        return False

    @staticmethod
    def _layout_source(
        partition: VerticalPartition, modifier: ShelfModifier | None
    ) -> tuple[PartitionRatio | None, int | None]:
        """Ratio and count for a gap.

        A modifier that carries its own count or ratio uses only those;
        otherwise the global ratio and count apply.
        """
        if modifier is not None and modifier.sets_layout:
            return modifier.ratio, modifier.count
        return partition.partition.ratio, partition.partition.count

    @staticmethod
    def _resolve_count(
        ratio: PartitionRatio | None,
        count: int | None,
        visual_index: int,
        warnings: list[str],
    ) -> int:
        implied = ratio.divider_count if ratio is not None else None
        if implied is None:
            return 1 if count is None else count
        if count is not None and count != implied:
            warnings.append(
                f"Shelf {visual_index}: ratio {ratio} implies {implied} dividers, "
                f"ignoring count {count}"
            )
        return implied

    def _cut_fractions(self, ratio: PartitionRatio | None, count: int) -> list[float]:
        if ratio is not None and ratio.is_random:
            return sorted(
                self.rng.uniform(RANDOM_CUT_LOW, RANDOM_CUT_HIGH) for _ in range(count)
            )
        if ratio is not None:
            return ratio.cut_fractions()
        return [(i + 1) / (count + 1) for i in range(count)]
