"""Partition strategy, shelf target and ratio value objects.

Shelf modifier targets and partition ratios arrive as loosely formatted
strings ("top", "every 2nd", "range 1-3", "3:2:5"). They are parsed once,
at the request boundary, into the typed values below so that placement
code can match on them exhaustively.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class PartitionStrategy(str, Enum):
    """Global divider placement strategy for a bookshelf.

    Only ALL_SHELVES and RANDOM_SHELVES place dividers on their own; the
    other strategies rely on shelf modifiers to select gaps.
    """

    NONE = "none"
    EQUAL = "equal"
    RATIO = "ratio"
    RANDOM = "random"
    ALL_SHELVES = "all-shelves"
    RANDOM_SHELVES = "random-shelves"

    @property
    def places_by_default(self) -> bool:
        return self in (PartitionStrategy.ALL_SHELVES, PartitionStrategy.RANDOM_SHELVES)


class ShelfPosition(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    MIDDLE = "middle"
    REST = "rest"


class Parity(str, Enum):
    ODD = "odd"
    EVEN = "even"


@dataclass(frozen=True)
class ExactTarget:
    """A single shelf gap by 1-based, top-down visual index."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError("Shelf index must be 1 or greater")


@dataclass(frozen=True)
class NamedTarget:
    position: ShelfPosition


@dataclass(frozen=True)
class ParityTarget:
    parity: Parity


@dataclass(frozen=True)
class EveryNthTarget:
    n: int

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError("'every N' requires N of 1 or greater")


@dataclass(frozen=True)
class RangeTarget:
    """Inclusive range of visual indexes."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1:
            raise ValueError("Range start must be 1 or greater")
        if self.end < self.start:
            raise ValueError("Range end must not be before range start")


ShelfTarget = ExactTarget | NamedTarget | ParityTarget | EveryNthTarget | RangeTarget


_SHELF_SUFFIX = re.compile(r"\s+shel(?:f|ves)$")
_EXACT = re.compile(r"^(\d+)$")
_EVERY_NTH = re.compile(r"^every\s+(\d+)(?:st|nd|rd|th)?$")
_RANGE = re.compile(r"^(?:range\s+)?(\d+)\s*-\s*(\d+)$")


def parse_shelf_target(raw: str) -> ShelfTarget:
    """Parse a shelf modifier target string.

    Accepted forms: ``"2"``, ``"top"``, ``"bottom"``, ``"middle"``,
    ``"rest"``, ``"odd"``, ``"even"``, ``"every 2"``/``"every 2nd"`` and
    ``"range 1-3"``/``"1-3"``. Matching is case-insensitive and an
    optional trailing "shelf"/"shelves" is ignored.

    Raises:
        ValueError: If the string is not a recognised target.
    """
    text = _SHELF_SUFFIX.sub("", raw.strip().lower())

    if match := _EXACT.match(text):
        return ExactTarget(int(match.group(1)))
    if text in {p.value for p in ShelfPosition}:
        return NamedTarget(ShelfPosition(text))
    if text in {p.value for p in Parity}:
        return ParityTarget(Parity(text))
    if match := _EVERY_NTH.match(text):
        return EveryNthTarget(int(match.group(1)))
    if match := _RANGE.match(text):
        return RangeTarget(int(match.group(1)), int(match.group(2)))

    raise ValueError(f"Unrecognised shelf target: {raw!r}")


@dataclass(frozen=True)
class PartitionRatio:
    """Relative compartment widths, or a request for random cuts.

    A ratio of N segments describes N compartments and therefore N-1
    dividers.
    """

    segments: tuple[float, ...] = ()
    is_random: bool = False

    def __post_init__(self) -> None:
        if self.is_random:
            if self.segments:
                raise ValueError("A random ratio has no segments")
            return
        if len(self.segments) < 2:
            raise ValueError("A partition ratio needs at least two segments")
        if any(s <= 0 for s in self.segments):
            raise ValueError("Partition ratio segments must be positive")

    @classmethod
    def random(cls) -> "PartitionRatio":
        return cls(is_random=True)

    @property
    def divider_count(self) -> int | None:
        """Dividers implied by the segments, None for random ratios."""
        if self.is_random:
            return None
        return len(self.segments) - 1

    def cut_fractions(self) -> list[float]:
        """Cumulative segment fractions at which dividers are cut."""
        total = sum(self.segments)
        fractions: list[float] = []
        accumulated = 0.0
        for segment in self.segments[:-1]:
            accumulated += segment
            fractions.append(accumulated / total)
        return fractions

    def __str__(self) -> str:
        if self.is_random:
            return "random"
        return ":".join(f"{s:g}" for s in self.segments)


_RATIO_DELIMITER = re.compile(r"[:\-]")


def parse_partition_ratio(raw: str) -> PartitionRatio:
    """Parse ``"3:2:5"``, ``"60-40"`` or ``"random"``.

    Raises:
        ValueError: If the string is not a usable ratio.
    """
    text = raw.strip().lower()
    if text == "random":
        return PartitionRatio.random()

    pieces = [p.strip() for p in _RATIO_DELIMITER.split(text)]
    try:
        segments = tuple(float(p) for p in pieces)
    except ValueError:
        raise ValueError(f"Partition ratio must be numeric segments: {raw!r}") from None
    return PartitionRatio(segments=segments)


@dataclass(frozen=True)
class ShelfModifier:
    """Per-gap divider rule.

    Attributes:
        target: Which shelf gaps the rule applies to.
        count: Dividers to place, overridden by a ratio when both are set.
        ratio: Compartment ratio for the matched gaps.
    """

    target: ShelfTarget
    count: int | None = None
    ratio: PartitionRatio | None = None

    def __post_init__(self) -> None:
        if self.count is not None and self.count < 0:
            raise ValueError("Modifier count cannot be negative")

    @property
    def sets_layout(self) -> bool:
        """True when the modifier carries its own count or ratio."""
        return self.count is not None or self.ratio is not None


@dataclass(frozen=True)
class PartitionConfig:
    """Divider configuration attached to a vertical partition part."""

    strategy: PartitionStrategy = PartitionStrategy.NONE
    ratio: PartitionRatio | None = None
    count: int | None = None
    modifiers: tuple[ShelfModifier, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.count is not None and self.count < 0:
            raise ValueError("Partition count cannot be negative")

    @property
    def is_active(self) -> bool:
        """True when the configuration can place at least one divider."""
        return self.strategy.places_by_default or bool(self.modifiers)
