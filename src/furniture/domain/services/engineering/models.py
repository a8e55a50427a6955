"""Engineering data models.

This module provides dataclasses for:
- LoadAnalysis: Design loads for a request
- StructuralAddition: Extra members required by the structure
- DeflectionResult: Outcome of a surface deflection check
- LegDimensions: Square and round leg profiles
- EngineeringSpec: The full structural sizing for one request
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class LoadAnalysis:
    """Design loads in kg.

    Attributes:
        total_load: Total load the furniture is designed to carry.
        distributed_load: Load spread across the main surface.
        point_load: Concentrated load, 80% of the total.
        self_weight: Placeholder estimate of the furniture's own weight.
    """

    total_load: float
    distributed_load: float
    point_load: float
    self_weight: float

    def __post_init__(self) -> None:
        if self.total_load <= 0:
            raise ValueError("Total load must be positive")


class AdditionType(str, Enum):
    APRON = "apron"
    SIDE_LEG = "side-leg"
    CENTER_BEAM = "center-beam"


@dataclass(frozen=True)
class StructuralAddition:
    """An extra structural member added for long or wide spans.

    Attributes:
        type: Kind of addition.
        quantity: Number of members (side legs come in pairs).
        thickness: Member thickness in cm.
        height: Member height in cm.
    """

    type: AdditionType
    quantity: int
    thickness: float
    height: float

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Addition quantity must be at least 1")
        if self.thickness <= 0 or self.height <= 0:
            raise ValueError("Addition dimensions must be positive")


@dataclass(frozen=True)
class DeflectionResult:
    """Result of a simply supported, center loaded beam check.

    Attributes:
        deflection: Computed midspan deflection in cm.
        is_acceptable: True when within the deflection limit.
        recommended_thickness: Thickness in cm that satisfies the limit.
            Equal to the checked thickness when acceptable.
    """

    deflection: float
    is_acceptable: bool
    recommended_thickness: float


@dataclass(frozen=True)
class LegDimensions:
    """Leg cross-section for square and round profiles, in cm."""

    square: float
    round: float
    slenderness_limited: bool = False


@dataclass(frozen=True)
class EngineeringSpec:
    """Structural sizing computed once per request.

    Attributes:
        leg_size: Square leg cross-section in cm.
        top_thickness: Main surface thickness in cm.
        additions: Structural additions required.
        load_analysis: Design loads.
        deflection: Surface deflection check, None when skipped.
        notes: Human readable design notes.
        warnings: Recoverable structural warnings.
    """

    leg_size: float
    top_thickness: float
    load_analysis: LoadAnalysis
    additions: tuple[StructuralAddition, ...] = field(default_factory=tuple)
    deflection: DeflectionResult | None = None
    notes: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def addition(self, addition_type: AdditionType) -> StructuralAddition | None:
        """Get the first addition of a type, if any."""
        for addition in self.additions:
            if addition.type == addition_type:
                return addition
        return None

    def has_addition(self, addition_type: AdditionType) -> bool:
        return self.addition(addition_type) is not None

    @property
    def extra_leg_count(self) -> int:
        return sum(a.quantity for a in self.additions if a.type == AdditionType.SIDE_LEG)
