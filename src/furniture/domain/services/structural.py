"""Structural report: stability, integrity score and workforce.

This module provides the StructuralAnalyzer service, which turns the
engineering spec and the generated bill of parts into the structural
report attached to a design.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from furniture.domain.value_objects import Dimensions, MaterialType

from .engineering import EngineeringSpec, calculate_deflection

logger = logging.getLogger(__name__)

# Height to narrowest base side above which furniture may tip
MAX_STABLE_RATIO: float = 3.0

BASE_INTEGRITY_SCORE: int = 95
UNSTABLE_PENALTY: int = 20
DEFLECTION_PENALTY: int = 15
DEFLECTION_PENALTY_THRESHOLD_CM: float = 2.0
MIN_INTEGRITY_SCORE: int = 10

HOURS_PER_PART: float = 0.5
SOLO_MAX_HOURS: int = 4
SOLO_MAX_WEIGHT_KG: float = 25.0

ANTI_TIP_RECOMMENDATION = "Secure to the wall with anti-tip hardware"


@dataclass(frozen=True)
class StabilityAnalysis:
    """Tipping risk from the height to base ratio."""

    is_stable: bool
    ratio: float
    reason: str
    recommendation: str | None = None


@dataclass(frozen=True)
class WorkforceEstimate:
    """Assembly effort.

    Attributes:
        hours: Estimated assembly hours.
        people: People advised for assembly.
        reason: Why two people are advised, None for solo assembly.
    """

    hours: int
    people: int
    reason: str | None = None

    @property
    def requires_two_people(self) -> bool:
        return self.people > 1


@dataclass(frozen=True)
class StructuralReport:
    """Structural summary attached to a design.

    Attributes:
        load_capacity: Design load in kg.
        self_weight: Placeholder self weight in kg.
        integrity_score: Heuristic score between 10 and 95.
        stability: Tipping analysis.
        workforce: Assembly effort estimate.
        warnings: Structural warnings, including engineering warnings.
        recommendations: Actions that improve safety.
    """

    load_capacity: float
    self_weight: float
    integrity_score: int
    stability: StabilityAnalysis
    workforce: WorkforceEstimate
    warnings: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_stable(self) -> bool:
        return self.stability.is_stable


class StructuralAnalyzer:
    """Builds structural reports for generated designs."""

    def check_stability(self, dimensions: Dimensions) -> StabilityAnalysis:
        """Check the height to base ratio.

        Args:
            dimensions: Overall dimensions.

        Returns:
            StabilityAnalysis, unstable when height exceeds three times the
            narrowest base side.
        """
        base = min(dimensions.length, dimensions.width)
        ratio = dimensions.height / base
        if ratio > MAX_STABLE_RATIO:
            return StabilityAnalysis(
                is_stable=False,
                ratio=ratio,
                reason="Too tall for its base",
                recommendation=ANTI_TIP_RECOMMENDATION,
            )
        return StabilityAnalysis(is_stable=True, ratio=ratio, reason="Stable ratio")

    def integrity_score(
        self, stability: StabilityAnalysis, deflection_cm: float | None
    ) -> int:
        score = BASE_INTEGRITY_SCORE
        if not stability.is_stable:
            score -= UNSTABLE_PENALTY
        if deflection_cm is not None and deflection_cm > DEFLECTION_PENALTY_THRESHOLD_CM:
            score -= DEFLECTION_PENALTY
        return max(MIN_INTEGRITY_SCORE, score)

    def estimate_workforce(self, part_count: int, weight_kg: float) -> WorkforceEstimate:
        """Estimate assembly hours and crew size.

        Args:
            part_count: Total number of part instances.
            weight_kg: Estimated weight of the finished piece.

        Returns:
            WorkforceEstimate; two people are advised for jobs longer than
            four hours or pieces heavier than 25 kg.
        """
        hours = math.ceil(part_count * HOURS_PER_PART)
        if hours > SOLO_MAX_HOURS:
            return WorkforceEstimate(
                hours=hours,
                people=2,
                reason=f"Two-person assembly advised: about {hours} hours of work",
            )
        if weight_kg > SOLO_MAX_WEIGHT_KG:
            return WorkforceEstimate(
                hours=hours,
                people=2,
                reason=f"Two-person assembly advised: estimated weight {weight_kg:.1f}kg",
            )
        return WorkforceEstimate(hours=hours, people=1)

    def build_report(
        self,
        dimensions: Dimensions,
        material: MaterialType,
        spec: EngineeringSpec,
        part_count: int,
        weight_kg: float,
    ) -> StructuralReport:
        """Assemble the structural report for a design.

        The deflection used for scoring is recomputed over the full length
        with the final surface thickness.
        """
        stability = self.check_stability(dimensions)
        deflection = calculate_deflection(
            dimensions.length,
            dimensions.width,
            spec.top_thickness,
            material,
            spec.load_analysis.distributed_load,
        )
        score = self.integrity_score(stability, deflection.deflection)
        workforce = self.estimate_workforce(part_count, weight_kg)

        warnings = list(spec.warnings)
        recommendations: list[str] = []
        if not stability.is_stable:
            warnings.append(
                f"{stability.reason} (height/base ratio {stability.ratio:.1f})"
            )
            if stability.recommendation:
                recommendations.append(stability.recommendation)

        logger.debug(
            f"Structural report: score {score}, stable={stability.is_stable}, "
            f"{workforce.people} person(s) for {workforce.hours}h"
        )

        return StructuralReport(
            load_capacity=spec.load_analysis.distributed_load,
            self_weight=spec.load_analysis.self_weight,
            integrity_score=score,
            stability=stability,
            workforce=workforce,
            warnings=tuple(warnings),
            recommendations=tuple(recommendations),
        )
