"""Application commands (use cases) for furniture generation."""

from __future__ import annotations

import logging
import random

from furniture.domain.services import (
    AnchorResolver,
    AssemblyPlanner,
    CostEstimator,
    EngineeringCalculator,
    PartGenerator,
    SceneSerializer,
    StructuralAnalyzer,
)

from .dtos import Design, FurnitureRequest

logger = logging.getLogger(__name__)


class InvalidRequestError(ValueError):
    """Raised when a furniture request fails boundary validation.

    Attributes:
        errors: Every validation message for the request.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Invalid furniture request: " + "; ".join(self.errors))


class GenerateDesignCommand:
    """Command to generate a complete furniture design.

    Runs the pipeline: engineering calculation, part generation, anchor
    positioning (with partition placement), cost and assembly estimation,
    structural reporting and scene serialization. The pipeline is
    synchronous; its only randomness comes from ``rng``.
    """

    def __init__(
        self,
        engineering_calculator: EngineeringCalculator | None = None,
        part_generator: PartGenerator | None = None,
        cost_estimator: CostEstimator | None = None,
        assembly_planner: AssemblyPlanner | None = None,
        structural_analyzer: StructuralAnalyzer | None = None,
        scene_serializer: SceneSerializer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.engineering_calculator = engineering_calculator or EngineeringCalculator()
        self.part_generator = part_generator or PartGenerator()
        self.cost_estimator = cost_estimator or CostEstimator()
        self.assembly_planner = assembly_planner or AssemblyPlanner()
        self.structural_analyzer = structural_analyzer or StructuralAnalyzer()
        self.scene_serializer = scene_serializer or SceneSerializer()
        self.rng = rng or random.Random()

    def execute(self, request: FurnitureRequest) -> Design:
        """Execute the design generation command.

        Args:
            request: Furniture request to generate.

        Returns:
            Design with parts, positions, costs, instructions and geometry.

        Raises:
            InvalidRequestError: If the request fails validation. No part of
                the pipeline runs for an invalid request.
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestError(errors)

        furniture_type = request.to_furniture_type()
        material = request.to_material()
        dimensions = request.to_dimensions()
        color = request.resolved_color()

        logger.info(
            f"Generating {furniture_type.value} in {material.value} "
            f"({dimensions.length:g}x{dimensions.width:g}x{dimensions.height:g}cm)"
        )

        spec = self.engineering_calculator.compute(
            furniture_type, dimensions, material, request.projected_load
        )
        parts = self.part_generator.generate(
            furniture_type,
            dimensions,
            material,
            color,
            spec,
            request.to_generation_options(),
        )

        positions = AnchorResolver(self.rng).resolve(parts, furniture_type, dimensions)
        bill = positions.reconciled_parts(parts)

        cost = self.cost_estimator.breakdown(bill, material)
        weight = self.cost_estimator.estimate_weight(bill, material)
        part_count = sum(part.quantity for part in bill)

        structural = self.structural_analyzer.build_report(
            dimensions, material, spec, part_count, weight
        )
        instructions = self.assembly_planner.instructions(furniture_type, structural)
        assembly_time = self.assembly_planner.assembly_time(furniture_type, bill)
        geometry = self.scene_serializer.serialize(positions.positioned, material, color)

        warnings = list(structural.warnings) + positions.warnings
        for warning in warnings:
            logger.warning(warning)

        return Design(
            furniture_type=furniture_type,
            material=material,
            material_color=color,
            dimensions=dimensions,
            parts=bill,
            positioned_parts=positions.positioned,
            cost=cost,
            assembly_time=assembly_time,
            instructions=instructions,
            structural=structural,
            engineering=spec,
            geometry=geometry,
            warnings=warnings,
        )
