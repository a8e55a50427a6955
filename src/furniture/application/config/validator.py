"""Validation structures and engineering advisory checks.

Pydantic handles structural validation when a config is loaded. The checks
here are advisories: configurations that will generate, but that are likely
to produce an unstable piece, crowded dividers or ignored options.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from furniture.application.config.schema import FurnitureRequestConfig
from furniture.application.dtos import DEFAULT_DIMENSIONS
from furniture.domain.services.part_generation import BOOKSHELF_BOARD_THICKNESS_CM
from furniture.domain.services.partition_placement import MAX_DIVIDER_SHARE
from furniture.domain.services.structural import MAX_STABLE_RATIO
from furniture.domain.value_objects import (
    Dimensions,
    FurnitureType,
    PartitionStrategy,
    parse_partition_ratio,
)


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for advisory warnings.

    Blocking problems never reach this stage: they are raised as ConfigError
    by the loader.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            2 if valid but has warnings
        """
        if self.warnings:
            return 2
        return 0

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.warnings.extend(other.warnings)
        return self


def _effective_dimensions(config: FurnitureRequestConfig) -> Dimensions:
    if config.dimensions is None:
        return DEFAULT_DIMENSIONS[config.furniture_type]
    return Dimensions(
        config.dimensions.length, config.dimensions.width, config.dimensions.height
    )


def check_stability_advisories(config: FurnitureRequestConfig) -> ValidationResult:
    """Warn about pieces that are tall relative to their base."""
    result = ValidationResult()
    dims = _effective_dimensions(config)
    ratio = dims.height / min(dims.length, dims.width)
    if ratio > MAX_STABLE_RATIO:
        result.add_warning(
            path="dimensions",
            message=f"Height-to-base ratio of {ratio:.1f}:1 may cause tipping",
            suggestion=(
                "Widen the base or secure the piece to the wall. "
                f"Recommended ratio is {MAX_STABLE_RATIO:.0f}:1 or less"
            ),
        )
    return result


def check_partition_advisories(config: FurnitureRequestConfig) -> ValidationResult:
    """Warn about divider settings that will be skipped or ignored.

    Divider groups whose combined thickness exceeds 30% of the length are
    skipped at generation time, and partition settings only apply to
    bookshelves.
    """
    result = ValidationResult()
    uses_partitions = (
        config.partition_strategy != PartitionStrategy.NONE
        or config.partition_ratio is not None
        or config.partition_count is not None
        or bool(config.shelf_modifiers)
    )

    if config.furniture_type != FurnitureType.BOOKSHELF:
        if uses_partitions or config.shelf_count is not None:
            result.add_warning(
                path="furnitureType",
                message=(
                    f"Shelf and partition settings are ignored for "
                    f"{config.furniture_type.value}"
                ),
            )
        return result

    length = _effective_dimensions(config).length
    max_dividers = int(MAX_DIVIDER_SHARE * length / BOOKSHELF_BOARD_THICKNESS_CM)

    counts: list[tuple[str, int | None, str | None]] = [
        ("partitionCount", config.partition_count, config.partition_ratio)
    ]
    counts.extend(
        (f"shelfModifiers[{i}]", m.count, m.ratio)
        for i, m in enumerate(config.shelf_modifiers)
    )
    for path, count, ratio in counts:
        if ratio is not None:
            implied = parse_partition_ratio(ratio).divider_count
            if count is not None and implied is not None and implied != count:
                result.add_warning(
                    path=path,
                    message=(
                        f"Ratio '{ratio}' implies {implied} divider(s) but "
                        f"count is {count}"
                    ),
                    suggestion="The ratio takes precedence; remove one of the two",
                )
            if implied is not None:
                count = implied
        if count is not None and count > max_dividers:
            result.add_warning(
                path=path,
                message=(
                    f"{count} dividers exceed the {max_dividers} that fit in "
                    f"{length:g}cm and will be skipped"
                ),
                suggestion="Reduce the divider count or widen the bookshelf",
            )
    return result


def check_option_advisories(config: FurnitureRequestConfig) -> ValidationResult:
    result = ValidationResult()
    if config.has_armrests and config.furniture_type != FurnitureType.CHAIR:
        result.add_warning(
            path="hasArmrests",
            message=f"Armrests are ignored for {config.furniture_type.value}",
        )
    return result


def validate_config(config: FurnitureRequestConfig) -> ValidationResult:
    """Perform full validation of a furniture request configuration.

    Args:
        config: A FurnitureRequestConfig instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_stability_advisories(config))
    result.merge(check_partition_advisories(config))
    result.merge(check_option_advisories(config))
    return result
