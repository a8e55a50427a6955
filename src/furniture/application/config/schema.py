"""Pydantic configuration schema models for furniture requests.

This module defines the schema for JSON furniture request files. Keys use
camelCase in JSON (``furnitureType``, ``shelfModifiers``) and snake_case in
Python; both spellings are accepted when loading.

The domain enums are reused so unknown furniture types, materials and
strategies are rejected at the boundary.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from furniture.domain.value_objects import (
    FurnitureType,
    MaterialType,
    PartitionStrategy,
    parse_partition_ratio,
    parse_shelf_target,
)

MIN_DIMENSION_CM: float = 10.0
MAX_DIMENSION_CM: float = 500.0


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DimensionsConfig(_CamelModel):
    """Overall envelope of the piece in centimetres.

    Attributes:
        length: Extent along X.
        width: Extent along Z (depth).
        height: Extent along Y.
    """

    length: float = Field(..., ge=MIN_DIMENSION_CM, le=MAX_DIMENSION_CM, allow_inf_nan=False)
    width: float = Field(..., ge=MIN_DIMENSION_CM, le=MAX_DIMENSION_CM, allow_inf_nan=False)
    height: float = Field(..., ge=MIN_DIMENSION_CM, le=MAX_DIMENSION_CM, allow_inf_nan=False)


class ShelfModifierConfig(_CamelModel):
    """Per-shelf divider rule.

    ``target`` accepts a shelf number ("2"), a named position ("top",
    "bottom", "middle", "rest"), a parity ("odd", "even"), a stride
    ("every 3") or an inclusive range ("range 1-3").
    """

    target: str
    count: int | None = Field(default=None, ge=0)
    ratio: str | None = None

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        parse_shelf_target(v)
        return v

    @field_validator("ratio")
    @classmethod
    def validate_ratio(cls, v: str | None) -> str | None:
        if v is not None:
            parse_partition_ratio(v)
        return v


class FurnitureRequestConfig(_CamelModel):
    """Root configuration model for a furniture request.

    Example:
        >>> config = FurnitureRequestConfig.model_validate(
        ...     {"furnitureType": "bookshelf", "shelfCount": 4}
        ... )
        >>> config.shelf_count
        4
    """

    furniture_type: FurnitureType
    material: MaterialType = MaterialType.WOOD
    dimensions: DimensionsConfig | None = Field(
        default=None, description="Omit to use the defaults for the furniture type"
    )
    material_color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    projected_load: int | float | str | None = Field(
        default=None, description="Expected load in kg, e.g. 80 or \"80kg\""
    )
    has_armrests: bool = False
    shelf_count: int | None = Field(default=None, ge=0)
    partition_strategy: PartitionStrategy = PartitionStrategy.NONE
    partition_ratio: str | None = None
    partition_count: int | None = Field(default=None, ge=0)
    shelf_modifiers: list[ShelfModifierConfig] = Field(default_factory=list)

    @field_validator("material")
    @classmethod
    def validate_material(cls, v: MaterialType) -> MaterialType:
        """Glass is only used for rendering and cannot be requested."""
        if v not in MaterialType.requestable():
            allowed = ", ".join(m.value for m in MaterialType.requestable())
            raise ValueError(f"Material must be one of: {allowed}")
        return v

    @field_validator("partition_ratio")
    @classmethod
    def validate_ratio(cls, v: str | None) -> str | None:
        if v is not None:
            parse_partition_ratio(v)
        return v
