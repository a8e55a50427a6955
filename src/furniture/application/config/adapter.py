"""Adapter from FurnitureRequestConfig to the application request DTO."""

from __future__ import annotations

from furniture.application.config.schema import FurnitureRequestConfig
from furniture.application.dtos import FurnitureRequest, ShelfModifierInput


def config_to_request(config: FurnitureRequestConfig) -> FurnitureRequest:
    """Convert a validated configuration into a FurnitureRequest.

    Enum fields are passed through by value so the request can be
    validated again by GenerateDesignCommand.
    """
    dims = config.dimensions
    return FurnitureRequest(
        furniture_type=config.furniture_type.value,
        material=config.material.value,
        length=dims.length if dims else None,
        width=dims.width if dims else None,
        height=dims.height if dims else None,
        material_color=config.material_color,
        projected_load=config.projected_load,
        has_armrests=config.has_armrests,
        shelf_count=config.shelf_count,
        partition_strategy=config.partition_strategy.value,
        partition_ratio=config.partition_ratio,
        partition_count=config.partition_count,
        shelf_modifiers=[
            ShelfModifierInput(target=m.target, count=m.count, ratio=m.ratio)
            for m in config.shelf_modifiers
        ],
    )
