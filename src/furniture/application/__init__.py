"""Application layer - use cases and orchestration."""

from .commands import GenerateDesignCommand, InvalidRequestError
from .dtos import DEFAULT_DIMENSIONS, Design, FurnitureRequest, ShelfModifierInput

__all__ = [
    "DEFAULT_DIMENSIONS",
    "Design",
    "FurnitureRequest",
    "GenerateDesignCommand",
    "InvalidRequestError",
    "ShelfModifierInput",
]
