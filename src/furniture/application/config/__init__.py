"""Configuration schema and loading for furniture requests.

This package provides JSON-based request loading and validation. It
includes Pydantic models for schema validation, a loader with error
handling, an adapter to the application request DTO and engineering
advisory checks.

Example:
    >>> from pathlib import Path
    >>> from furniture.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("bookshelf.json"))
    ...     print(config.furniture_type.value)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from furniture.application.config.adapter import config_to_request
from furniture.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from furniture.application.config.schema import (
    DimensionsConfig,
    FurnitureRequestConfig,
    ShelfModifierConfig,
)
from furniture.application.config.validator import (
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema
    "DimensionsConfig",
    "FurnitureRequestConfig",
    "ShelfModifierConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Adapter
    "config_to_request",
    # Validation
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
]
