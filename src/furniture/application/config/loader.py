"""Configuration file loader with error handling.

This module loads JSON furniture request files. It handles file system
errors, JSON parsing errors and Pydantic validation errors, turning each
into a ConfigError with a readable message.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from furniture.application.config.schema import FurnitureRequestConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("dimensions", "height"))
        'dimensions.height'
        >>> _format_json_path(("shelfModifiers", 0, "target"))
        'shelfModifiers[0].target'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error_type from each Pydantic error."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> FurnitureRequestConfig:
    try:
        return FurnitureRequestConfig.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> FurnitureRequestConfig:
    """Load and validate a furniture request from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated FurnitureRequestConfig instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute names the category.

    Example:
        >>> try:
        ...     config = load_config(Path("dining-table.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    logger.debug(f"Loaded config file {path}")
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> FurnitureRequestConfig:
    """Load and validate a furniture request from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
