"""Base exporter framework with Protocol and Registry."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from furniture.application.dtos import Design


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Attributes:
        format_name: Name the format is registered under (e.g., "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, design: Design) -> str:
        """Export a design as a string."""
        ...

    def export(self, design: Design, path: Path) -> None:
        """Export a design to a file."""
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("json")
        class DesignJsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under a format name."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters
