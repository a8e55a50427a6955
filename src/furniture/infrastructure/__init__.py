"""Infrastructure layer - output formatting and export."""

from .exporters import DesignJsonExporter, ExporterRegistry, SceneExporter
from .formatters import (
    CostBreakdownFormatter,
    DesignSummaryFormatter,
    InstructionsFormatter,
    PartsListFormatter,
    format_design,
)

__all__ = [
    "CostBreakdownFormatter",
    "DesignJsonExporter",
    "DesignSummaryFormatter",
    "ExporterRegistry",
    "InstructionsFormatter",
    "PartsListFormatter",
    "SceneExporter",
    "format_design",
]
