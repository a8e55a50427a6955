"""Unit tests for the text formatters."""

import pytest

from furniture.application import Design, FurnitureRequest, GenerateDesignCommand
from furniture.domain.services import CostBreakdown
from furniture.infrastructure import (
    CostBreakdownFormatter,
    DesignSummaryFormatter,
    InstructionsFormatter,
    PartsListFormatter,
    format_design,
)


@pytest.fixture
def table_design(seeded_command: GenerateDesignCommand) -> Design:
    return seeded_command.execute(FurnitureRequest(furniture_type="table"))


class TestPartsListFormatter:
    def test_empty(self) -> None:
        assert PartsListFormatter().format([]) == "No parts."

    def test_lists_every_part(self, table_design: Design) -> None:
        output = PartsListFormatter().format(table_design.parts)
        assert output.startswith("PARTS LIST")
        for part in table_design.parts:
            assert part.name in output
        assert output.splitlines()[-1].split()[-1] == str(table_design.part_count)


class TestCostBreakdownFormatter:
    def test_total_line(self, table_design: Design) -> None:
        output = CostBreakdownFormatter().format(table_design.cost)
        assert "COST BREAKDOWN" in output
        assert output.splitlines()[-1].endswith(f"{table_design.total_cost:.2f}")

    def test_empty_breakdown(self) -> None:
        output = CostBreakdownFormatter().format(CostBreakdown())
        assert output.splitlines()[-1].endswith("0.00")


class TestInstructionsFormatter:
    def test_numbering_skips_notes(self) -> None:
        output = InstructionsFormatter().format(
            ["Cut parts", "WARNING: Heavy top", "Attach legs", "NOTE: Check level"],
            45,
        )
        lines = output.splitlines()
        assert "Estimated time: 45 minutes" in lines
        assert " 1. Cut parts" in lines
        assert "   WARNING: Heavy top" in lines
        assert " 2. Attach legs" in lines
        assert "   NOTE: Check level" in lines


class TestDesignSummaryFormatter:
    def test_summary(self, table_design: Design) -> None:
        output = DesignSummaryFormatter().format(table_design)
        assert "Type:        table" in output
        assert "Dimensions:  120 x 80 x 75 cm" in output
        assert "Top thickness:    2.5 cm" in output
        assert "STRUCTURE" in output

    def test_warnings_section(self, seeded_command: GenerateDesignCommand) -> None:
        design = seeded_command.execute(FurnitureRequest(furniture_type="chair"))
        output = DesignSummaryFormatter().format(design)
        assert "WARNINGS" in output
        for warning in design.warnings:
            assert f"  - {warning}" in output


def test_format_design_has_all_sections(table_design: Design) -> None:
    output = format_design(table_design)
    for heading in ("DESIGN SUMMARY", "PARTS LIST", "COST BREAKDOWN", "ASSEMBLY INSTRUCTIONS"):
        assert heading in output
