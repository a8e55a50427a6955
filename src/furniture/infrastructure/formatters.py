"""Text formatters for furniture designs."""

from __future__ import annotations

from furniture.application.dtos import Design
from furniture.domain.entities import Part
from furniture.domain.services import CostBreakdown


def _dims(part: Part) -> str:
    d = part.dimensions
    return f"{d.length:g}x{d.width:g}x{d.height:g}"


class PartsListFormatter:
    """Formats the bill of parts as a table."""

    def format(self, parts: list[Part]) -> str:
        if not parts:
            return "No parts."

        lines = [
            "PARTS LIST",
            "=" * 70,
            f"{'Part':<28} {'Size (cm)':<22} {'Qty':<6} {'Category'}",
            "-" * 70,
        ]
        for part in parts:
            lines.append(
                f"{part.name:<28} {_dims(part):<22} {part.quantity:<6} "
                f"{part.category.value}"
            )
        lines.append("-" * 70)
        lines.append(f"{'TOTAL':<28} {'':<22} {sum(p.quantity for p in parts)}")
        return "\n".join(lines)


class CostBreakdownFormatter:
    """Formats the per-part cost breakdown."""

    def format(self, breakdown: CostBreakdown) -> str:
        lines = [
            "COST BREAKDOWN",
            "=" * 70,
            f"{'Part':<28} {'Qty':<6} {'Unit':>10} {'Total':>10} {'Share':>8}",
            "-" * 70,
        ]
        for line in breakdown.lines:
            lines.append(
                f"{line.name:<28} {line.quantity:<6} {line.unit_cost:>10.2f} "
                f"{line.total:>10.2f} {line.percentage:>7.1f}%"
            )
        lines.append("-" * 70)
        lines.append(f"{'TOTAL':<28} {'':<6} {'':>10} {breakdown.total_cost:>10.2f}")
        return "\n".join(lines)


class InstructionsFormatter:
    """Formats the assembly checklist as numbered steps.

    Lines starting with WARNING or NOTE are shown unnumbered so the
    step numbers follow the actual work.
    """

    def format(self, instructions: list[str], assembly_time: int) -> str:
        lines = [
            "ASSEMBLY INSTRUCTIONS",
            "=" * 70,
            f"Estimated time: {assembly_time} minutes",
            "",
        ]
        step = 0
        for instruction in instructions:
            if instruction.startswith(("WARNING", "NOTE")):
                lines.append(f"   {instruction}")
            else:
                step += 1
                lines.append(f"{step:>2}. {instruction}")
        return "\n".join(lines)


class DesignSummaryFormatter:
    """Formats the headline figures and structural report."""

    def format(self, design: Design) -> str:
        dims = design.dimensions
        report = design.structural
        spec = design.engineering
        lines = [
            "DESIGN SUMMARY",
            "=" * 70,
            f"Type:        {design.furniture_type.value}",
            f"Material:    {design.material.value} ({design.material_color})",
            f"Dimensions:  {dims.length:g} x {dims.width:g} x {dims.height:g} cm",
            f"Parts:       {design.part_count}",
            f"Total cost:  {design.total_cost:.2f}",
            "",
            "STRUCTURE",
            "-" * 70,
            f"Load capacity:    {report.load_capacity:g} kg",
            f"Leg profile:      {spec.leg_size:g} cm",
            f"Top thickness:    {spec.top_thickness:g} cm",
            f"Integrity score:  {report.integrity_score}",
            f"Stability:        {report.stability.reason} "
            f"(ratio {report.stability.ratio:.1f})",
            f"Workforce:        {report.workforce.people} person(s), "
            f"~{report.workforce.hours} h",
        ]
        for addition in spec.additions:
            lines.append(
                f"Addition:         {addition.type.value} x{addition.quantity} "
                f"({addition.thickness:g} x {addition.height:g} cm)"
            )
        for recommendation in report.recommendations:
            lines.append(f"Recommendation:   {recommendation}")
        if design.warnings:
            lines.append("")
            lines.append("WARNINGS")
            lines.append("-" * 70)
            lines.extend(f"  - {warning}" for warning in design.warnings)
        return "\n".join(lines)


def format_design(design: Design) -> str:
    """Full text report: summary, parts list, costs and instructions."""
    sections = [
        DesignSummaryFormatter().format(design),
        PartsListFormatter().format(design.parts),
        CostBreakdownFormatter().format(design.cost),
        InstructionsFormatter().format(design.instructions, design.assembly_time),
    ]
    return "\n\n".join(sections)
