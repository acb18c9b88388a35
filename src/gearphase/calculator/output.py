"""Output formatters for alignment reports.

Converts AlignmentReport snapshots to JSON, Markdown and plain text.
Angles are shown in radians with degrees alongside for readability.
"""

import json
from math import degrees
from typing import Optional, TYPE_CHECKING

from ..constants import DISPLAY_PRECISION_DIGITS
from ..core.mesh_alignment import AlignmentReport, GearAlignment, alignment_info_to_dict
from ..io.schema import SCHEMA_VERSION

if TYPE_CHECKING:
    from .validation import ValidationResult


def _angle(value: float) -> str:
    return f"{value:.{DISPLAY_PRECISION_DIGITS}f} rad ({degrees(value):.2f}°)"


def messages_to_dicts(validation: "ValidationResult") -> list:
    """Convert validation messages to JSON-ready dicts."""
    return [
        {
            'severity': m.severity.value,
            'code': m.code,
            'message': m.message,
            'suggestion': m.suggestion,
        }
        for m in validation.messages
    ]


def to_json(
    report: AlignmentReport,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
) -> str:
    """Convert AlignmentReport to JSON string.

    Args:
        report: AlignmentReport from get_alignment_info()
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, alignment data, and optional validation
    """
    data = {
        'schema_version': SCHEMA_VERSION,
        'alignment': alignment_info_to_dict(report),
    }

    if validation is not None:
        data['validation'] = {
            'valid': validation.valid,
            'messages': messages_to_dicts(validation),
        }

    return json.dumps(data, indent=indent)


def _gear_rows(gear: GearAlignment) -> str:
    md = f"| Teeth | {gear.teeth} |\n"
    md += f"| Rotation | {_angle(gear.rotation)} |\n"
    md += f"| Nearest Tooth | {_angle(gear.tooth_dist)} |\n"
    md += f"| Nearest Gap | {_angle(gear.gap_dist)} |\n"
    md += f"| Half Tooth | {_angle(gear.half_tooth)} |\n"
    md += f"| Presents | {gear.side.value} |\n"
    return md


def to_markdown(
    report: AlignmentReport,
    validation: Optional["ValidationResult"] = None,
) -> str:
    """Convert AlignmentReport to a markdown report.

    Args:
        report: AlignmentReport from get_alignment_info()
        validation: Optional validation results to include

    Returns:
        Markdown string
    """
    md = "# Gear Mesh Alignment\n\n"

    md += "## Overview\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Mesh Angle (parent) | {_angle(report.mesh_angle)} |\n"
    md += f"| Mesh Angle (child) | {_angle(report.child_mesh_angle)} |\n"
    md += f"| Aligned | {'Yes' if report.aligned else 'No'} |\n\n"

    md += "## Parent Gear\n\n"
    md += "| Quantity | Value |\n"
    md += "|----------|-------|\n"
    md += _gear_rows(report.parent)
    md += "\n"

    md += "## Child Gear\n\n"
    md += "| Quantity | Value |\n"
    md += "|----------|-------|\n"
    md += _gear_rows(report.child)
    md += "\n"

    if validation:
        md += "## Validation\n\n"

        if validation.valid:
            md += "**Status:** ✅ Gears interleave\n\n"
        else:
            md += "**Status:** ❌ Gears do not interleave\n\n"

        if validation.errors:
            md += "### Errors\n\n"
            for msg in validation.errors:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.warnings:
            md += "### Warnings\n\n"
            for msg in validation.warnings:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "---\n"
    md += "*Generated by gearphase*\n"

    return md


def to_summary(report: AlignmentReport) -> str:
    """Convert AlignmentReport to a short text summary.

    Args:
        report: AlignmentReport from get_alignment_info()

    Returns:
        Multi-line formatted summary string
    """
    parent = report.parent
    child = report.child

    lines = [
        "═══ Gear Mesh ═══",
        f"Mesh angle: {_angle(report.mesh_angle)}",
        f"Aligned: {'Yes' if report.aligned else 'No'}",
        "",
        f"Parent ({parent.teeth} teeth): {parent.side.value}",
        f"  Tooth dist: {_angle(parent.tooth_dist)}",
        f"  Gap dist:   {_angle(parent.gap_dist)}",
        "",
        f"Child ({child.teeth} teeth): {child.side.value}",
        f"  Tooth dist: {_angle(child.tooth_dist)}",
        f"  Gap dist:   {_angle(child.gap_dist)}",
    ]

    return "\n".join(lines)
