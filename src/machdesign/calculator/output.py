"""Output formatters for analysis reports.

Converts typed AnalysisReport models to JSON, Markdown and a plain text
summary. Uses Pydantic's model_dump(mode='json') for serialization,
including enum-to-string conversion.
"""

import json
from typing import List, Optional, TYPE_CHECKING

from ..io import AnalysisReport
from ..io.loaders import SCHEMA_VERSION, _to_dict

if TYPE_CHECKING:
    from .validation import ValidationResult


def _direction_label(direction: int) -> str:
    return "same as input" if direction > 0 else "reversed"


def to_json(
    report: AnalysisReport,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2
) -> str:
    """Convert an AnalysisReport to a JSON string.

    Args:
        report: AnalysisReport from evaluate_case()
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, results and optional validation
    """
    data = _to_dict(report)
    data['schema_version'] = SCHEMA_VERSION

    if report.gear_train is not None:
        data['gear_train']['signed_ratio'] = report.gear_train.signed_ratio
    if report.bearing is not None and report.bearing.meets_requirement is not None:
        data['bearing']['meets_requirement'] = report.bearing.meets_requirement

    if validation is not None:
        data['validation'] = {
            'valid': validation.valid,
            'messages': [
                {
                    'severity': m.severity.value,
                    'code': m.code,
                    'message': m.message,
                    'suggestion': m.suggestion,
                }
                for m in validation.messages
            ]
        }

    return json.dumps(data, indent=indent)


def _markdown_validation(validation: "ValidationResult") -> List[str]:
    lines = ["## Validation", ""]
    lines.append(f"**Status:** {'Valid' if validation.valid else 'Invalid'}")
    lines.append("")
    if not validation.messages:
        lines.append("No issues found.")
        lines.append("")
        return lines

    for m in validation.messages:
        lines.append(f"- **{m.severity.value.upper()}** `{m.code}`: {m.message}")
        if m.suggestion:
            lines.append(f"  - {m.suggestion}")
    lines.append("")
    return lines


def to_markdown(
    report: AnalysisReport,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert an AnalysisReport to a Markdown document."""
    title = report.name or "Design Analysis"
    lines = [f"# {title}", ""]

    train = report.gear_train
    if train is not None:
        lines.extend([
            "## Gear Train",
            "",
            "| Stage | Ratio | Direction | Centre distance (mm) |",
            "|-------|-------|-----------|----------------------|",
        ])
        for index, (ratio, direction, distance) in enumerate(
            zip(train.stage_ratios, train.stage_directions, train.centre_distances_mm), start=1
        ):
            lines.append(f"| {index} | {ratio:.4f} | {direction:+d} | {distance:.2f} |")
        lines.append("")
        lines.append(f"**Overall ratio:** {train.overall_ratio:.4f}:1 "
                     f"(output {_direction_label(train.direction)})")
        lines.append("")

    link = report.linkage
    if link is not None:
        mu_min, mu_max = link.transmission_angle_range
        lines.extend([
            "## Four-Bar Linkage",
            "",
            "| Parameter | Value |",
            "|-----------|-------|",
            f"| Class | {link.linkage_class.value} |",
            f"| Grashof | {'yes' if link.is_grashof else 'no'} |",
            f"| Crank-rocker | {'yes' if link.is_crank_rocker else 'no'} |",
            f"| Transmission angle | {mu_min:.1f}° – {mu_max:.1f}° |",
            "",
        ])
        if link.poor_transmission:
            lines.append("> Transmission angle leaves the 40°–140° window.")
            lines.append("")

    brg = report.bearing
    if brg is not None:
        lines.extend([
            "## Bearing Life",
            "",
            "| Parameter | Value |",
            "|-----------|-------|",
            f"| Equivalent load P | {brg.equivalent_load_n:.1f} N |",
            f"| C/P | {brg.load_ratio:.2f} |",
            f"| L10 | {brg.l10_revolutions:.4g} rev |",
            f"| L10h | {brg.l10_hours:.1f} h |",
            f"| Life at {brg.reliability_percent}% reliability | {brg.adjusted_life_hours:.1f} h |",
        ])
        if brg.safety_margin is not None:
            lines.append(f"| Required life | {brg.required_life_hours:.1f} h |")
            lines.append(f"| Safety margin | {brg.safety_margin:.2f} |")
        lines.append("")

    if validation is not None:
        lines.extend(_markdown_validation(validation))

    return "\n".join(lines)


def to_summary(report: AnalysisReport) -> str:
    """One line per analyzed section, for terminal output."""
    lines = []
    if report.name:
        lines.append(report.name)

    train = report.gear_train
    if train is not None:
        stages = " × ".join(f"{r:.3f}" for r in train.stage_ratios)
        lines.append(
            f"Gear train: {train.overall_ratio:.4f}:1 ({stages}), output {_direction_label(train.direction)}"
        )

    link = report.linkage
    if link is not None:
        mu_min, mu_max = link.transmission_angle_range
        flag = " [poor transmission]" if link.poor_transmission else ""
        lines.append(
            f"Linkage: {link.linkage_class.value}, μ {mu_min:.1f}°..{mu_max:.1f}°{flag}"
        )

    brg = report.bearing
    if brg is not None:
        line = (
            f"Bearing: P={brg.equivalent_load_n:.0f}N, L10={brg.l10_revolutions:.3g} rev "
            f"= {brg.l10_hours:.1f}h"
        )
        if brg.safety_margin is not None:
            line += f", margin {brg.safety_margin:.2f}"
        lines.append(line)

    return "\n".join(lines)
