#!/usr/bin/env python3
"""
QA Gates for generated templates

Structural checks on a finished Template: palette format, section bounds,
remaining section overlap and text/background contrast. All functions are
side-effect free and return structured results.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List

from .color_engine import contrast_ratio
from .layout_engine import overlap_amounts
from .sdk import PALETTE_SIZE, LayoutGrid, Template

HEX_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")

# WCAG AA contrast ratio requirements
WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0

BOUNDS_EPSILON = 1e-6


@dataclass
class QAResult:
    """Structured result from QA checks"""
    ok: bool
    fails: List[str]
    warnings: List[str]
    details: Dict[str, Any]


def check_palette(colors: List[str]) -> QAResult:
    """Palette must hold exactly five well-formed ``#rrggbb`` colors."""
    fails = []
    warnings = []

    invalid = [c for c in colors if not isinstance(c, str) or not HEX_PATTERN.match(c)]
    if invalid:
        fails.append(f"Invalid hex color formats: {', '.join(map(str, invalid))}")
    if len(colors) != PALETTE_SIZE:
        fails.append(f"Palette has {len(colors)} colors, expected {PALETTE_SIZE}")

    unique = len(set(colors))
    if unique < len(colors):
        warnings.append(f"Palette repeats colors ({unique} unique of {len(colors)})")

    return QAResult(
        ok=len(fails) == 0,
        fails=fails,
        warnings=warnings,
        details={"palette_analysis": {"colors": list(colors), "unique_colors": unique}},
    )


def check_bounds(layout: LayoutGrid) -> QAResult:
    """Every section must lie inside the page."""
    fails = []
    for s in layout.sections:
        if s.x < 0 or s.y < 0:
            fails.append(f"Section '{s.id}' starts off-page at ({s.x:.2f}, {s.y:.2f})")
        if s.right > 100 + BOUNDS_EPSILON or s.bottom > 100 + BOUNDS_EPSILON:
            fails.append(f"Section '{s.id}' ends off-page at ({s.right:.2f}, {s.bottom:.2f})")

    return QAResult(ok=len(fails) == 0, fails=fails, warnings=[], details={"sections": len(layout.sections)})


def check_collisions(layout: LayoutGrid) -> QAResult:
    """
    Report section pairs that still overlap.

    Overlap relaxation is heuristic, so leftovers are warnings, not fails.
    """
    warnings = []
    collisions = []
    sections = layout.sections
    for i, a in enumerate(sections):
        for b in sections[i + 1:]:
            overlap_x, overlap_y = overlap_amounts(a, b)
            if overlap_x > 0 and overlap_y > 0:
                area = overlap_x * overlap_y
                collisions.append({"a": a.id, "b": b.id, "overlap_area": round(area, 2)})
                warnings.append(f"Sections '{a.id}' and '{b.id}' overlap with area {area:.2f}")

    return QAResult(ok=True, fails=[], warnings=warnings, details={"collisions": collisions})


def check_contrast(text: str, background: str, large_text: bool = False) -> QAResult:
    """Text color against background color, WCAG 2.1 AA."""
    warnings = []
    details: Dict[str, Any] = {}
    try:
        ratio = contrast_ratio(text, background)
    except (ValueError, TypeError, AttributeError) as e:
        return QAResult(ok=False, fails=[f"Could not compute contrast: {e}"], warnings=[], details={})

    required = WCAG_AA_LARGE if large_text else WCAG_AA_NORMAL
    details["contrast_ratio"] = round(ratio, 2)
    details["min_required"] = required
    if ratio < required:
        warnings.append(
            f"Text {text} on background {background} has contrast {ratio:.2f}:1 (need {required}:1)"
        )
    return QAResult(ok=True, fails=[], warnings=warnings, details=details)


def run_all(template: Template) -> QAResult:
    """Run every check on a template and combine the results."""
    checks = {
        "palette": check_palette(template.colors),
        "bounds": check_bounds(template.layout),
        "collisions": check_collisions(template.layout),
        "contrast": check_contrast(template.color("text"), template.color("background")),
    }
    all_fails = [f for r in checks.values() for f in r.fails]
    all_warnings = [w for r in checks.values() for w in r.warnings]

    return QAResult(
        ok=len(all_fails) == 0,
        fails=all_fails,
        warnings=all_warnings,
        details={name: r.details for name, r in checks.items()},
    )


def qa_result_to_dict(result: QAResult) -> Dict[str, Any]:
    """Convert QAResult to JSON-serializable dictionary."""
    return {
        "ok": result.ok,
        "fails": result.fails,
        "warnings": result.warnings,
        "details": result.details
    }


def qa_result_to_json(result: QAResult) -> str:
    return json.dumps(qa_result_to_dict(result), indent=2)
