#!/usr/bin/env python3
"""
Layout Engine for the Template Engine

Provides the named page grids and a seeded variation pass that perturbs a
grid, keeps every section inside the page margins, and relaxes overlaps.

All units are percentages of the page width/height.
"""

import random
import time
from typing import Dict, List, Optional, Tuple

from templategen.core import get_logger

from .sdk import (
    DEFAULT_VARIATION_FACTOR,
    MAX_OVERLAP_ITERATIONS,
    MAX_SECTION_SIZE,
    OVERLAP_BUFFER,
    PAGE_MAX,
    PAGE_MIN,
    LayoutGrid,
    Section,
    Style,
)

log = get_logger("layout_engine")


def _grid(name: str, *sections: Tuple[str, str, float, float, float, float]) -> LayoutGrid:
    return LayoutGrid(
        name=name,
        sections=[
            Section(id=sid, type=stype, x=x, y=y, width=w, height=h)
            for sid, stype, x, y, w, h in sections
        ],
    )


# Order matters: the first grid is the fallback preset
GRID_LAYOUTS: List[LayoutGrid] = [
    _grid(
        "classic-document",
        ("header", "header", 5, 5, 90, 15),
        ("content", "content", 5, 25, 90, 60),
        ("footer", "footer", 5, 90, 90, 5),
    ),
    _grid(
        "modern-split",
        ("header", "header", 5, 5, 90, 10),
        ("sidebar", "sidebar", 5, 20, 25, 70),
        ("content", "content", 35, 20, 60, 70),
        ("footer", "footer", 5, 95, 90, 5),
    ),
    _grid(
        "asymmetric",
        ("header", "header", 15, 5, 70, 15),
        ("sidebar", "sidebar", 5, 25, 30, 60),
        ("content", "content", 40, 25, 55, 50),
        ("contentBottom", "content", 40, 80, 55, 10),
    ),
    _grid(
        "presentation",
        ("header", "header", 10, 5, 80, 20),
        ("contentLeft", "content", 10, 30, 35, 60),
        ("contentRight", "content", 55, 30, 35, 60),
        ("footer", "footer", 10, 95, 80, 5),
    ),
    _grid(
        "infographic",
        ("header", "header", 5, 5, 90, 10),
        ("section1", "content", 5, 20, 90, 20),
        ("section2", "content", 5, 45, 40, 20),
        ("section3", "content", 50, 45, 45, 20),
        ("section4", "content", 5, 70, 90, 20),
        ("footer", "footer", 5, 95, 90, 5),
    ),
    _grid(
        "magazine",
        ("header", "header", 5, 5, 90, 12),
        ("highlight", "highlight", 5, 22, 90, 18),
        ("content", "content", 5, 45, 55, 40),
        ("gallery", "gallery", 65, 45, 30, 40),
        ("footer", "footer", 5, 95, 90, 5),
    ),
    _grid(
        "portfolio",
        ("header", "header", 5, 5, 90, 10),
        ("gallery", "gallery", 5, 20, 60, 45),
        ("sidebar", "sidebar", 70, 20, 25, 70),
        ("highlight", "highlight", 5, 70, 60, 20),
        ("footer", "footer", 5, 95, 90, 5),
    ),
]

STYLE_LAYOUTS: Dict[str, str] = {
    Style.CORPORATE.value: "modern-split",
    Style.CREATIVE.value: "asymmetric",
    Style.MINIMAL.value: "classic-document",
    Style.ABSTRACT.value: "magazine",
}


def layout_names() -> List[str]:
    return [g.name for g in GRID_LAYOUTS]


def get_layout(name: str) -> LayoutGrid:
    """Return a copy of the named preset, or of the first preset for unknown names."""
    for grid in GRID_LAYOUTS:
        if grid.name == name:
            return grid.model_copy(deep=True)
    log.debug(f"Unknown layout '{name}', falling back to '{GRID_LAYOUTS[0].name}'")
    return GRID_LAYOUTS[0].model_copy(deep=True)


def get_style_layout(style: str) -> LayoutGrid:
    """Direct style to layout lookup, no randomness."""
    name = STYLE_LAYOUTS.get(style)
    if name is None:
        return GRID_LAYOUTS[0].model_copy(deep=True)
    return get_layout(name)


# ============================================================================
# GEOMETRY
# ============================================================================


def overlap_amounts(a: Section, b: Section) -> Tuple[float, float]:
    """Horizontal and vertical overlap of two sections (<= 0 means apart on that axis)."""
    overlap_x = min(a.right, b.right) - max(a.x, b.x)
    overlap_y = min(a.bottom, b.bottom) - max(a.y, b.y)
    return overlap_x, overlap_y


def sections_overlap(a: Section, b: Section) -> bool:
    overlap_x, overlap_y = overlap_amounts(a, b)
    return overlap_x > 0 and overlap_y > 0


def total_overlap_area(sections: List[Section]) -> float:
    """Sum of pairwise intersection areas."""
    area = 0.0
    for i, a in enumerate(sections):
        for b in sections[i + 1:]:
            overlap_x, overlap_y = overlap_amounts(a, b)
            if overlap_x > 0 and overlap_y > 0:
                area += overlap_x * overlap_y
    return area


def clamp_section(section: Section) -> Section:
    """Keep a section inside the page margins, shrinking it first if it cannot fit."""
    section.width = min(max(section.width, 0.0), MAX_SECTION_SIZE)
    section.height = min(max(section.height, 0.0), MAX_SECTION_SIZE)
    section.x = min(max(section.x, PAGE_MIN), PAGE_MAX - section.width)
    section.y = min(max(section.y, PAGE_MIN), PAGE_MAX - section.height)
    return section


# ============================================================================
# ENGINE
# ============================================================================


class LayoutEngine:
    """Seeded layout variation and overlap relaxation."""

    def __init__(self, seed: Optional[float] = None):
        self.seed = seed
        self._rng = random.Random(seed if seed is not None else time.time())

    def apply_variation(self, value: float, factor: float, lo: float, hi: float) -> float:
        """Move ``value`` by up to ``±factor·value`` and clamp it into [lo, hi]."""
        delta = self._rng.uniform(-1.0, 1.0) * value * factor
        return max(lo, min(hi, value + delta))

    def generate_layout_variation(
        self,
        base_layout: LayoutGrid,
        variation_factor: float = DEFAULT_VARIATION_FACTOR,
        max_iterations: int = MAX_OVERLAP_ITERATIONS,
    ) -> LayoutGrid:
        """
        Produce a perturbed copy of ``base_layout``.

        Positions move by up to ``±variation_factor`` of their value and sizes
        by half that, then every section is clamped into the page margins and
        overlaps are relaxed.
        """
        variation = base_layout.model_copy(deep=True)

        for section in variation.sections:
            x = self.apply_variation(section.x, variation_factor, 1, 98 - section.width)
            y = self.apply_variation(section.y, variation_factor, 1, 98 - section.height)
            width = self.apply_variation(section.width, variation_factor * 0.5, 10, 98)
            height = self.apply_variation(section.height, variation_factor * 0.5, 5, 80)
            section.x, section.y, section.width, section.height = x, y, width, height
            clamp_section(section)

        passes = self.resolve_overlaps(variation.sections, max_iterations)
        log.debug(
            f"Layout '{variation.name}' varied (factor={variation_factor}, "
            f"passes={passes}, overlap={total_overlap_area(variation.sections):.2f})"
        )
        return variation

    def resolve_overlaps(
        self, sections: List[Section], max_iterations: int = MAX_OVERLAP_ITERATIONS
    ) -> int:
        """
        Nudge overlapping sections apart in place.

        Each pass walks all pairs in top-to-bottom order and moves the later
        section of an intersecting pair along the cheaper axis: sideways by
        the horizontal overlap (away from the earlier section) or down by the
        vertical overlap, plus a one-unit buffer. Stops when a pass moves
        nothing or after ``max_iterations`` passes. This reduces overlap; it
        does not guarantee none is left.

        Returns:
            Number of passes performed
        """
        passes = 0
        for _ in range(max_iterations):
            passes += 1
            moved = False
            ordered = sorted(sections, key=lambda s: (s.y, s.x))
            for i, earlier in enumerate(ordered):
                for later in ordered[i + 1:]:
                    overlap_x, overlap_y = overlap_amounts(earlier, later)
                    if overlap_x <= 0 or overlap_y <= 0:
                        continue
                    if overlap_x < overlap_y:
                        shift = overlap_x + OVERLAP_BUFFER
                        if later.x + later.width / 2 >= earlier.x + earlier.width / 2:
                            later.x += shift
                        else:
                            later.x -= shift
                    else:
                        later.y += overlap_y + OVERLAP_BUFFER
                    moved = True
            for section in sections:
                clamp_section(section)
            if not moved:
                break
        return passes


# Convenience functions that create an engine instance
def generate_layout_variation(
    base_layout: LayoutGrid,
    variation_factor: float = DEFAULT_VARIATION_FACTOR,
    seed: Optional[float] = None,
    max_iterations: int = MAX_OVERLAP_ITERATIONS,
) -> LayoutGrid:
    """Produce a perturbed, overlap-relaxed copy of a layout."""
    engine = LayoutEngine(seed)
    return engine.generate_layout_variation(base_layout, variation_factor, max_iterations)


def resolve_overlaps(sections: List[Section], max_iterations: int = MAX_OVERLAP_ITERATIONS) -> int:
    """Relax overlaps between sections in place."""
    engine = LayoutEngine()
    return engine.resolve_overlaps(sections, max_iterations)


__all__ = [
    "GRID_LAYOUTS",
    "STYLE_LAYOUTS",
    "LayoutEngine",
    "layout_names",
    "get_layout",
    "get_style_layout",
    "overlap_amounts",
    "sections_overlap",
    "total_overlap_area",
    "clamp_section",
    "generate_layout_variation",
    "resolve_overlaps",
]
