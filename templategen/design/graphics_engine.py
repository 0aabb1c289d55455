#!/usr/bin/env python3
"""
Procedural Decorative Graphics for the Template Engine

This module synthesizes small, self-contained SVG shapes used as visual
texture on template sections. Every shape constructor is a pure function of
its numeric/color parameters, drawn on a 100x100 viewBox with no external
references. Element selection is driven by a seeded generator, so the same
(style, palette, seed) always yields the same elements.
"""

import math
import random
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence

from templategen.core import get_logger

from .sdk import FALLBACK_SHAPE_COLOR, DecorativeElement, Style

log = get_logger("graphics_engine")

SeededRandom = Callable[[], float]

VIEWBOX = 100
CENTER = VIEWBOX / 2


class StyleParams(NamedTuple):
    shapes: List[str]
    min_count: int
    max_count: int
    min_size: float
    max_size: float


STYLE_PARAMS: Dict[str, StyleParams] = {
    Style.CORPORATE.value: StyleParams(["square", "line", "grid", "corner"], 3, 4, 30, 60),
    Style.CREATIVE.value: StyleParams(["circle", "triangle", "wave", "zigzag"], 5, 7, 40, 80),
    Style.MINIMAL.value: StyleParams(["circle", "line", "dot", "diamond"], 2, 3, 20, 50),
    Style.ABSTRACT.value: StyleParams(["triangle", "cross", "zigzag", "diamond"], 4, 7, 50, 90),
}
DEFAULT_STYLE_PARAMS = StyleParams(["circle", "square"], 3, 3, 30, 60)


# ============================================================================
# SEEDED RANDOM
# ============================================================================


def create_seeded_random(seed: float) -> SeededRandom:
    """
    Create a deterministic generator in [0, 1).

    Uses the fractional part of ``sin(seed) * 10000``, incrementing the seed
    after every draw.
    """
    state = [float(seed)]

    def seeded_random() -> float:
        x = math.sin(state[0]) * 10000
        state[0] += 1
        return x - math.floor(x)

    return seeded_random


def _pick(rng: SeededRandom, items: Sequence):
    return items[min(int(rng() * len(items)), len(items) - 1)]


def _n(value: float) -> str:
    """Format a coordinate compactly."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _svg(body: str, desc: str) -> str:
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {VIEWBOX} {VIEWBOX}">'
        f"<desc>{desc}</desc>{body}</svg>"
    )


# ============================================================================
# SVG SHAPE CONSTRUCTORS
# ============================================================================


def make_circle(size: float, color: str) -> str:
    return _svg(
        f'<circle cx="{_n(CENTER)}" cy="{_n(CENTER)}" r="{_n(size / 2)}" fill="{color}"/>',
        "Circle",
    )


def make_square(size: float, color: str) -> str:
    offset = (VIEWBOX - size) / 2
    return _svg(
        f'<rect x="{_n(offset)}" y="{_n(offset)}" width="{_n(size)}" height="{_n(size)}" fill="{color}"/>',
        "Square",
    )


def make_triangle(size: float, color: str) -> str:
    half = size / 2
    points = (
        f"{_n(CENTER)},{_n(CENTER - half)} "
        f"{_n(CENTER + half)},{_n(CENTER + half)} "
        f"{_n(CENTER - half)},{_n(CENTER + half)}"
    )
    return _svg(f'<polygon points="{points}" fill="{color}"/>', "Triangle")


def make_line(size: float, color: str, rotation: float = 0.0, double: bool = False) -> str:
    """Straight line (or a pair of parallel lines) rotated about the center."""
    half = size / 2
    stroke = size / 10
    offsets = [-stroke * 1.5, stroke * 1.5] if double else [0.0]
    lines = "".join(
        f'<line x1="{_n(CENTER - half)}" y1="{_n(CENTER + dy)}" '
        f'x2="{_n(CENTER + half)}" y2="{_n(CENTER + dy)}" '
        f'stroke="{color}" stroke-width="{_n(stroke)}" stroke-linecap="round"/>'
        for dy in offsets
    )
    return _svg(
        f'<g transform="rotate({_n(rotation)} {_n(CENTER)} {_n(CENTER)})">{lines}</g>',
        "Double line" if double else "Line",
    )


def make_wave(size: float, color: str, periods: int = 3) -> str:
    """Sine wave across the viewBox with amplitude tied to size."""
    amplitude = size / 4
    steps = periods * 12
    span = VIEWBOX - 20
    points = []
    for i in range(steps + 1):
        x = 10 + span * i / steps
        y = CENTER - amplitude * math.sin(2 * math.pi * periods * i / steps)
        points.append(f"{_n(x)},{_n(y)}")
    return _svg(
        f'<polyline points="{" ".join(points)}" fill="none" stroke="{color}" '
        f'stroke-width="{_n(size / 15)}" stroke-linejoin="round"/>',
        "Sine wave",
    )


def make_dots(size: float, color: str, count: int = 5, gap: float = 15.0) -> str:
    """Row of dots centered horizontally."""
    radius = size / 10
    start = CENTER - gap * (count - 1) / 2
    dots = "".join(
        f'<circle cx="{_n(start + i * gap)}" cy="{_n(CENTER)}" r="{_n(radius)}" fill="{color}"/>'
        for i in range(count)
    )
    return _svg(dots, f"Row of {count} dots")


def make_cross(size: float, color: str) -> str:
    half = size / 2
    stroke = size / 10
    return _svg(
        f'<line x1="{_n(CENTER - half)}" y1="{_n(CENTER)}" x2="{_n(CENTER + half)}" y2="{_n(CENTER)}" '
        f'stroke="{color}" stroke-width="{_n(stroke)}"/>'
        f'<line x1="{_n(CENTER)}" y1="{_n(CENTER - half)}" x2="{_n(CENTER)}" y2="{_n(CENTER + half)}" '
        f'stroke="{color}" stroke-width="{_n(stroke)}"/>',
        "Cross",
    )


def make_zigzag(size: float, color: str, peaks: int = 5) -> str:
    half = size / 2
    left = CENTER - half
    step = size / (peaks * 2)
    amplitude = size / 6
    points = [
        f"{_n(left + i * step)},{_n(CENTER - amplitude if i % 2 else CENTER + amplitude)}"
        for i in range(peaks * 2 + 1)
    ]
    return _svg(
        f'<polyline points="{" ".join(points)}" fill="none" stroke="{color}" '
        f'stroke-width="{_n(size / 20)}" stroke-linejoin="miter"/>',
        "Zigzag",
    )


def make_diamond(size: float, color: str) -> str:
    half = size / 2
    points = (
        f"{_n(CENTER)},{_n(CENTER - half)} {_n(CENTER + half)},{_n(CENTER)} "
        f"{_n(CENTER)},{_n(CENTER + half)} {_n(CENTER - half)},{_n(CENTER)}"
    )
    return _svg(f'<polygon points="{points}" fill="{color}"/>', "Diamond")


def make_arc(size: float, color: str, sweep: float = 180.0) -> str:
    """Open circular arc of ``sweep`` degrees starting at 9 o'clock."""
    radius = size / 2
    start = math.radians(180)
    end = start + math.radians(sweep)
    x1 = CENTER + radius * math.cos(start)
    y1 = CENTER + radius * math.sin(start)
    x2 = CENTER + radius * math.cos(end)
    y2 = CENTER + radius * math.sin(end)
    large = 1 if sweep > 180 else 0
    return _svg(
        f'<path d="M {_n(x1)} {_n(y1)} A {_n(radius)} {_n(radius)} 0 {large} 1 {_n(x2)} {_n(y2)}" '
        f'fill="none" stroke="{color}" stroke-width="{_n(size / 12)}" stroke-linecap="round"/>',
        "Arc",
    )


def make_grid(size: float, color: str, cells: int = 4) -> str:
    """Square lattice of ``cells`` x ``cells`` lines."""
    left = (VIEWBOX - size) / 2
    step = size / cells
    stroke = max(size / 60, 0.5)
    lines = []
    for i in range(cells + 1):
        pos = left + i * step
        lines.append(
            f'<line x1="{_n(pos)}" y1="{_n(left)}" x2="{_n(pos)}" y2="{_n(left + size)}" '
            f'stroke="{color}" stroke-width="{_n(stroke)}"/>'
        )
        lines.append(
            f'<line x1="{_n(left)}" y1="{_n(pos)}" x2="{_n(left + size)}" y2="{_n(pos)}" '
            f'stroke="{color}" stroke-width="{_n(stroke)}"/>'
        )
    return _svg("".join(lines), f"Grid of {cells}x{cells} cells")


def make_corner(size: float, color: str, quadrant: int = 0) -> str:
    """L-shaped corner bracket; quadrant 0-3 picks top-left, top-right, bottom-right, bottom-left."""
    arm = size / 2
    inset = (VIEWBOX - size) / 2
    corners = [
        (inset, inset, 1, 1),
        (VIEWBOX - inset, inset, -1, 1),
        (VIEWBOX - inset, VIEWBOX - inset, -1, -1),
        (inset, VIEWBOX - inset, 1, -1),
    ]
    cx, cy, dx, dy = corners[quadrant % 4]
    return _svg(
        f'<polyline points="{_n(cx)},{_n(cy + dy * arm)} {_n(cx)},{_n(cy)} {_n(cx + dx * arm)},{_n(cy)}" '
        f'fill="none" stroke="{color}" stroke-width="{_n(size / 12)}" stroke-linecap="square"/>',
        "Corner bracket",
    )


def make_concentric(size: float, color: str, rings: int = 4) -> str:
    outer = size / 2
    stroke = max(outer / (rings * 3), 0.5)
    circles = "".join(
        f'<circle cx="{_n(CENTER)}" cy="{_n(CENTER)}" r="{_n(outer * (i + 1) / rings)}" '
        f'fill="none" stroke="{color}" stroke-width="{_n(stroke)}"/>'
        for i in range(rings)
    )
    return _svg(circles, f"{rings} concentric circles")


def make_mesh(size: float, color: str, divisions: int = 3) -> str:
    """Triangulated lattice: a grid of points joined into triangles."""
    left = (VIEWBOX - size) / 2
    step = size / divisions
    polygons = []
    for row in range(divisions):
        for col in range(divisions):
            x0 = left + col * step
            y0 = left + row * step
            x1 = x0 + step
            y1 = y0 + step
            for pts in (((x0, y0), (x1, y0), (x0, y1)), ((x1, y0), (x1, y1), (x0, y1))):
                points = " ".join(f"{_n(px)},{_n(py)}" for px, py in pts)
                polygons.append(
                    f'<polygon points="{points}" fill="none" stroke="{color}" '
                    f'stroke-width="{_n(max(size / 80, 0.4))}"/>'
                )
    return _svg("".join(polygons), "Polygon mesh")


def make_ribbon(size: float, color: str, rotation: float = 0.0) -> str:
    """Band with notched ends, rotated about the center."""
    half_w = size / 2
    half_h = size / 8
    notch = half_h
    points = (
        f"{_n(CENTER - half_w)},{_n(CENTER - half_h)} "
        f"{_n(CENTER + half_w)},{_n(CENTER - half_h)} "
        f"{_n(CENTER + half_w - notch)},{_n(CENTER)} "
        f"{_n(CENTER + half_w)},{_n(CENTER + half_h)} "
        f"{_n(CENTER - half_w)},{_n(CENTER + half_h)} "
        f"{_n(CENTER - half_w + notch)},{_n(CENTER)}"
    )
    return _svg(
        f'<polygon points="{points}" fill="{color}" '
        f'transform="rotate({_n(rotation)} {_n(CENTER)} {_n(CENTER)})"/>',
        "Ribbon band",
    )


def make_gradient(size: float, color: str, angle: float = 0.0) -> str:
    """Rectangle fading from ``color`` to transparent; gradient defined inline."""
    grad_id = f"g{color.lstrip('#')}a{int(angle)}s{int(round(size * 100))}"
    rad = math.radians(angle)
    x2 = 50 + 50 * math.cos(rad)
    y2 = 50 + 50 * math.sin(rad)
    offset = (VIEWBOX - size) / 2
    return _svg(
        f'<defs><linearGradient id="{grad_id}" x1="{_n(100 - x2)}%" y1="{_n(100 - y2)}%" '
        f'x2="{_n(x2)}%" y2="{_n(y2)}%">'
        f'<stop offset="0%" stop-color="{color}" stop-opacity="1"/>'
        f'<stop offset="100%" stop-color="{color}" stop-opacity="0"/>'
        f"</linearGradient></defs>"
        f'<rect x="{_n(offset)}" y="{_n(offset)}" width="{_n(size)}" height="{_n(size / 2)}" '
        f'fill="url(#{grad_id})"/>',
        "Gradient rectangle",
    )


# ============================================================================
# SHAPE DISPATCH
# ============================================================================


def _build_line(size: float, color: str, rng: SeededRandom) -> str:
    rotation = rng() * 360
    double = rng() < 0.3
    return make_line(size, color, rotation, double)


def _build_dots(size: float, color: str, rng: SeededRandom) -> str:
    count = 3 + int(rng() * 5)
    gap = 10 + rng() * 10
    return make_dots(size, color, count, gap)


SHAPE_BUILDERS: Dict[str, Callable[[float, str, SeededRandom], str]] = {
    "circle": lambda size, color, rng: make_circle(size, color),
    "square": lambda size, color, rng: make_square(size, color),
    "triangle": lambda size, color, rng: make_triangle(size, color),
    "line": _build_line,
    "wave": lambda size, color, rng: make_wave(size, color, 2 + int(rng() * 3)),
    "dot": _build_dots,
    "cross": lambda size, color, rng: make_cross(size, color),
    "zigzag": lambda size, color, rng: make_zigzag(size, color, 3 + int(rng() * 4)),
    "diamond": lambda size, color, rng: make_diamond(size, color),
    "arc": lambda size, color, rng: make_arc(size, color, 90 + rng() * 180),
    "grid": lambda size, color, rng: make_grid(size, color, 3 + int(rng() * 3)),
    "corner": lambda size, color, rng: make_corner(size, color, int(rng() * 4)),
    "concentric": lambda size, color, rng: make_concentric(size, color, 3 + int(rng() * 3)),
    "mesh": lambda size, color, rng: make_mesh(size, color, 2 + int(rng() * 3)),
    "ribbon": lambda size, color, rng: make_ribbon(size, color, rng() * 360),
    "gradient": lambda size, color, rng: make_gradient(size, color, rng() * 360),
}


def shape_kinds() -> List[str]:
    return list(SHAPE_BUILDERS)


def build_shape(kind: str, size: float, color: str, rng: Optional[SeededRandom] = None) -> DecorativeElement:
    """
    Build one decorative element.

    Raises:
        KeyError: If ``kind`` has no constructor
    """
    rng = rng or create_seeded_random(0)
    svg = SHAPE_BUILDERS[kind](size, color, rng)
    return DecorativeElement(type=kind, svg=svg)


def fallback_element(color: str = FALLBACK_SHAPE_COLOR) -> DecorativeElement:
    return DecorativeElement(type="circle", svg=make_circle(30, color))


def get_style_params(style: str, shapes: Optional[Sequence[str]] = None) -> StyleParams:
    params = STYLE_PARAMS.get(style, DEFAULT_STYLE_PARAMS)
    if shapes:
        params = params._replace(shapes=list(shapes))
    return params


# ============================================================================
# GENERATION
# ============================================================================


def generate_decorative_elements(
    style: str,
    palette: Sequence[str],
    seed: Optional[float] = None,
    shapes: Optional[Sequence[str]] = None,
) -> List[DecorativeElement]:
    """
    Generate the decorative elements for a style and palette.

    Args:
        style: Style name; unknown styles use the default circle/square set
        palette: Colors to draw from
        seed: Seed for reproducible output (None = random)
        shapes: Optional replacement for the style's shape kinds

    Returns:
        List of elements; a shape that fails to build is replaced with a
        fallback circle, and a failure of the whole run yields a single one
    """
    if seed is None:
        seed = random.random()

    try:
        rng = create_seeded_random(seed)
        params = get_style_params(style, shapes)
        count = params.min_count + int(rng() * (params.max_count - params.min_count + 1))

        elements = []
        for i in range(count):
            color = _pick(rng, palette)
            kind = _pick(rng, params.shapes)
            size = params.min_size + rng() * (params.max_size - params.min_size)
            try:
                elements.append(build_shape(kind, size, color, rng))
            except Exception as e:
                log.warning(f"Shape '{kind}' #{i} failed ({e}), using fallback circle")
                elements.append(fallback_element(color if isinstance(color, str) else FALLBACK_SHAPE_COLOR))
        return elements
    except Exception as e:
        log.error(f"Decorative element generation failed for style '{style}': {e}")
        return [fallback_element()]


__all__ = [
    "STYLE_PARAMS",
    "DEFAULT_STYLE_PARAMS",
    "SHAPE_BUILDERS",
    "StyleParams",
    "create_seeded_random",
    "make_circle",
    "make_square",
    "make_triangle",
    "make_line",
    "make_wave",
    "make_dots",
    "make_cross",
    "make_zigzag",
    "make_diamond",
    "make_arc",
    "make_grid",
    "make_corner",
    "make_concentric",
    "make_mesh",
    "make_ribbon",
    "make_gradient",
    "shape_kinds",
    "build_shape",
    "fallback_element",
    "get_style_params",
    "generate_decorative_elements",
]
