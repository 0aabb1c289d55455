#!/usr/bin/env python3
"""
Color Engine for the Template Engine

Derives a five-color palette from a base hue and a color-theory scheme, and
provides the hex/RGB/HSL conversions and WCAG contrast helpers used by the
QA gates.

Palette slot order is fixed: [primary, secondary, accent, background, text].
"""

import math
from typing import Callable, Dict, List, Tuple

from templategen.core import get_logger

from .sdk import PALETTE_SIZE, ColorScheme, Style

log = get_logger("color_engine")

# Base saturation/lightness (percent) for the main hues of every scheme
BASE_SATURATION = 70
BASE_LIGHTNESS = 60


def normalize_hue(hue: float) -> float:
    """Map any hue onto [0, 360)."""
    return ((hue % 360) + 360) % 360


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees
        s: Saturation in percent (0-100)
        l: Lightness in percent (0-100)

    Returns:
        (r, g, b) tuple of integers in [0, 255]
    """
    h = normalize_hue(h)
    s /= 100.0
    l /= 100.0

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return tuple(max(0, min(255, _round_half_up((v + m) * 255))) for v in (r, g, b))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB channels to a ``#rrggbb`` string."""
    return "#" + format((1 << 24) | (r << 16) | (g << 8) | b, "x")[1:]


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple."""
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c + c for c in hex_color)
    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def hex_to_hsl(hex_color: str) -> Tuple[float, float, float]:
    """Convert hex color to HSL tuple (hue in degrees, s/l in percent)."""
    r, g, b = (c / 255.0 for c in hex_to_rgb(hex_color))

    max_val = max(r, g, b)
    min_val = min(r, g, b)
    delta = max_val - min_val

    l = (max_val + min_val) / 2.0

    if delta == 0:
        h = s = 0.0
    else:
        s = delta / (2.0 - max_val - min_val) if l > 0.5 else delta / (max_val + min_val)

        if max_val == r:
            h = (g - b) / delta + (6 if g < b else 0)
        elif max_val == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h *= 60.0

    return h, s * 100.0, l * 100.0


def calculate_luminance(hex_color: str) -> float:
    """
    Calculate relative luminance for contrast ratio calculation.

    Uses the WCAG 2.1 formula for relative luminance.
    """
    r, g, b = hex_to_rgb(hex_color)

    def gamma_correct(c: int) -> float:
        c = c / 255.0
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * gamma_correct(r) + 0.7152 * gamma_correct(g) + 0.0722 * gamma_correct(b)


def contrast_ratio(fg_hex: str, bg_hex: str) -> float:
    """
    Calculate contrast ratio between foreground and background colors.

    Returns:
        Contrast ratio (1.0 to 21.0, higher is better)
    """
    l1 = calculate_luminance(fg_hex)
    l2 = calculate_luminance(bg_hex)

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


# ============================================================================
# SCHEMES
# ============================================================================


def generate_monochromatic(base_hue: float) -> List[str]:
    """Single hue, lightness descending from 85% to 25%; the text slot is desaturated."""
    colors = []
    for i in range(PALETTE_SIZE):
        lightness = 85 - i * (60 / (PALETTE_SIZE - 1))
        saturation = BASE_SATURATION if i < PALETTE_SIZE - 1 else 25
        colors.append(hsl_to_hex(base_hue, saturation, lightness))
    return colors


def generate_complementary(base_hue: float) -> List[str]:
    complement = normalize_hue(base_hue + 180)
    return [
        hsl_to_hex(base_hue, BASE_SATURATION, BASE_LIGHTNESS),
        hsl_to_hex(base_hue, 60, 75),
        hsl_to_hex(complement, BASE_SATURATION, BASE_LIGHTNESS),
        hsl_to_hex(base_hue, 15, 95),
        hsl_to_hex(base_hue, 25, 15),
    ]


def generate_analogous(base_hue: float, hue_step: float = 30) -> List[str]:
    # Neighbours lose 10% saturation and 5% lightness per step away from the base
    return [
        hsl_to_hex(base_hue, BASE_SATURATION, BASE_LIGHTNESS),
        hsl_to_hex(normalize_hue(base_hue - hue_step), BASE_SATURATION - 10, BASE_LIGHTNESS - 5),
        hsl_to_hex(normalize_hue(base_hue + hue_step), BASE_SATURATION - 10, BASE_LIGHTNESS - 5),
        hsl_to_hex(base_hue, 20, 95),
        hsl_to_hex(base_hue, 25, 15),
    ]


def generate_triadic(base_hue: float) -> List[str]:
    return [
        hsl_to_hex(base_hue, BASE_SATURATION, BASE_LIGHTNESS),
        hsl_to_hex(normalize_hue(base_hue + 120), BASE_SATURATION, BASE_LIGHTNESS),
        hsl_to_hex(normalize_hue(base_hue + 240), BASE_SATURATION, BASE_LIGHTNESS),
        hsl_to_hex(base_hue, 30, 95),
        hsl_to_hex(base_hue, 30, 15),
    ]


def generate_split_complementary(base_hue: float) -> List[str]:
    complement = normalize_hue(base_hue + 180)
    return [
        hsl_to_hex(base_hue, BASE_SATURATION, BASE_LIGHTNESS),
        hsl_to_hex(normalize_hue(complement - 30), BASE_SATURATION, BASE_LIGHTNESS),
        hsl_to_hex(normalize_hue(complement + 30), BASE_SATURATION, BASE_LIGHTNESS),
        hsl_to_hex(base_hue, 20, 95),
        hsl_to_hex(base_hue, 25, 15),
    ]


SCHEME_GENERATORS: Dict[str, Callable[[float], List[str]]] = {
    ColorScheme.MONOCHROMATIC.value: generate_monochromatic,
    ColorScheme.COMPLEMENTARY.value: generate_complementary,
    ColorScheme.ANALOGOUS.value: generate_analogous,
    ColorScheme.TRIADIC.value: generate_triadic,
    ColorScheme.SPLIT_COMPLEMENTARY.value: generate_split_complementary,
}

# Scheme (and hue offset) that suits each style
STYLE_SCHEMES: Dict[str, Tuple[str, int]] = {
    Style.CORPORATE.value: (ColorScheme.MONOCHROMATIC.value, 210),
    Style.CREATIVE.value: (ColorScheme.TRIADIC.value, 0),
    Style.MINIMAL.value: (ColorScheme.ANALOGOUS.value, 0),
    Style.ABSTRACT.value: (ColorScheme.SPLIT_COMPLEMENTARY.value, 0),
}


def generate_palette(base_hue: float, scheme: str) -> List[str]:
    """
    Generate a five-color palette.

    Args:
        base_hue: Base hue in degrees (any value, normalized first)
        scheme: Color scheme name; unknown names fall back to monochromatic

    Returns:
        List of five ``#rrggbb`` strings
    """
    base_hue = normalize_hue(base_hue)
    generator = SCHEME_GENERATORS.get(scheme)
    if generator is None:
        log.debug(f"Unknown color scheme '{scheme}', falling back to monochromatic")
        generator = generate_monochromatic
    return generator(base_hue)


def generate_style_palette(style: str, base_hue: float) -> List[str]:
    """Generate a palette using the scheme that suits a style."""
    scheme, offset = STYLE_SCHEMES.get(style, (ColorScheme.MONOCHROMATIC.value, 0))
    return generate_palette(base_hue + offset, scheme)


__all__ = [
    "normalize_hue",
    "hsl_to_rgb",
    "rgb_to_hex",
    "hsl_to_hex",
    "hex_to_rgb",
    "hex_to_hsl",
    "calculate_luminance",
    "contrast_ratio",
    "generate_palette",
    "generate_style_palette",
    "SCHEME_GENERATORS",
    "STYLE_SCHEMES",
]
