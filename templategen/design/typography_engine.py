#!/usr/bin/env python3
"""
Typography Engine for the Template Engine

Turns a named font pairing into a complete type system: font stacks, a
modular size scale, and the fixed weight and line-height tables.
"""

import math
from typing import Dict, List, NamedTuple

from templategen.core import get_logger

from .sdk import FontFamily, Style, TypographySystem

log = get_logger("typography_engine")


class FontPairing(NamedTuple):
    name: str
    heading: str
    body: str
    characterization: str


class FontScale(NamedTuple):
    base: int
    ratio: float


# Order matters: the first entry is the fallback pairing
FONT_PAIRINGS: List[FontPairing] = [
    FontPairing("Classic Serif/Sans", "'Georgia', serif", "'Arial', sans-serif",
                "Traditional, balanced contrast"),
    FontPairing("Modern Sans", "'Montserrat', sans-serif", "'Open Sans', sans-serif",
                "Clean, contemporary"),
    FontPairing("Corporate Professional", "'Helvetica Neue', sans-serif", "'Roboto', sans-serif",
                "Sleek, professional, reliable"),
    FontPairing("Elegant Contrast", "'Playfair Display', serif", "'Source Sans Pro', sans-serif",
                "Sophisticated, dramatic contrast"),
    FontPairing("Creative Modern", "'Poppins', sans-serif", "'Work Sans', sans-serif",
                "Fresh, contemporary, innovative"),
    FontPairing("Technical Clarity", "'IBM Plex Sans', sans-serif", "'IBM Plex Serif', serif",
                "Precise, logical, technical"),
    FontPairing("Friendly Professional", "'Nunito', sans-serif", "'Lato', sans-serif",
                "Approachable, warm, trustworthy"),
]

FONT_SCALES: Dict[str, FontScale] = {
    "default": FontScale(base=16, ratio=1.25),   # Major third
    "compact": FontScale(base=14, ratio=1.2),    # Minor third
    "dramatic": FontScale(base=16, ratio=1.5),   # Perfect fifth
}

FONT_WEIGHTS = {"normal": 400, "medium": 500, "semibold": 600, "bold": 700}
LINE_HEIGHTS = {"tight": 1.2, "normal": 1.5, "relaxed": 1.75}

SIZE_STEPS = ("xs", "sm", "base", "lg", "xl", "2xl", "3xl")

STYLE_TYPOGRAPHY: Dict[str, str] = {
    Style.CORPORATE.value: "Corporate Professional",
    Style.CREATIVE.value: "Creative Modern",
    Style.MINIMAL.value: "Modern Sans",
    Style.ABSTRACT.value: "Elegant Contrast",
}


def pairing_names() -> List[str]:
    return [p.name for p in FONT_PAIRINGS]


def get_font_pairing(name: str) -> FontPairing:
    for pairing in FONT_PAIRINGS:
        if pairing.name == name:
            return pairing
    log.debug(f"Unknown typography '{name}', falling back to '{FONT_PAIRINGS[0].name}'")
    return FONT_PAIRINGS[0]


def scale_for_pairing(name: str) -> FontScale:
    """Compact/technical pairings get a tighter ratio, elegant/creative a wider one."""
    if "Compact" in name or "Technical" in name:
        return FONT_SCALES["compact"]
    if "Elegant" in name or "Creative" in name:
        return FONT_SCALES["dramatic"]
    return FONT_SCALES["default"]


def modular_scale(base: float, ratio: float) -> Dict[str, int]:
    """
    Derive the seven named size steps from a base size and ratio.

    Each step is rounded half-up to a whole pixel.
    """
    root = math.sqrt(ratio)
    raw = {
        "xs": base / ratio,
        "sm": base / root,
        "base": base,
        "lg": base * root,
        "xl": base * ratio,
        "2xl": base * ratio ** 2,
        "3xl": base * ratio ** 3,
    }
    return {step: int(math.floor(raw[step] + 0.5)) for step in SIZE_STEPS}


def generate_typography_system(pairing_name: str) -> TypographySystem:
    """
    Build the type system for a named pairing.

    Unknown names resolve to the first pairing, scale included, so the
    result is identical to asking for that pairing directly.
    """
    pairing = get_font_pairing(pairing_name)
    scale = scale_for_pairing(pairing.name)

    return TypographySystem(
        font_family=FontFamily(heading=pairing.heading, body=pairing.body),
        font_sizes=modular_scale(scale.base, scale.ratio),
        font_weight=dict(FONT_WEIGHTS),
        line_height=dict(LINE_HEIGHTS),
        characterization=pairing.characterization,
    )


def get_style_typography(style: str) -> TypographySystem:
    """Get the typography system that suits a style."""
    return generate_typography_system(STYLE_TYPOGRAPHY.get(style, "Modern Sans"))


__all__ = [
    "FontPairing",
    "FontScale",
    "FONT_PAIRINGS",
    "FONT_SCALES",
    "FONT_WEIGHTS",
    "LINE_HEIGHTS",
    "SIZE_STEPS",
    "STYLE_TYPOGRAPHY",
    "pairing_names",
    "get_font_pairing",
    "scale_for_pairing",
    "modular_scale",
    "generate_typography_system",
    "get_style_typography",
]
