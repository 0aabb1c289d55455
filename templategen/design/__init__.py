"""
Template Engine - Design Package

This package provides the engines that turn StyleOptions into a Template.
"""

from .assembler import (
    assign_decorations,
    fallback_template,
    generate_template,
    options_from_template,
    randomize_options,
    style_defaults,
)
from .color_engine import generate_palette, generate_style_palette, hsl_to_rgb, rgb_to_hex
from .graphics_engine import build_shape, create_seeded_random, generate_decorative_elements
from .layout_engine import (
    GRID_LAYOUTS,
    generate_layout_variation,
    get_layout,
    get_style_layout,
    resolve_overlaps,
)
from .qa_gates import QAResult, run_all
from .sdk import (  # Constants; Enums; Models; Helper functions
    PALETTE_SIZE,
    PALETTE_SLOTS,
    ColorScheme,
    DecorativeElement,
    FontFamily,
    LayoutGrid,
    SavedTemplate,
    Section,
    SectionType,
    Style,
    StyleOptions,
    Template,
    TypographySystem,
    validate_style_options,
)
from .suggestions import Suggestion, merge_suggestion, parse_suggestion
from .typography_engine import FONT_PAIRINGS, generate_typography_system, get_style_typography

__all__ = [
    "PALETTE_SIZE",
    "PALETTE_SLOTS",
    "Style",
    "ColorScheme",
    "SectionType",
    "StyleOptions",
    "FontFamily",
    "TypographySystem",
    "Section",
    "LayoutGrid",
    "DecorativeElement",
    "Template",
    "SavedTemplate",
    "validate_style_options",
    "generate_palette",
    "generate_style_palette",
    "hsl_to_rgb",
    "rgb_to_hex",
    "FONT_PAIRINGS",
    "generate_typography_system",
    "get_style_typography",
    "GRID_LAYOUTS",
    "get_layout",
    "get_style_layout",
    "generate_layout_variation",
    "resolve_overlaps",
    "create_seeded_random",
    "build_shape",
    "generate_decorative_elements",
    "generate_template",
    "fallback_template",
    "style_defaults",
    "randomize_options",
    "assign_decorations",
    "options_from_template",
    "Suggestion",
    "parse_suggestion",
    "merge_suggestion",
    "QAResult",
    "run_all",
]
