#!/usr/bin/env python3
"""
Template Assembler

Composes the color, typography, layout and graphics engines into a single
``Template``. The assembler never raises: any failure inside the pipeline
degrades to a hard-coded minimal template.
"""

import random
from typing import Any, Dict, Mapping, Optional, Union

from templategen.core import GeneratorCfg, get_logger

from .color_engine import STYLE_SCHEMES, generate_palette
from .graphics_engine import create_seeded_random, generate_decorative_elements
from .layout_engine import GRID_LAYOUTS, STYLE_LAYOUTS, LayoutEngine, get_layout, layout_names
from .sdk import (
    COLOR_SCHEMES,
    FALLBACK_PALETTE,
    STYLES,
    ColorScheme,
    DecorativeElement,
    FontFamily,
    SavedTemplate,
    StyleOptions,
    Template,
    TypographySystem,
    validate_style_options,
)
from .typography_engine import (
    FONT_PAIRINGS,
    FONT_WEIGHTS,
    LINE_HEIGHTS,
    STYLE_TYPOGRAPHY,
    generate_typography_system,
    pairing_names,
)

log = get_logger("assembler")

FALLBACK_TYPOGRAPHY = {
    "font_family": {"heading": "'Georgia', serif", "body": "'Arial', sans-serif"},
    "font_sizes": {"xs": 13, "sm": 14, "base": 16, "lg": 18, "xl": 20, "2xl": 25, "3xl": 31},
    "characterization": "Traditional, balanced contrast",
}


def fallback_template(seed: float = 0.0) -> Template:
    """Minimal template used when generation fails."""
    return Template(
        style="minimal",
        colors=list(FALLBACK_PALETTE),
        typography=TypographySystem(
            font_family=FontFamily(**FALLBACK_TYPOGRAPHY["font_family"]),
            font_sizes=dict(FALLBACK_TYPOGRAPHY["font_sizes"]),
            font_weight=dict(FONT_WEIGHTS),
            line_height=dict(LINE_HEIGHTS),
            characterization=FALLBACK_TYPOGRAPHY["characterization"],
        ),
        layout=GRID_LAYOUTS[0].model_copy(deep=True),
        decorative_elements=[],
        seed=seed,
    )


def generate_template(
    options: Union[StyleOptions, Mapping[str, Any], None] = None,
    cfg: Optional[GeneratorCfg] = None,
) -> Template:
    """
    Generate a complete template from style options.

    Args:
        options: StyleOptions (or a mapping using either field spelling)
        cfg: Engine configuration; built-in defaults when omitted

    Returns:
        The generated Template, or ``fallback_template()`` on any failure
    """
    seed = 0.0
    try:
        options = validate_style_options(options)
        seed = options.seed
        cfg = cfg or GeneratorCfg()

        base_layout = get_layout(options.layout)
        layout = LayoutEngine(options.seed).generate_layout_variation(
            base_layout,
            cfg.layout.variation_factor,
            cfg.layout.max_overlap_iterations,
        )

        colors = generate_palette(options.base_hue, options.color_scheme)
        typography = generate_typography_system(options.typography)
        decorative_elements = generate_decorative_elements(
            options.style,
            colors,
            options.seed,
            shapes=cfg.graphics.style_shapes.get(options.style),
        )

        template = Template(
            style=options.style,
            colors=colors,
            typography=typography,
            layout=layout,
            decorative_elements=decorative_elements,
            seed=options.seed,
        )
        log.info(
            f"Generated template style={options.style} scheme={options.color_scheme} "
            f"layout={layout.name} elements={len(decorative_elements)} seed={options.seed}"
        )
        return template
    except Exception as e:
        log.error(f"Template generation failed, using fallback template: {e}")
        try:
            return fallback_template(float(seed))
        except (TypeError, ValueError):
            return fallback_template()


# ============================================================================
# STYLE DEFAULTS & RANDOMIZATION
# ============================================================================


def style_defaults(style: str) -> Dict[str, str]:
    """Color scheme, typography and layout names that suit a style."""
    scheme, _ = STYLE_SCHEMES.get(style, (ColorScheme.MONOCHROMATIC.value, 0))
    return {
        "color_scheme": scheme,
        "typography": STYLE_TYPOGRAPHY.get(style, "Modern Sans"),
        "layout": STYLE_LAYOUTS.get(style, GRID_LAYOUTS[0].name),
    }


def randomize_options(seed: Optional[float] = None) -> StyleOptions:
    """Pick every option at random; reproducible for a given seed."""
    rng = random.Random(seed)
    return StyleOptions(
        style=rng.choice(STYLES),
        base_hue=rng.randrange(360),
        color_scheme=rng.choice(COLOR_SCHEMES),
        typography=rng.choice(pairing_names()),
        layout=rng.choice(layout_names()),
        seed=rng.random(),
    )


# ============================================================================
# DECORATION PLACEMENT
# ============================================================================


def assign_decorations(
    template: Template, probability: float = 0.3
) -> Dict[str, Optional[DecorativeElement]]:
    """
    Decide which sections carry a decorative element.

    Each section gets one with ``probability``; presence and choice are
    drawn from the template seed, so a template always decorates the same
    way.
    """
    placements: Dict[str, Optional[DecorativeElement]] = {}
    elements = template.decorative_elements
    # Offset keeps this stream apart from the one that built the elements
    rng = create_seeded_random(template.seed + 7919)
    for section in template.layout.sections:
        present = rng() < probability
        pick = rng()
        if present and elements:
            placements[section.id] = elements[min(int(pick * len(elements)), len(elements) - 1)]
        else:
            placements[section.id] = None
    return placements


# ============================================================================
# PERSISTENCE CONTRACT
# ============================================================================


def options_from_template(
    template: Union[Template, SavedTemplate],
    base_hue: int,
    color_scheme: Optional[str] = None,
) -> StyleOptions:
    """
    Rebuild StyleOptions for regenerating a stored template.

    A template records its style, layout name and seed directly. The hue and
    scheme are not recoverable from the palette alone, so the caller passes
    the values it stored; typography is matched back from the font stacks.
    """
    typography = next(
        (
            p.name
            for p in FONT_PAIRINGS
            if p.heading == template.typography.font_family.heading
            and p.body == template.typography.font_family.body
        ),
        FONT_PAIRINGS[0].name,
    )
    return StyleOptions(
        style=template.style,
        base_hue=base_hue,
        color_scheme=color_scheme or style_defaults(template.style)["color_scheme"],
        typography=typography,
        layout=template.layout.name,
        seed=template.seed,
    )


__all__ = [
    "generate_template",
    "fallback_template",
    "style_defaults",
    "randomize_options",
    "assign_decorations",
    "options_from_template",
]
