import argparse

from templategen.design.layout_engine import layout_names
from templategen.design.sdk import COLOR_SCHEMES, STYLES
from templategen.design.typography_engine import pairing_names


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="templategen",
        description="Generate a document template (palette, typography, layout, decorations) as JSON",
    )
    ap.add_argument("--style", default=None, help=f"Visual style ({', '.join(STYLES)})")
    ap.add_argument("--hue", type=int, default=None, help="Base hue in degrees")
    ap.add_argument("--scheme", default=None, help=f"Color scheme ({', '.join(COLOR_SCHEMES)})")
    ap.add_argument("--typography", default=None, help="Typography preset name")
    ap.add_argument("--layout", default=None, help="Layout preset name")
    ap.add_argument("--seed", type=float, default=None, help="Seed for reproducible output")
    ap.add_argument("--style-defaults", action="store_true",
                    help="Take scheme/typography/layout from the style unless given explicitly")
    ap.add_argument("--random", action="store_true", help="Randomize all options (seeded by --seed)")
    ap.add_argument("--suggestion-file", default=None,
                    help="File with a design assistant's JSON answer to merge into the options")
    ap.add_argument("--qa", action="store_true", help="Include the QA report in the output")
    ap.add_argument("--config", default=None, help="Path to an engine config YAML")
    ap.add_argument("--out", default=None, help="Write JSON here instead of stdout")
    ap.add_argument("--list-presets", action="store_true", help="Print the preset names and exit")
    return ap


def preset_listing() -> dict:
    return {
        "styles": STYLES,
        "colorSchemes": COLOR_SCHEMES,
        "typography": pairing_names(),
        "layouts": layout_names(),
    }
