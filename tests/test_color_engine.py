# tests/test_color_engine.py
import re

import pytest

from templategen.design.color_engine import (
    contrast_ratio,
    generate_palette,
    generate_style_palette,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hue,
    rgb_to_hex,
)
from templategen.design.sdk import COLOR_SCHEMES

HEX = re.compile(r"^#[0-9a-f]{6}$")


def test_hsl_to_rgb_primaries():
    assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
    assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
    assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)
    assert hsl_to_rgb(0, 0, 100) == (255, 255, 255)
    assert hsl_to_rgb(0, 0, 0) == (0, 0, 0)


def test_hsl_to_rgb_wraps_hue():
    assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)
    assert hsl_to_rgb(-120, 100, 50) == hsl_to_rgb(240, 100, 50)


def test_rgb_to_hex_pads_channels():
    assert rgb_to_hex(255, 0, 0) == "#ff0000"
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(1, 2, 3) == "#010203"


def test_hex_round_trip_helpers():
    assert hex_to_rgb("#3b82f6") == (59, 130, 246)
    assert hex_to_rgb("fff") == (255, 255, 255)
    h, s, l = hex_to_hsl("#ff0000")
    assert (round(h), round(s), round(l)) == (0, 100, 50)


def test_normalize_hue():
    assert normalize_hue(370) == 10
    assert normalize_hue(-30) == 330
    assert normalize_hue(0) == 0


@pytest.mark.parametrize("scheme", COLOR_SCHEMES)
def test_palette_is_five_hex_colors(scheme):
    for hue in range(-360, 721, 17):
        colors = generate_palette(hue, scheme)
        assert len(colors) == 5
        assert all(HEX.match(c) for c in colors)


@pytest.mark.parametrize("scheme", COLOR_SCHEMES)
def test_palette_invariant_under_full_turns(scheme):
    for hue in (0, 45, 210, 359):
        expected = generate_palette(hue, scheme)
        for k in (-2, -1, 1, 3):
            assert generate_palette(hue + 360 * k, scheme) == expected


def test_monochromatic_shares_hue_and_descends():
    colors = generate_palette(210, "monochromatic")
    hsl = [hex_to_hsl(c) for c in colors]
    for h, _, _ in hsl:
        assert abs(h - 210) <= 3
    lightness = [l for _, _, l in hsl]
    assert lightness == sorted(lightness, reverse=True)
    assert len(set(round(l) for l in lightness)) == 5


def test_unknown_scheme_falls_back_to_monochromatic():
    assert generate_palette(120, "plaid") == generate_palette(120, "monochromatic")


def test_complementary_uses_opposite_hue():
    colors = generate_palette(30, "complementary")
    assert abs(hex_to_hsl(colors[2])[0] - 210) <= 3


def test_background_and_text_slots_contrast():
    # monochromatic keeps a strict lightness ramp, so its slot 3 is not a light background
    for scheme in [s for s in COLOR_SCHEMES if s != "monochromatic"]:
        colors = generate_palette(210, scheme)
        assert contrast_ratio(colors[4], colors[3]) >= 4.5


def test_contrast_ratio_extremes():
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert contrast_ratio("#777777", "#777777") == pytest.approx(1.0)


def test_style_palette_offsets_corporate_hue():
    assert generate_style_palette("corporate", 0) == generate_palette(210, "monochromatic")
    assert generate_style_palette("creative", 40) == generate_palette(40, "triadic")
    assert generate_style_palette("unknown", 40) == generate_palette(40, "monochromatic")
