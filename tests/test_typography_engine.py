# tests/test_typography_engine.py
import pytest

from templategen.design.typography_engine import (
    FONT_PAIRINGS,
    SIZE_STEPS,
    generate_typography_system,
    get_style_typography,
    modular_scale,
    pairing_names,
    scale_for_pairing,
)


def test_modern_sans_scale():
    system = generate_typography_system("Modern Sans")
    assert system.font_sizes["base"] == 16
    assert system.font_sizes["xl"] > system.font_sizes["base"]
    assert system.font_family.heading == "'Montserrat', sans-serif"


def test_default_scale_values():
    assert modular_scale(16, 1.25) == {
        "xs": 13, "sm": 14, "base": 16, "lg": 18, "xl": 20, "2xl": 25, "3xl": 31,
    }


def test_technical_pairing_uses_compact_scale():
    assert scale_for_pairing("Technical Clarity").base == 14
    system = generate_typography_system("Technical Clarity")
    assert system.font_sizes == {
        "xs": 12, "sm": 13, "base": 14, "lg": 15, "xl": 17, "2xl": 20, "3xl": 24,
    }


def test_elegant_pairing_uses_dramatic_scale():
    system = generate_typography_system("Elegant Contrast")
    assert system.font_sizes["xl"] == 24
    assert system.font_sizes["3xl"] == 54


@pytest.mark.parametrize("name", pairing_names())
def test_sizes_non_decreasing(name):
    sizes = generate_typography_system(name).font_sizes
    values = [sizes[step] for step in SIZE_STEPS]
    assert values == sorted(values)


@pytest.mark.parametrize("name", ["", "Comic Sans", "Technical Compact Fake", "modern sans"])
def test_unknown_name_equals_first_preset(name):
    assert generate_typography_system(name) == generate_typography_system(FONT_PAIRINGS[0].name)


def test_fixed_weights_and_line_heights():
    system = generate_typography_system("Friendly Professional")
    assert system.font_weight == {"normal": 400, "medium": 500, "semibold": 600, "bold": 700}
    assert system.line_height == {"tight": 1.2, "normal": 1.5, "relaxed": 1.75}


def test_style_typography():
    assert get_style_typography("corporate") == generate_typography_system("Corporate Professional")
    assert get_style_typography("nope") == generate_typography_system("Modern Sans")
