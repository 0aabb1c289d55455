# tests/test_assembler.py
import json

import pytest

from templategen.design import assembler
from templategen.design.assembler import (
    assign_decorations,
    fallback_template,
    generate_template,
    options_from_template,
    randomize_options,
    style_defaults,
)
from templategen.design.color_engine import generate_palette
from templategen.design.layout_engine import layout_names
from templategen.design.sdk import (
    COLOR_SCHEMES,
    FALLBACK_PALETTE,
    STYLES,
    SavedTemplate,
    StyleOptions,
    Template,
)
from templategen.design.typography_engine import pairing_names


def test_end_to_end_example(default_options, engine_cfg):
    template = generate_template(default_options, engine_cfg)
    assert isinstance(template, Template)
    assert len(template.colors) == 5
    assert len(template.layout.sections) >= 3
    assert template.colors == generate_palette(210, "monochromatic")
    assert template.seed == 0.5
    assert template.style == "minimal"


def test_accepts_camel_case_mapping(engine_cfg):
    template = generate_template(
        {"style": "corporate", "baseHue": 10, "colorScheme": "triadic",
         "typography": "Corporate Professional", "layout": "modern-split", "seed": 2},
        engine_cfg,
    )
    assert template.colors == generate_palette(10, "triadic")
    assert template.layout.name == "modern-split"


def test_generation_is_fully_deterministic(default_options, engine_cfg):
    assert generate_template(default_options, engine_cfg) == generate_template(default_options, engine_cfg)


def test_unknown_names_use_fallbacks(engine_cfg):
    template = generate_template(
        StyleOptions(style="baroque", color_scheme="plaid", typography="Nope", layout="nowhere", seed=1),
        engine_cfg,
    )
    assert template.layout.name == "classic-document"
    assert template.colors == generate_palette(210, "monochromatic")
    assert template.typography.font_family.heading == "'Georgia', serif"
    assert {e.type for e in template.decorative_elements} <= {"circle", "square"}


def test_pipeline_failure_returns_fallback(monkeypatch, default_options, engine_cfg):
    def boom(*args, **kwargs):
        raise RuntimeError("palette exploded")

    monkeypatch.setattr(assembler, "generate_palette", boom)
    template = generate_template(default_options, engine_cfg)
    assert template == fallback_template(0.5)
    assert template.colors == FALLBACK_PALETTE
    assert template.decorative_elements == []


def test_invalid_options_return_fallback(engine_cfg):
    template = generate_template(["not", "options"], engine_cfg)
    assert template == fallback_template()


def test_config_controls_shapes_and_variation(default_options):
    from templategen.core import GeneratorCfg

    cfg = GeneratorCfg(layout={"variation_factor": 0.0}, graphics={"style_shapes": {"minimal": ["ribbon"]}})
    template = generate_template(default_options, cfg)
    assert {e.type for e in template.decorative_elements} == {"ribbon"}
    header = template.layout.sections[0]
    assert (header.x, header.y, header.width, header.height) == (5, 5, 90, 15)


def test_json_round_trip_uses_camel_case(default_options, engine_cfg):
    template = generate_template(default_options, engine_cfg)
    data = json.loads(template.to_json())
    assert "decorativeElements" in data
    assert "fontSizes" in data["typography"]
    assert Template.from_json(template.to_json()) == template


def test_saved_template_wraps_and_unwraps(default_options, engine_cfg):
    template = generate_template(default_options, engine_cfg)
    saved = SavedTemplate.wrap(template, index=2)
    assert saved.name == "Template 3"
    assert saved.id.startswith("template_")
    assert saved.created_at.endswith("Z")
    assert "createdAt" in saved.to_dict()
    assert saved.template() == template
    assert SavedTemplate.from_json(saved.to_json()) == saved


def test_options_from_template_regenerates(engine_cfg):
    options = StyleOptions(
        style="creative", base_hue=40, color_scheme="triadic",
        typography="Creative Modern", layout="asymmetric", seed=3.0,
    )
    template = generate_template(options, engine_cfg)
    rebuilt = options_from_template(SavedTemplate.wrap(template), 40, "triadic")
    assert rebuilt == options
    assert generate_template(rebuilt, engine_cfg) == template


def test_options_from_template_defaults_scheme_from_style(engine_cfg):
    template = generate_template(StyleOptions(style="abstract", typography="Unknown"), engine_cfg)
    rebuilt = options_from_template(template, 100)
    assert rebuilt.color_scheme == "split-complementary"
    assert rebuilt.typography == "Classic Serif/Sans"


def test_style_defaults():
    assert style_defaults("corporate") == {
        "color_scheme": "monochromatic",
        "typography": "Corporate Professional",
        "layout": "modern-split",
    }
    assert style_defaults("unknown")["layout"] == "classic-document"


def test_randomize_options_is_seeded():
    a = randomize_options(7)
    assert a == randomize_options(7)
    assert a.style in STYLES
    assert a.color_scheme in COLOR_SCHEMES
    assert a.typography in pairing_names()
    assert a.layout in layout_names()
    assert 0 <= a.base_hue < 360


def test_assign_decorations(default_options, engine_cfg):
    template = generate_template(default_options, engine_cfg)
    placements = assign_decorations(template)
    assert set(placements) == {s.id for s in template.layout.sections}
    assert placements == assign_decorations(template)
    for element in placements.values():
        assert element is None or element in template.decorative_elements


@pytest.mark.parametrize("probability,expect_all", [(0.0, False), (1.0, True)])
def test_assign_decorations_probability_bounds(default_options, engine_cfg, probability, expect_all):
    template = generate_template(default_options, engine_cfg)
    placements = assign_decorations(template, probability)
    if expect_all:
        assert all(v is not None for v in placements.values())
    else:
        assert all(v is None for v in placements.values())


def test_assign_decorations_without_elements():
    placements = assign_decorations(fallback_template(), probability=1.0)
    assert all(v is None for v in placements.values())


def test_generation_ignores_config_files_on_disk(monkeypatch, config_file):
    options = StyleOptions(layout="infographic", seed=3)
    before = generate_template(options)
    monkeypatch.setenv("TEMPLATEGEN_CONFIG", config_file("layout:\n  variation_factor: 0.9\n"))
    assert generate_template(options) == before
    from templategen.core import GeneratorCfg

    assert before == generate_template(options, GeneratorCfg())
