# tests/test_qa_gates.py
import json

import pytest

from templategen.design.assembler import generate_template
from templategen.design.layout_engine import layout_names
from templategen.design.qa_gates import (
    check_bounds,
    check_collisions,
    check_contrast,
    check_palette,
    qa_result_to_json,
    run_all,
)
from templategen.design.sdk import COLOR_SCHEMES, LayoutGrid, Section, StyleOptions


@pytest.mark.parametrize("layout", layout_names())
def test_generated_templates_have_no_fails(layout, engine_cfg):
    for i, scheme in enumerate(COLOR_SCHEMES):
        options = StyleOptions(layout=layout, color_scheme=scheme, base_hue=i * 70, seed=i)
        result = run_all(generate_template(options, engine_cfg))
        assert result.ok, result.fails
        assert set(result.details) == {"palette", "bounds", "collisions", "contrast"}


def test_check_palette_flags_bad_input():
    result = check_palette(["#fff", "#000000"])
    assert not result.ok
    assert len(result.fails) == 2


def test_check_palette_warns_on_duplicates(sample_palette):
    result = check_palette(sample_palette[:4] + [sample_palette[0]])
    assert result.ok
    assert result.warnings


def test_check_bounds_flags_off_page_section():
    layout = LayoutGrid(name="t", sections=[Section(id="a", type="content", x=50, y=50, width=60, height=10)])
    result = check_bounds(layout)
    assert not result.ok
    assert "'a'" in result.fails[0]


def test_collisions_are_warnings():
    layout = LayoutGrid(name="t", sections=[
        Section(id="a", type="content", x=10, y=10, width=40, height=40),
        Section(id="b", type="content", x=30, y=30, width=40, height=40),
    ])
    result = check_collisions(layout)
    assert result.ok
    assert result.details["collisions"] == [{"a": "a", "b": "b", "overlap_area": 400.0}]


def test_check_contrast():
    good = check_contrast("#000000", "#ffffff")
    assert good.ok and not good.warnings
    assert good.details["contrast_ratio"] == 21.0
    poor = check_contrast("#888888", "#777777")
    assert poor.ok
    assert poor.warnings
    assert "#888888" in poor.warnings[0]
    broken = check_contrast("#000000", "zzz")
    assert not broken.ok


def test_result_serializes(sample_palette):
    data = json.loads(qa_result_to_json(check_palette(sample_palette)))
    assert data["ok"] is True
    assert data["details"]["palette_analysis"]["unique_colors"] == 5


def test_run_all_reads_text_and_background_slots(default_options, engine_cfg):
    template = generate_template(default_options, engine_cfg)
    details = run_all(template).details["contrast"]
    expected = check_contrast(template.colors[4], template.colors[3]).details
    assert details == expected
    assert template.color("text") == template.colors[4]
    assert template.color("background") == template.colors[3]
