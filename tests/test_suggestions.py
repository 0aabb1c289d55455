# tests/test_suggestions.py
from templategen.design.sdk import StyleOptions
from templategen.design.suggestions import (
    DEFAULT_SUGGESTION,
    Suggestion,
    merge_suggestion,
    parse_suggestion,
)


def test_parse_fenced_json():
    text = """Here you go:
```json
{"style": "creative", "colorScheme": "triadic", "typography": "Creative Modern",
 "layout": "asymmetric", "designNotes": ["Use bold color blocks"]}
```"""
    suggestion = parse_suggestion(text)
    assert suggestion.style == "creative"
    assert suggestion.color_scheme == "triadic"
    assert suggestion.design_notes == ["Use bold color blocks"]


def test_parse_embedded_object():
    suggestion = parse_suggestion('Sure! {"style": "abstract", "layout": "magazine"} Enjoy.')
    assert suggestion.style == "abstract"
    assert suggestion.layout == "magazine"
    assert suggestion.typography is None


def test_unparsable_text_returns_default():
    assert parse_suggestion("no json here") == DEFAULT_SUGGESTION
    assert parse_suggestion('["a", "list"]') == DEFAULT_SUGGESTION
    assert parse_suggestion('{"designNotes": "not a list"}') == DEFAULT_SUGGESTION


def test_default_is_not_shared():
    suggestion = parse_suggestion("")
    suggestion.design_notes.append("extra")
    assert "extra" not in DEFAULT_SUGGESTION.design_notes


def test_merge_applies_known_values_only():
    options = StyleOptions(base_hue=33, seed=4.0)
    merged = merge_suggestion(
        options,
        Suggestion(style="corporate", color_scheme="neon", typography="Technical Clarity", layout=None),
    )
    assert merged.style == "corporate"
    assert merged.color_scheme == options.color_scheme
    assert merged.typography == "Technical Clarity"
    assert merged.layout == options.layout
    assert merged.base_hue == 33
    assert merged.seed == 4.0
    assert options.style == "minimal"
