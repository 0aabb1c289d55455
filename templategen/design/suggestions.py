#!/usr/bin/env python3
"""
Design suggestion intake.

An external assistant answers with JSON of the form
``{"style", "colorScheme", "typography", "layout", "designNotes"}``. This
module turns that free text into a ``Suggestion`` and merges it into the
next ``StyleOptions``. It never calls the assistant itself.
"""

from typing import List, Optional

from pydantic import Field, ValidationError

from templategen.core import get_logger, parse_llm_json

from .layout_engine import layout_names
from .sdk import COLOR_SCHEMES, STYLES, CamelModel, StyleOptions
from .typography_engine import pairing_names

log = get_logger("suggestions")


class Suggestion(CamelModel):
    style: Optional[str] = None
    color_scheme: Optional[str] = None
    typography: Optional[str] = None
    layout: Optional[str] = None
    design_notes: List[str] = Field(default_factory=list)


DEFAULT_SUGGESTION = Suggestion(
    style="minimal",
    color_scheme="monochromatic",
    typography="Modern Sans",
    layout="classic-document",
    design_notes=[
        "Keep the design clean and minimal for readability",
        "Use white space effectively to create visual hierarchy",
        "Consider using subtle graphical elements for visual interest",
    ],
)


def parse_suggestion(text: str) -> Suggestion:
    """Parse assistant output; unusable output yields ``DEFAULT_SUGGESTION``."""
    try:
        data = parse_llm_json(text)
        return Suggestion.model_validate(data)
    except (ValueError, ValidationError) as e:
        log.warning(f"Could not parse design suggestion, using default: {e}")
        return DEFAULT_SUGGESTION.model_copy(deep=True)


def merge_suggestion(options: StyleOptions, suggestion: Suggestion) -> StyleOptions:
    """Apply the recognised fields of a suggestion; hue and seed are kept."""
    allowed = {
        "style": STYLES,
        "color_scheme": COLOR_SCHEMES,
        "typography": pairing_names(),
        "layout": layout_names(),
    }
    updates = {}
    for field, values in allowed.items():
        value = getattr(suggestion, field)
        if value is None:
            continue
        if value in values:
            updates[field] = value
        else:
            log.info(f"Ignoring unknown suggested {field} '{value}'")
    return options.model_copy(update=updates)


__all__ = ["Suggestion", "DEFAULT_SUGGESTION", "parse_suggestion", "merge_suggestion"]
