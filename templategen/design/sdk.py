#!/usr/bin/env python3
"""
Core SDK for the Template Engine

This module provides the single source of truth for types, constants and
serialization of generated templates. All engine modules import from this
file to avoid drift.

JSON uses the camelCase field names consumed by the UI layer (``baseHue``,
``fontSizes``, ``decorativeElements`` ...); Python code uses snake_case.
Both spellings are accepted on input.
"""

import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ============================================================================
# CONSTANTS
# ============================================================================

PALETTE_SIZE = 5
PALETTE_SLOTS = ("primary", "secondary", "accent", "background", "text")

# Page geometry, all in percent of the page
PAGE_MIN = 5.0
PAGE_MAX = 95.0
MAX_SECTION_SIZE = PAGE_MAX - PAGE_MIN

DEFAULT_VARIATION_FACTOR = 0.1
MAX_OVERLAP_ITERATIONS = 10
OVERLAP_BUFFER = 1.0

FALLBACK_PALETTE = ["#3b82f6", "#93c5fd", "#1e40af", "#f8fafc", "#0f172a"]
FALLBACK_SHAPE_COLOR = "#cccccc"


class Style(str, Enum):
    CORPORATE = "corporate"
    CREATIVE = "creative"
    MINIMAL = "minimal"
    ABSTRACT = "abstract"


class ColorScheme(str, Enum):
    MONOCHROMATIC = "monochromatic"
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"


class SectionType(str, Enum):
    HEADER = "header"
    FOOTER = "footer"
    SIDEBAR = "sidebar"
    CONTENT = "content"
    HIGHLIGHT = "highlight"
    GALLERY = "gallery"


STYLES = [s.value for s in Style]
COLOR_SCHEMES = [c.value for c in ColorScheme]
SECTION_TYPES = [t.value for t in SectionType]

ColorPalette = List[str]


# ============================================================================
# PYDANTIC MODELS
# ============================================================================

class CamelModel(BaseModel):
    """Base model: camelCase JSON aliases, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class StyleOptions(CamelModel):
    """Declarative parameter set consumed once per generation call."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    style: str = Field(default=Style.MINIMAL.value, description="Visual style name")
    base_hue: int = Field(default=210, description="Base hue in degrees")
    color_scheme: str = Field(default=ColorScheme.MONOCHROMATIC.value, description="Color scheme name")
    typography: str = Field(default="Modern Sans", description="Typography preset name")
    layout: str = Field(default="classic-document", description="Layout preset name")
    seed: float = Field(default=0.5, description="Seed for reproducible generation")

    @field_validator("style", "color_scheme", "typography", "layout", mode="before")
    @classmethod
    def coerce_name(cls, v):
        if isinstance(v, Enum):
            return v.value
        return v


class FontFamily(CamelModel):
    heading: str
    body: str


class TypographySystem(CamelModel):
    font_family: FontFamily
    font_sizes: Dict[str, int] = Field(..., description="Modular scale xs..3xl in px")
    font_weight: Dict[str, int]
    line_height: Dict[str, float]
    characterization: str


class Section(CamelModel):
    """Rectangular page region; geometry in percent of the page."""

    id: str
    type: str
    x: float
    y: float
    width: float
    height: float

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v):
        if isinstance(v, Enum):
            v = v.value
        if v not in SECTION_TYPES:
            raise ValueError(f"Section type must be one of: {SECTION_TYPES}")
        return v

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class LayoutGrid(CamelModel):
    name: str
    sections: List[Section] = Field(default_factory=list)

    @field_validator("sections")
    @classmethod
    def validate_unique_ids(cls, v):
        ids = [s.id for s in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Section ids must be unique within a layout")
        return v

    def section_types(self) -> List[str]:
        return [s.type for s in self.sections]


class DecorativeElement(CamelModel):
    type: str = Field(..., description="Shape kind")
    svg: str = Field(..., description="Self-contained SVG markup")


class Template(CamelModel):
    """Complete generated document template."""

    style: str
    colors: ColorPalette
    typography: TypographySystem
    layout: LayoutGrid
    decorative_elements: List[DecorativeElement] = Field(default_factory=list)
    seed: float

    @field_validator("colors")
    @classmethod
    def validate_colors(cls, v):
        if len(v) != PALETTE_SIZE:
            raise ValueError(f"Palette must contain exactly {PALETTE_SIZE} colors")
        return v

    def color(self, slot: str) -> str:
        """Look up a palette color by semantic slot name."""
        return self.colors[PALETTE_SLOTS.index(slot)]

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "Template":
        return cls.model_validate_json(data)


class SavedTemplate(Template):
    """A Template plus the identity the persistence layer assigns to it."""

    id: str
    name: str
    created_at: str

    @classmethod
    def wrap(cls, template: Template, name: Optional[str] = None, index: int = 0) -> "SavedTemplate":
        now = datetime.now(timezone.utc)
        return cls(
            **template.model_dump(exclude={"id", "name", "created_at"}),
            id=f"template_{int(time.time() * 1000)}",
            name=name or f"Template {index + 1}",
            created_at=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )

    def template(self) -> Template:
        return Template(**self.model_dump(exclude={"id", "name", "created_at"}))


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def validate_style_options(data: Union[Mapping[str, Any], StyleOptions, None]) -> StyleOptions:
    """Validate and return a StyleOptions instance."""
    if data is None:
        return StyleOptions()
    if isinstance(data, StyleOptions):
        return data
    if isinstance(data, Mapping):
        return StyleOptions(**data)
    raise TypeError("Data must be a mapping or StyleOptions instance")


__all__ = [
    # Constants
    "PALETTE_SIZE", "PALETTE_SLOTS", "PAGE_MIN", "PAGE_MAX", "MAX_SECTION_SIZE",
    "DEFAULT_VARIATION_FACTOR", "MAX_OVERLAP_ITERATIONS", "OVERLAP_BUFFER",
    "FALLBACK_PALETTE", "FALLBACK_SHAPE_COLOR", "STYLES", "COLOR_SCHEMES", "SECTION_TYPES",

    # Enums
    "Style", "ColorScheme", "SectionType",

    # Models
    "CamelModel", "ColorPalette", "StyleOptions", "FontFamily", "TypographySystem", "Section",
    "LayoutGrid", "DecorativeElement", "Template", "SavedTemplate",

    # Helper functions
    "validate_style_options",
]
