"""
templategen - deterministic document-template generation.

Builds a palette, a type scale, a page grid and decorative SVG shapes from a
compact set of style options.
"""

__version__ = "0.1.0"
