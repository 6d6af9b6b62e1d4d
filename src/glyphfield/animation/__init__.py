"""Animation primitives for GLYPHFIELD."""

from glyphfield.animation.easing import Easing, get_easing, clamp_progress
from glyphfield.animation.color import Color, interpolate_color
from glyphfield.animation.glyphs import GlyphSource, DEFAULT_SYMBOLS

__all__ = [
    # Easing
    "Easing",
    "get_easing",
    "clamp_progress",
    # Colour
    "Color",
    "interpolate_color",
    # Glyphs
    "GlyphSource",
    "DEFAULT_SYMBOLS",
]
