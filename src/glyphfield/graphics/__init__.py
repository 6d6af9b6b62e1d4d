"""Graphics module for GLYPHFIELD rendering."""

from glyphfield.graphics.renderer import GridRenderer
from glyphfield.graphics.glyph_cache import GlyphCache, load_monospace_font
from glyphfield.graphics.primitives import clear, draw_rect, draw_mask

__all__ = [
    "GridRenderer",
    "GlyphCache",
    "load_monospace_font",
    "clear",
    "draw_rect",
    "draw_mask",
]
