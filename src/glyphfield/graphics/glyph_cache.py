"""Rasterised glyph masks for the buffer surface.

Each glyph is drawn once with PIL into a monochrome mask and cached per
(symbol, pixel size). The mask is cropped to the glyph's ink box so that
centring a mask centres the visible glyph.
"""

import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

# Monospace faces tried before falling back to PIL's bundled font
MONOSPACE_FONTS = [
    "JetBrainsMono-Regular.ttf",
    "DejaVuSansMono.ttf",
    "LiberationMono-Regular.ttf",
    "Menlo.ttc",
    "Courier New.ttf",
]

Mask = NDArray[np.uint8]


def load_monospace_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    """Load the first available monospace font at ``size`` pixels."""
    for name in MONOSPACE_FONTS:
        try:
            font = ImageFont.truetype(name, size)
            logger.debug(f"Using font: {name}")
            return font
        except OSError:
            continue

    logger.warning("No monospace font found, using PIL default font")
    return ImageFont.load_default(size=size)


class GlyphCache:
    """Cache of glyph masks keyed by symbol and pixel size."""

    def __init__(self) -> None:
        self._fonts: dict[int, ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}
        self._masks: dict[tuple[str, int], Mask] = {}

    def font(self, size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        if size not in self._fonts:
            self._fonts[size] = load_monospace_font(size)
        return self._fonts[size]

    def mask(self, symbol: str, size: int) -> Mask:
        """Get the (height, width) coverage mask for ``symbol``."""
        key = (symbol, size)
        cached = self._masks.get(key)
        if cached is not None:
            return cached

        font = self.font(size)
        left, top, right, bottom = font.getbbox(symbol)
        w, h = right - left, bottom - top
        if w <= 0 or h <= 0:
            mask = np.zeros((0, 0), dtype=np.uint8)
        else:
            image = Image.new("L", (w, h), color=0)
            ImageDraw.Draw(image).text((-left, -top), symbol, fill=255, font=font)
            mask = np.asarray(image, dtype=np.uint8)

        self._masks[key] = mask
        return mask

    def __len__(self) -> int:
        return len(self._masks)
