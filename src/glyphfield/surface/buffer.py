"""
Headless drawing surface backed by a numpy buffer.

Used by the headless runner and by tests. Glyphs are rasterised with PIL
and blended into an RGB buffer sized to the device pixel ratio.
"""

from pathlib import Path
import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from glyphfield.animation.color import Color
from glyphfield.graphics.glyph_cache import GlyphCache
from glyphfield.graphics.primitives import clear, draw_rect, draw_mask
from glyphfield.surface.base import Surface

logger = logging.getLogger(__name__)


class BufferSurface(Surface):
    """RGB buffer of shape (height * ratio, width * ratio, 3)."""

    def __init__(
        self,
        width: float,
        height: float,
        pixel_ratio: float = 1.0,
        background: Color = Color(0, 0, 0),
        glyph_cache: GlyphCache | None = None,
    ) -> None:
        self._background = background
        self._glyphs = glyph_cache or GlyphCache()
        self._width = 0.0
        self._height = 0.0
        self._ratio = 1.0
        self._buffer: NDArray[np.uint8] = np.zeros((0, 0, 3), dtype=np.uint8)
        self.resize(width, height, pixel_ratio)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def pixel_ratio(self) -> float:
        return self._ratio

    @property
    def background(self) -> Color:
        return self._background

    def resize(self, width: float, height: float, pixel_ratio: float = 1.0) -> None:
        self._width = float(width)
        self._height = float(height)
        self._ratio = pixel_ratio or 1.0
        dev_w, dev_h = self.device_size
        self._buffer = np.zeros((dev_h, dev_w, 3), dtype=np.uint8)
        clear(self._buffer, self._background.as_tuple())
        logger.debug(f"BufferSurface resized: {dev_w}x{dev_h} (ratio {self._ratio})")

    def _scale(self, value: float) -> int:
        return int(round(value * self._ratio))

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        x1, y1 = self._scale(x), self._scale(y)
        x2, y2 = self._scale(x + w), self._scale(y + h)
        draw_rect(self._buffer, x1, y1, x2 - x1, y2 - y1, self._background.as_tuple())

    def fill_text(self, text: str, cx: float, cy: float, color: Color, font_size: int) -> None:
        mask = self._glyphs.mask(text, max(1, self._scale(font_size)))
        if mask.size == 0:
            return
        mask_h, mask_w = mask.shape
        x = int(round(cx * self._ratio - mask_w / 2))
        y = int(round(cy * self._ratio - mask_h / 2))
        draw_mask(self._buffer, mask, x, y, color.as_tuple())

    def get_buffer(self) -> NDArray[np.uint8]:
        """Get copy of current buffer."""
        return self._buffer.copy()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._buffer)

    def save(self, path: str | Path) -> Path:
        """Write the buffer as an image file."""
        path = Path(path)
        self.to_image().save(path)
        logger.info(f"Surface saved: {path}")
        return path
