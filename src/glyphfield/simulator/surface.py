"""
Pygame drawing surface for the simulator.

Cells are drawn onto an offscreen canvas that persists between frames;
the window blits the canvas every frame, so only dirty cells are repainted.
"""

import logging
import os

import pygame

from glyphfield.animation.color import Color
from glyphfield.surface.base import Surface

logger = logging.getLogger(__name__)

# Font files tried in order before falling back to system monospace fonts
MONOSPACE_FONT_PATHS = [
    "/usr/share/fonts/truetype/jetbrains-mono/JetBrainsMono-Regular.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/System/Library/Fonts/Menlo.ttc",
    "/Library/Fonts/JetBrainsMono-Regular.ttf",
]
MONOSPACE_SYSFONTS = ["JetBrains Mono", "DejaVu Sans Mono", "Menlo", "Consolas", "Courier New"]


class PygameSurface(Surface):
    """Offscreen pygame canvas sized to the window times the pixel ratio."""

    def __init__(
        self,
        width: float,
        height: float,
        pixel_ratio: float = 1.0,
        background: Color = Color(0, 0, 0),
    ) -> None:
        self._background = background
        self._fonts: dict[int, pygame.font.Font] = {}
        self._width = 0.0
        self._height = 0.0
        self._ratio = 1.0
        self._canvas = pygame.Surface((1, 1))
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
    def canvas(self) -> pygame.Surface:
        return self._canvas

    def resize(self, width: float, height: float, pixel_ratio: float = 1.0) -> None:
        self._width = float(width)
        self._height = float(height)
        self._ratio = pixel_ratio or 1.0
        self._canvas = pygame.Surface(self.device_size)
        self._canvas.fill(self._background.as_tuple())
        logger.debug(f"PygameSurface resized: {self.device_size}")

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is not None:
            return font

        for font_path in MONOSPACE_FONT_PATHS:
            if os.path.exists(font_path):
                try:
                    font = pygame.font.Font(font_path, size)
                    logger.info(f"Using font: {font_path}")
                    break
                except (OSError, pygame.error) as e:
                    logger.debug(f"Font {font_path} failed: {e}")

        if font is None:
            font = pygame.font.SysFont(MONOSPACE_SYSFONTS, size)

        self._fonts[size] = font
        return font

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        r = self._ratio
        # Round edges, not sizes, so adjacent cells share a boundary
        x1, y1 = round(x * r), round(y * r)
        x2, y2 = round((x + w) * r), round((y + h) * r)
        rect = pygame.Rect(x1, y1, x2 - x1, y2 - y1)
        self._canvas.fill(self._background.as_tuple(), rect)

    def fill_text(self, text: str, cx: float, cy: float, color: Color, font_size: int) -> None:
        font = self._font(max(1, round(font_size * self._ratio)))
        glyph = font.render(text, True, color.as_tuple())
        rect = glyph.get_rect(center=(round(cx * self._ratio), round(cy * self._ratio)))
        self._canvas.blit(glyph, rect)
