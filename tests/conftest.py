"""Shared fixtures for GLYPHFIELD tests."""

import random

import pytest

from glyphfield.animation.color import Color
from glyphfield.engine.engine import GlyphFieldEngine
from glyphfield.settings import Settings, WindowSettings
from glyphfield.surface.base import Surface

# 198 / 22 = 9, plus one margin row and column
GRID_SIZE = 10
VIEWPORT = 198


class RecordingSurface(Surface):
    """Surface that records draw calls instead of rasterising."""

    def __init__(self, width: float = VIEWPORT, height: float = VIEWPORT, pixel_ratio: float = 1.0) -> None:
        self._width = float(width)
        self._height = float(height)
        self._ratio = pixel_ratio
        self.cleared: list[tuple[float, float, float, float]] = []
        self.texts: list[tuple[str, float, float, Color, int]] = []
        self.resizes: list[tuple[float, float, float]] = []

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def pixel_ratio(self) -> float:
        return self._ratio

    def resize(self, width: float, height: float, pixel_ratio: float = 1.0) -> None:
        self._width = float(width)
        self._height = float(height)
        self._ratio = pixel_ratio
        self.resizes.append((width, height, pixel_ratio))

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.cleared.append((x, y, w, h))

    def fill_text(self, text: str, cx: float, cy: float, color: Color, font_size: int) -> None:
        self.texts.append((text, cx, cy, color, font_size))

    def reset_calls(self) -> None:
        self.cleared.clear()
        self.texts.clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        seed=1234,
        window=WindowSettings(width=VIEWPORT, height=VIEWPORT),
    )


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def engine(surface: RecordingSurface, settings: Settings) -> GlyphFieldEngine:
    eng = GlyphFieldEngine(surface, settings, rng=random.Random(1234), clock=lambda: 0.0)
    surface.reset_calls()
    return eng
