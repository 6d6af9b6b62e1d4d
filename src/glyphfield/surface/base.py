"""
Abstract base class for drawing surfaces.

Both the headless buffer surface and the simulator's pygame surface follow
this contract. Coordinates are in client (CSS-like) pixels; implementations
scale by ``pixel_ratio`` when they touch device pixels.
"""

from abc import ABC, abstractmethod

from glyphfield.animation.color import Color


class Surface(ABC):
    """Abstract base class for glyph drawing surfaces."""

    @property
    @abstractmethod
    def width(self) -> float:
        """Client width in pixels."""
        ...

    @property
    @abstractmethod
    def height(self) -> float:
        """Client height in pixels."""
        ...

    @property
    @abstractmethod
    def pixel_ratio(self) -> float:
        """Device pixels per client pixel."""
        ...

    @abstractmethod
    def resize(self, width: float, height: float, pixel_ratio: float = 1.0) -> None:
        """Resize the backing store to ``width * pixel_ratio`` by ``height * pixel_ratio``."""
        ...

    @abstractmethod
    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Clear a rectangle back to the background."""
        ...

    @abstractmethod
    def fill_text(self, text: str, cx: float, cy: float, color: Color, font_size: int) -> None:
        """Draw ``text`` centred on (cx, cy) in ``color``."""
        ...

    def clear(self) -> None:
        """Clear the whole surface."""
        self.clear_rect(0, 0, self.width, self.height)

    @property
    def device_size(self) -> tuple[int, int]:
        """Backing store size in device pixels (width, height)."""
        return (
            int(round(self.width * self.pixel_ratio)),
            int(round(self.height * self.pixel_ratio)),
        )
