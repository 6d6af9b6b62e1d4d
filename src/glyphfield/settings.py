"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested groups are addressed with a double underscore, e.g.
``GLYPHFIELD_ANIMATION__SETTLE_DURATION_MS=600``.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from glyphfield.animation.color import Color
from glyphfield.animation.easing import get_easing
from glyphfield.animation.glyphs import DEFAULT_SYMBOLS


def _validate_hex(value: str) -> str:
    return Color.from_hex(value).to_hex()


class GridSettings(BaseSettings):
    """Grid geometry and glyph alphabet."""

    cell_size: int = Field(default=22, gt=0)  # px per grid cell
    font_size: int = Field(default=14, gt=0)
    symbols: str = DEFAULT_SYMBOLS
    neighborhood_radius: int = Field(default=1, ge=0)  # 1 -> 3x3 block

    @field_validator("symbols")
    @classmethod
    def symbols_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("symbol alphabet must not be empty")
        return value


class AnimationSettings(BaseSettings):
    """Scramble and settle timing."""

    base_color: str = "#e0e0e0"   # resting symbol colour
    hover_color: str = "#888888"  # darkened during scramble

    scramble_ticks: int = Field(default=6, ge=0)
    scramble_jitter: int = Field(default=3, ge=0)  # extra ticks drawn from [0, jitter)
    scramble_fps: float = Field(default=20.0, gt=0)
    settle_duration_ms: float = Field(default=400.0, gt=0)
    settle_easing: str = "ease_out_cubic"

    resize_debounce_ms: float = Field(default=150.0, ge=0)

    @field_validator("base_color", "hover_color")
    @classmethod
    def check_colors(cls, value: str) -> str:
        return _validate_hex(value)

    @field_validator("settle_easing")
    @classmethod
    def known_easing(cls, value: str) -> str:
        get_easing(value)
        return value.lower()

    @property
    def base(self) -> Color:
        return Color.from_hex(self.base_color)

    @property
    def hover(self) -> Color:
        return Color.from_hex(self.hover_color)

    @property
    def scramble_interval_ms(self) -> float:
        """Milliseconds between scramble ticks."""
        return 1000.0 / self.scramble_fps


class WindowSettings(BaseSettings):
    """Simulator window settings."""

    width: int = Field(default=1280, gt=0)
    height: int = Field(default=720, gt=0)
    title: str = "Glyphfield"
    fps: int = Field(default=60, gt=0)
    fullscreen: bool = False
    pixel_ratio: float = Field(default=1.0, gt=0)
    background_color: str = "#111111"

    @field_validator("background_color")
    @classmethod
    def check_background(cls, value: str) -> str:
        return _validate_hex(value)

    @property
    def background(self) -> Color:
        return Color.from_hex(self.background_color)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GLYPHFIELD_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    env: Literal["simulator", "headless"] = "simulator"
    debug: bool = False
    seed: Optional[int] = None

    # Nested settings
    grid: GridSettings = Field(default_factory=GridSettings)
    animation: AnimationSettings = Field(default_factory=AnimationSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)

    @property
    def is_headless(self) -> bool:
        """Check if running without a window."""
        return self.env == "headless"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
