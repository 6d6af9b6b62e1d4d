"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from glyphfield.animation.color import Color
from glyphfield.settings import AnimationSettings, GridSettings, Settings


class TestDefaults:
    """Tests for default values."""

    def test_grid(self):
        grid = GridSettings()
        assert grid.cell_size == 22
        assert grid.font_size == 14
        assert grid.neighborhood_radius == 1

    def test_animation(self):
        anim = AnimationSettings()
        assert anim.base == Color(224, 224, 224)
        assert anim.hover == Color(136, 136, 136)
        assert anim.scramble_interval_ms == pytest.approx(50.0)
        assert anim.settle_duration_ms == 400.0
        assert anim.resize_debounce_ms == 150.0
        assert (anim.scramble_ticks, anim.scramble_jitter) == (6, 3)

    def test_settings(self):
        settings = Settings()
        assert settings.env == "simulator"
        assert not settings.is_headless


class TestValidation:
    """Tests for rejected values."""

    def test_bad_colour(self):
        with pytest.raises(ValidationError):
            AnimationSettings(hover_color="#zzzzzz")

    def test_colour_normalised(self):
        assert AnimationSettings(base_color="#ABC").base_color == "#aabbcc"

    def test_unknown_easing(self):
        with pytest.raises(ValidationError):
            AnimationSettings(settle_easing="wobble")

    def test_empty_symbols(self):
        with pytest.raises(ValidationError):
            GridSettings(symbols="")

    def test_non_positive_cell_size(self):
        with pytest.raises(ValidationError):
            GridSettings(cell_size=0)

    def test_non_positive_settle_duration(self):
        with pytest.raises(ValidationError):
            AnimationSettings(settle_duration_ms=0)


class TestEnvironment:
    """Tests for environment overrides."""

    def test_prefixed_override(self, monkeypatch):
        monkeypatch.setenv("GLYPHFIELD_ENV", "headless")
        monkeypatch.setenv("GLYPHFIELD_SEED", "99")
        settings = Settings()
        assert settings.is_headless
        assert settings.seed == 99

    def test_nested_override(self, monkeypatch):
        monkeypatch.setenv("GLYPHFIELD_ANIMATION__SETTLE_DURATION_MS", "600")
        monkeypatch.setenv("GLYPHFIELD_GRID__CELL_SIZE", "30")
        settings = Settings()
        assert settings.animation.settle_duration_ms == 600.0
        assert settings.grid.cell_size == 30
