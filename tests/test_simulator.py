"""Tests for the pygame simulator host, run against SDL's dummy drivers."""

import logging

import pygame
import pytest

from glyphfield.animation.color import Color
from glyphfield.core.events import pointer_move_event
from glyphfield.engine.engine import GlyphFieldEngine
from glyphfield.simulator.surface import PygameSurface
from glyphfield.simulator.window import SimulatorWindow

BACKGROUND = Color(17, 17, 17)


@pytest.fixture(autouse=True)
def headless_sdl(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


class ScriptedWindow(SimulatorWindow):
    """Moves the mouse on the first frame and stops on the second."""

    active_after_move = None

    def _render(self) -> None:
        super()._render()
        if self._frame_count == 0:
            pygame.event.post(pygame.event.Event(
                pygame.MOUSEMOTION, pos=(120, 115), rel=(0, 0), buttons=(0, 0, 0)
            ))
        elif self._frame_count == 1:
            self.active_after_move = self.engine.active_count
            self.stop()


class TestSimulatorWindow:
    """Tests for SimulatorWindow."""

    async def test_mouse_motion_reaches_engine(self, settings):
        window = ScriptedWindow(settings=settings)
        await window.run()

        assert window.active_after_move == 9
        assert not window.engine.scheduler.is_running
        assert window.engine.scheduler.frame_count == 2

    async def test_cleanup_runs_when_loop_fails(self, settings, monkeypatch):
        async def failing_run(self):
            raise RuntimeError("frame failed")

        monkeypatch.setattr(GlyphFieldEngine, "run", failing_run)
        window = SimulatorWindow(settings=settings)
        handler = window._log_handler

        with pytest.raises(RuntimeError):
            await window.run()

        assert handler not in logging.getLogger().handlers
        assert window._detach is None
        assert not pygame.get_init()

    async def test_stop_detaches_engine(self, settings):
        window = ScriptedWindow(settings=settings)
        await window.run()

        # Bus no longer reaches the engine after shutdown
        active = window.engine.active_count
        window.event_bus.emit(pointer_move_event(10, 10))
        assert window.engine.active_count == active


class TestPygameSurface:
    """Tests for the offscreen pygame canvas."""

    def _pixel(self, surface: PygameSurface, x: int, y: int) -> tuple[int, int, int]:
        return tuple(surface.canvas.get_at((x, y)))[:3]

    def test_device_size(self):
        surface = PygameSurface(100, 50, pixel_ratio=2.0, background=BACKGROUND)
        assert surface.canvas.get_size() == (200, 100)
        assert self._pixel(surface, 0, 0) == BACKGROUND.as_tuple()

    def test_adjacent_clears_leave_no_seam(self):
        surface = PygameSurface(9, 3, pixel_ratio=1.5, background=BACKGROUND)
        surface.canvas.fill((255, 255, 255))

        surface.clear_rect(3, 0, 3, 3)
        surface.clear_rect(6, 0, 3, 3)

        # 3 * 1.5 = 4.5 up to 9 * 1.5 = 13.5
        for x in range(5, 13):
            assert self._pixel(surface, x, 1) == BACKGROUND.as_tuple(), x
        assert self._pixel(surface, 2, 1) == (255, 255, 255)
