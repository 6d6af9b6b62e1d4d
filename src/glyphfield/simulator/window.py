"""
Simulator window using pygame.

Hosts the glyph grid in a resizable desktop window and feeds it pointer
and resize events through the event bus.
"""

import asyncio
import logging
from typing import Callable, Optional

import pygame

from ..core.events import (
    Event,
    EventBus,
    EventType,
    pointer_leave_event,
    pointer_move_event,
    resize_event,
)
from ..engine.engine import GlyphFieldEngine
from ..grid.cell import CellState
from ..settings import Settings, get_settings
from .surface import PygameSurface

logger = logging.getLogger(__name__)

PANEL_COLOR = (40, 40, 50)
TEXT_COLOR = (200, 200, 220)


class SimulatorWindow:
    """
    Desktop window hosting the glyph grid.

    Keyboard Mapping:
        D: Toggle debug overlay
        L: Toggle log viewer
        S: Capture screenshot
        ESC / Q: Exit simulator
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.event_bus = event_bus or EventBus()

        # Pygame setup
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._frame_count = 0
        self._show_debug = self.settings.debug

        self.surface: Optional[PygameSurface] = None
        self.engine: Optional[GlyphFieldEngine] = None
        self._detach: Optional[Callable[[], None]] = None

        # Fonts
        self._small_font: Optional[pygame.font.Font] = None

        # Log viewer
        self._show_log = False
        self._log_buffer: list[str] = []
        self._max_log_lines = 20
        self._log_handler: Optional[logging.Handler] = None

        self._setup_log_capture()

        logger.info("SimulatorWindow created")

    def _setup_log_capture(self) -> None:
        """Setup log capturing for the log viewer."""
        class SimulatorLogHandler(logging.Handler):
            def __init__(self, window: 'SimulatorWindow'):
                super().__init__()
                self.window = window

            def emit(self, record):
                msg = self.format(record)
                self.window._log_buffer.append(msg)
                # Keep buffer size limited
                if len(self.window._log_buffer) > self.window._max_log_lines * 2:
                    self.window._log_buffer = self.window._log_buffer[-self.window._max_log_lines:]

        handler = SimulatorLogHandler(self)
        handler.setFormatter(logging.Formatter('%(levelname).1s %(name)s: %(message)s'))
        logging.getLogger().addHandler(handler)
        self._log_handler = handler

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        config = self.settings.window
        pygame.init()
        pygame.display.set_caption(config.title)

        flags = pygame.RESIZABLE
        if config.fullscreen:
            flags = pygame.FULLSCREEN

        self._screen = pygame.display.set_mode((config.width, config.height), flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._small_font = pygame.font.SysFont(None, 18)

        width, height = self._screen.get_size()
        self.surface = PygameSurface(
            width,
            height,
            config.pixel_ratio,
            background=config.background,
        )

        logger.info(f"Pygame initialized: {width}x{height}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEMOTION:
                x, y = event.pos
                self.event_bus.queue_event(pointer_move_event(x, y, source="mouse"))

            elif event.type == pygame.WINDOWLEAVE:
                self.event_bus.queue_event(pointer_leave_event(source="mouse"))

            elif event.type == pygame.VIDEORESIZE:
                self.event_bus.queue_event(resize_event(
                    event.w, event.h, self.settings.window.pixel_ratio
                ))

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self.stop()
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_l:
            self._show_log = not self._show_log
        elif key == pygame.K_s:
            self._capture_screenshot()

    def _render(self) -> None:
        """Present the glyph canvas and overlays."""
        if not self._screen or not self.surface:
            return

        canvas = self.surface.canvas
        if canvas.get_size() != self._screen.get_size():
            canvas = pygame.transform.smoothscale(canvas, self._screen.get_size())
        self._screen.blit(canvas, (0, 0))

        if self._show_debug:
            self._render_debug_panel()
        if self._show_log:
            self._render_log_panel()

        pygame.display.flip()

    def _debug_lines(self) -> list[str]:
        lines = [f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --"]
        if self.engine:
            store = self.engine.store
            lines += [
                f"Frame: {self.engine.scheduler.frame_count}",
                f"Grid: {store.rows}x{store.cols}",
                f"Active: {self.engine.active_count}",
                f"Scrambling: {store.count(CellState.SCRAMBLING)}",
                f"Settling: {store.count(CellState.SETTLING)}",
                f"Cells drawn: {self.engine.renderer.cells_drawn}",
                f"Full draws: {self.engine.renderer.full_draws}",
                f"Rebuilds: {self.engine.rebuild_count}"
                + (" (resize pending)" if self.engine.resize_pending else ""),
            ]
        return lines

    def _render_debug_panel(self) -> None:
        """Render the debug information panel."""
        if not self._small_font:
            return

        lines = self._debug_lines()
        rect = pygame.Rect(10, 10, 200, 16 * len(lines) + 12)

        surf = pygame.Surface(rect.size, pygame.SRCALPHA)
        surf.fill((*PANEL_COLOR, 220))
        self._screen.blit(surf, rect.topleft)

        y = rect.y + 6
        for line in lines:
            text_surface = self._small_font.render(line, True, TEXT_COLOR)
            self._screen.blit(text_surface, (rect.x + 8, y))
            y += 16

    def _render_log_panel(self) -> None:
        """Render the log viewer panel."""
        if not self._small_font:
            return

        width, height = self._screen.get_size()
        rect = pygame.Rect(10, height - 16 * self._max_log_lines - 30, min(520, width - 20), 16 * self._max_log_lines + 20)

        # Semi-transparent background
        surf = pygame.Surface(rect.size, pygame.SRCALPHA)
        surf.fill((20, 25, 35, 230))
        self._screen.blit(surf, rect.topleft)
        pygame.draw.rect(self._screen, (60, 80, 100), rect, 1, border_radius=5)

        y = rect.y + 8
        for line in self._log_buffer[-self._max_log_lines:]:
            # Color code by level
            if line.startswith('E'):
                color = (255, 100, 100)  # Error - red
            elif line.startswith('W'):
                color = (255, 200, 100)  # Warning - yellow
            elif line.startswith('I'):
                color = (150, 200, 150)  # Info - green
            else:
                color = (150, 150, 170)  # Debug - gray

            display_line = line[:77] + "..." if len(line) > 80 else line
            text_surf = self._small_font.render(display_line, True, color)
            self._screen.blit(text_surf, (rect.x + 8, y))
            y += 16

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    async def _next_frame(self) -> None:
        """Yield until the next display frame."""
        self._handle_events()
        # Input lands on the engine between frames
        await self.event_bus.process_queue()
        self._render()

        if self._clock:
            self._clock.tick(self.settings.window.fps)
        self._frame_count += 1

        # Yield to other tasks
        await asyncio.sleep(0)

    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self.engine = GlyphFieldEngine.create(
            self.surface,
            self.settings,
            wait_frame=self._next_frame,
        )
        if self.engine is None:
            self._cleanup()
            return

        self._detach = self.engine.attach(self.event_bus)
        logger.info("Simulator started")

        try:
            await self.engine.run()
        finally:
            self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        if self._detach:
            self._detach()
            self._detach = None
        if self._log_handler:
            logging.getLogger().removeHandler(self._log_handler)
            self._log_handler = None
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self.event_bus.emit(Event(EventType.SHUTDOWN, source="simulator"))
