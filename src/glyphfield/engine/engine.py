"""Glyph grid animation engine.

The engine owns the grid store, the dirty set and the pointer tracker.
Pointer input activates cells between frames; every frame walks only the
dirty set, advances each cell's state machine and redraws what changed.
"""

from typing import Any, Awaitable, Callable, Optional
import logging
import random

from glyphfield.animation.glyphs import GlyphSource
from glyphfield.animation.easing import get_easing
from glyphfield.core.events import Event, EventBus, EventType
from glyphfield.engine.scheduler import (
    Clock,
    Debouncer,
    FrameScheduler,
    ScrambleCadence,
    monotonic_ms,
)
from glyphfield.graphics.renderer import GridRenderer
from glyphfield.grid.cell import CellState
from glyphfield.grid.dirty import DirtySet, GridCoord
from glyphfield.grid.store import GridStore
from glyphfield.grid.tracker import PointerTracker
from glyphfield.settings import Settings, get_settings
from glyphfield.surface.base import Surface

logger = logging.getLogger(__name__)


class GlyphFieldEngine:
    """Interactive glyph grid.

    Construct with :meth:`create` from host code so a missing surface
    leaves the engine unstarted instead of failing.
    """

    def __init__(
        self,
        surface: Surface,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
        wait_frame: Optional[Callable[[], Awaitable[Any]]] = None,
    ) -> None:
        self.settings = settings or get_settings()
        grid = self.settings.grid
        anim = self.settings.animation

        self.surface = surface
        self.clock = clock or monotonic_ms
        self._rng = rng or random.Random(self.settings.seed)
        self.glyphs = GlyphSource(grid.symbols, self._rng)

        self.base_color = anim.base
        self.hover_color = anim.hover
        self._easing = get_easing(anim.settle_easing)

        self.renderer = GridRenderer(surface, grid.cell_size, grid.font_size)
        self.tracker = PointerTracker(grid.cell_size)
        self.dirty = DirtySet()
        self.cadence = ScrambleCadence(anim.scramble_interval_ms)
        self._resize = Debouncer(anim.resize_debounce_ms, self._apply_resize)
        self.scheduler = FrameScheduler(
            self.frame,
            fps=self.settings.window.fps,
            clock=self.clock,
            wait_frame=wait_frame,
        )

        self.store = self._build_store()
        self.rebuild_count = 0
        self.renderer.full_draw(self.store)

        logger.info(
            f"GlyphFieldEngine initialized: {self.store.rows}x{self.store.cols} cells"
        )

    @classmethod
    def create(
        cls,
        surface: Optional[Surface],
        settings: Optional[Settings] = None,
        **kwargs,
    ) -> Optional["GlyphFieldEngine"]:
        """Build an engine, or return None when there is no surface to draw on."""
        if surface is None:
            logger.warning("No drawing surface available, engine not started")
            return None
        return cls(surface, settings=settings, **kwargs)

    # Grid lifecycle
    def _build_store(self) -> GridStore:
        return GridStore.for_viewport(
            self.surface.width,
            self.surface.height,
            self.settings.grid.cell_size,
            self.glyphs,
            self.base_color,
        )

    def rebuild(self) -> None:
        """Replace the grid wholesale and repaint.

        All in-flight animations are discarded with the old cells.
        """
        discarded = len(self.dirty)
        self.store = self._build_store()
        self.dirty.clear()
        self.tracker.reset()
        self.renderer.full_draw(self.store)
        self.rebuild_count += 1
        logger.info(
            f"Grid rebuilt: {self.store.rows}x{self.store.cols} cells "
            f"({discarded} animations discarded)"
        )

    def request_resize(
        self,
        width: float,
        height: float,
        pixel_ratio: float = 1.0,
        now: Optional[float] = None,
    ) -> None:
        """Schedule a debounced resize; a newer request replaces this one."""
        if now is None:
            now = self.clock()
        self._resize.request(now, width, height, pixel_ratio)
        logger.debug(f"Resize requested: {width}x{height} @ {pixel_ratio}")

    @property
    def resize_pending(self) -> bool:
        return self._resize.pending

    def _apply_resize(self, width: float, height: float, pixel_ratio: float) -> None:
        self.surface.resize(width, height, pixel_ratio)
        self.rebuild()

    # Pointer input
    def pointer_move(self, x: float, y: float) -> int:
        """
        Handle a pointer move in surface-relative coordinates.

        Returns:
            Number of cells activated
        """
        coord = self.tracker.move(x, y)
        if coord is None:
            return 0
        return self.activate_neighborhood(coord)

    def pointer_leave(self) -> None:
        self.tracker.leave()

    def activate_neighborhood(self, center: GridCoord) -> int:
        """Activate the idle cells in the block around ``center``."""
        radius = self.settings.grid.neighborhood_radius
        return sum(
            1 for coord in self.store.neighborhood(center, radius)
            if self.activate(coord)
        )

    def activate(self, coord: GridCoord) -> bool:
        """
        Start scrambling an idle cell.

        Returns:
            True if the cell was idle and is now scrambling
        """
        if not self.store.in_bounds(*coord):
            return False
        cell = self.store[coord]
        if not cell.is_idle:
            return False

        anim = self.settings.animation
        ticks = anim.scramble_ticks + self.glyphs.jitter(anim.scramble_jitter)
        cell.begin_scramble(ticks, self.hover_color)
        self.dirty.add(coord)
        return True

    # Frame processing
    def frame(self, now: float) -> int:
        """
        Advance every dirty cell by one frame.

        Args:
            now: Frame timestamp in milliseconds

        Returns:
            Number of cells redrawn
        """
        self._resize.poll(now)

        scramble_due = self.cadence.due(now)
        anim = self.settings.animation
        redrawn = 0
        to_remove: list[GridCoord] = []

        for coord in self.dirty.snapshot():
            if not self.store.in_bounds(*coord):
                # Stale after a resize shrank the grid
                to_remove.append(coord)
                continue

            cell = self.store[coord]
            if cell.state is CellState.SCRAMBLING:
                if scramble_due:
                    cell.scramble_tick(self.glyphs.next(), self.hover_color, now)
                    self.renderer.draw_cell(self.store, coord)
                    redrawn += 1
            elif cell.state is CellState.SETTLING:
                finished = cell.settle(
                    now,
                    anim.settle_duration_ms,
                    self.hover_color,
                    self.base_color,
                    self._easing,
                )
                self.renderer.draw_cell(self.store, coord)
                redrawn += 1
                if finished:
                    to_remove.append(coord)
            else:
                to_remove.append(coord)

        self.dirty.discard_all(to_remove)
        return redrawn

    @property
    def active_count(self) -> int:
        """Number of cells currently animating."""
        return len(self.dirty)

    # Lifecycle
    async def run(self) -> None:
        """Drive frames until :meth:`stop`."""
        await self.scheduler.run()

    def stop(self) -> None:
        """Stop requesting frames; pending resizes are dropped."""
        self.scheduler.stop()
        self._resize.cancel()
        logger.info("GlyphFieldEngine stopped")

    def attach(self, event_bus: EventBus) -> Callable[[], None]:
        """
        Subscribe the engine to pointer, resize and shutdown events.

        Returns:
            Function that detaches all subscriptions
        """
        def on_move(event: Event) -> None:
            self.pointer_move(event.data["x"], event.data["y"])

        def on_leave(event: Event) -> None:
            self.pointer_leave()

        def on_resize(event: Event) -> None:
            self.request_resize(
                event.data["width"],
                event.data["height"],
                event.data.get("pixel_ratio", 1.0),
            )

        def on_shutdown(event: Event) -> None:
            self.stop()

        unsubscribers = [
            event_bus.subscribe(EventType.POINTER_MOVE, on_move),
            event_bus.subscribe(EventType.POINTER_LEAVE, on_leave),
            event_bus.subscribe(EventType.RESIZE, on_resize),
            event_bus.subscribe(EventType.SHUTDOWN, on_shutdown),
        ]

        def detach() -> None:
            for unsubscribe in unsubscribers:
                unsubscribe()

        return detach
