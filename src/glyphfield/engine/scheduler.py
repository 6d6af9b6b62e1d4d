"""
Frame scheduling for the glyph grid.

One per-frame callback drives everything. Inside it two cadences run:
the render cadence (every frame) and the scramble cadence, throttled to
a fixed interval by :class:`ScrambleCadence`. Resize requests are
debounced against the same frame clock by :class:`Debouncer`.
"""

from typing import Any, Awaitable, Callable, Optional
import asyncio
import logging
import time

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], Any]
Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Monotonic timestamp in milliseconds."""
    return time.perf_counter() * 1000.0


class ScrambleCadence:
    """Shared throttle for scramble ticks.

    A tick is due when at least ``interval_ms`` has passed since the last
    due tick. The check itself consumes the tick, so call it once per frame.
    """

    def __init__(self, interval_ms: float) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self._last = 0.0

    def due(self, now: float) -> bool:
        """Check and consume a scramble tick at ``now``."""
        if now - self._last >= self.interval_ms:
            self._last = now
            return True
        return False


class Debouncer:
    """Defers a call until ``delay_ms`` passes without a newer request.

    Each :meth:`request` replaces the pending arguments and re-arms the
    deadline. :meth:`poll` runs the callback at most once per burst.
    """

    def __init__(self, delay_ms: float, callback: Callable[..., Any]) -> None:
        self.delay_ms = delay_ms
        self._callback = callback
        self._deadline: Optional[float] = None
        self._args: tuple[Any, ...] = ()

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def request(self, now: float, *args: Any) -> None:
        """Schedule the callback, cancelling any pending one."""
        self._deadline = now + self.delay_ms
        self._args = args

    def poll(self, now: float) -> bool:
        """Run the callback if its deadline has passed.

        Returns:
            True if the callback ran
        """
        if self._deadline is None or now < self._deadline:
            return False
        args = self._args
        self.cancel()
        self._callback(*args)
        return True

    def cancel(self) -> None:
        self._deadline = None
        self._args = ()


class FrameScheduler:
    """Repeating per-frame loop.

    ``frame(now)`` performs one frame of work. ``run()`` keeps requesting
    frames from the host, awaiting ``wait_frame`` between them, until
    ``stop()`` is called.

    Args:
        callback: Called with the frame timestamp in milliseconds
        fps: Target rate for the default frame wait
        clock: Millisecond clock; defaults to a monotonic clock
        wait_frame: Awaitable factory yielding until the next frame
    """

    def __init__(
        self,
        callback: FrameCallback,
        fps: float = 60.0,
        clock: Optional[Clock] = None,
        wait_frame: Optional[Callable[[], Awaitable[Any]]] = None,
    ) -> None:
        self._callback = callback
        self._fps = fps
        self._clock = clock or monotonic_ms
        self._wait_frame = wait_frame or self._sleep_frame
        self._running = False
        self._frame_count = 0

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def frame(self, now: Optional[float] = None) -> Any:
        """Run one frame at ``now`` (defaults to the clock)."""
        if now is None:
            now = self._clock()
        self._frame_count += 1
        return self._callback(now)

    async def _sleep_frame(self) -> None:
        await asyncio.sleep(1.0 / self._fps)

    async def run(self) -> None:
        """Run frames until stopped."""
        self._running = True
        logger.info(f"FrameScheduler started ({self._fps:g} fps)")

        while self._running:
            self.frame()
            await self._wait_frame()

        logger.info(f"FrameScheduler stopped after {self._frame_count} frames")

    def stop(self) -> None:
        """Stop requesting frames."""
        self._running = False
